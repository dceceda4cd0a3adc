from datetime import datetime, timezone
from enum import StrEnum

from pydantic import BaseModel, Field, field_validator

from raqim.schemas.evaluation import ScoredAspect


class MessageRole(StrEnum):
    USER = "user"
    ASSISTANT = "assistant"


class ImprovementType(StrEnum):
    SHORTER = "shorter"
    LONGER = "longer"
    RESTRUCTURE = "restructure"
    GENERAL = "general"


class MessageEvaluation(BaseModel):
    length: ScoredAspect
    repetition: ScoredAspect
    structure: ScoredAspect


class Message(BaseModel):
    id: str
    session_id: str | None = None
    role: MessageRole
    content: str
    quality_score: int | None = None
    evaluation: MessageEvaluation | None = None
    contradictions: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ChatRequest(BaseModel):
    message: str
    session_id: str | None = None
    context: str | None = None


class ChatTurnResponse(BaseModel):
    user_message: Message
    assistant_message: Message


class ImproveRequest(BaseModel):
    message_id: str
    improvement_type: ImprovementType = ImprovementType.GENERAL

    @field_validator("improvement_type", mode="before")
    @classmethod
    def _unknown_type_is_general(cls, value):
        # Unrecognised rewrite kinds fall back to a general improvement
        if isinstance(value, str) and value in {t.value for t in ImprovementType}:
            return value
        return ImprovementType.GENERAL
