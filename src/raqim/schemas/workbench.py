from datetime import datetime, timezone
from enum import StrEnum

from pydantic import BaseModel, Field


def _now() -> datetime:
    return datetime.now(timezone.utc)


class StageType(StrEnum):
    IDEA = "idea"
    RESEARCH = "research"
    OUTLINE = "outline"
    DRAFT = "draft"
    IMPROVE = "improve"
    SCHEDULE = "schedule"


class WorkflowType(StrEnum):
    CONTENT = "content"
    RESEARCH = "research"
    PROJECT = "project"


class StageStatus(StrEnum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class StageDefinition(BaseModel):
    stage: StageType
    name: str
    description: str
    order: int


class StageMetadata(BaseModel):
    notes: str | None = None
    sources: list[str] | None = None
    keywords: list[str] | None = None
    target_audience: str | None = None
    tone: str | None = None
    word_count: int | None = None
    scheduled_date: str | None = None
    platform: str | None = None


class Workflow(BaseModel):
    id: str
    project_id: str | None = None
    name: str
    description: str = ""
    type: WorkflowType = WorkflowType.CONTENT
    current_stage: StageType = StageType.IDEA
    status: str = "active"
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)


class WorkflowCreate(BaseModel):
    name: str = Field(min_length=1)
    project_id: str | None = None
    description: str = ""
    type: WorkflowType = WorkflowType.CONTENT


class WorkflowState(BaseModel):
    id: str | None = None  # None for an unsaved placeholder
    workflow_id: str
    stage: StageType
    content: str = ""
    metadata: StageMetadata = Field(default_factory=StageMetadata)
    status: StageStatus = StageStatus.NOT_STARTED
    created_at: datetime | None = None
    updated_at: datetime | None = None


class WorkflowStateSave(BaseModel):
    workflow_id: str
    stage: StageType
    content: str | None = None
    metadata: StageMetadata | None = None
    status: StageStatus | None = None


class WorkflowDetail(BaseModel):
    workflow: Workflow
    states: list[WorkflowState]
