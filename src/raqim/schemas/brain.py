from datetime import datetime, timezone
from enum import StrEnum

from pydantic import BaseModel, Field


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ProjectStatus(StrEnum):
    ACTIVE = "active"
    COMPLETED = "completed"
    PAUSED = "paused"


class DecisionStatus(StrEnum):
    PENDING = "pending"
    IMPLEMENTED = "implemented"
    REJECTED = "rejected"


class Project(BaseModel):
    id: str
    name: str
    description: str = ""
    status: ProjectStatus = ProjectStatus.ACTIVE
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)


class ProjectCreate(BaseModel):
    name: str = Field(min_length=1)
    description: str = ""


class Session(BaseModel):
    id: str
    project_id: str | None = None
    title: str
    summary: str = ""
    message_count: int = 0
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)


class SessionCreate(BaseModel):
    title: str = Field(min_length=1)
    project_id: str | None = None
    summary: str = ""


class Decision(BaseModel):
    id: str
    project_id: str | None = None
    session_id: str | None = None
    title: str
    description: str = ""
    reasoning: str = ""
    outcome: str = ""
    status: DecisionStatus = DecisionStatus.PENDING
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)


class DecisionCreate(BaseModel):
    title: str = Field(min_length=1)
    project_id: str | None = None
    session_id: str | None = None
    description: str = ""
    reasoning: str = ""
    outcome: str = ""
    status: DecisionStatus = DecisionStatus.PENDING


class BrainStats(BaseModel):
    projects_count: int = 0
    sessions_count: int = 0
    decisions_count: int = 0
    active_projects: int = 0
    pending_decisions: int = 0
    implemented_decisions: int = 0
