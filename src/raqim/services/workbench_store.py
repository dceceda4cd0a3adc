"""Content-creation workflows and their per-stage working state.

A workflow moves through six ordered stages (idea to schedule). Each stage
keeps its own draft content, metadata and status; saving a stage makes it the
workflow's current stage.
"""

import logging
import uuid
from datetime import datetime, timezone

from raqim.exceptions import WorkflowNotFoundError
from raqim.schemas.workbench import (
    StageDefinition,
    StageMetadata,
    StageStatus,
    StageType,
    Workflow,
    WorkflowCreate,
    WorkflowDetail,
    WorkflowState,
    WorkflowStateSave,
)

logger = logging.getLogger(__name__)

STAGE_DEFINITIONS: list[StageDefinition] = [
    StageDefinition(stage=StageType.IDEA, name="الفكرة", description="توليد الأفكار والإلهام", order=1),
    StageDefinition(stage=StageType.RESEARCH, name="البحث", description="جمع المعلومات والمصادر", order=2),
    StageDefinition(stage=StageType.OUTLINE, name="المخطط", description="إنشاء هيكل المحتوى", order=3),
    StageDefinition(stage=StageType.DRAFT, name="المسودة", description="كتابة المحتوى الأولي", order=4),
    StageDefinition(stage=StageType.IMPROVE, name="التحسين", description="مراجعة وتحسين المحتوى", order=5),
    StageDefinition(stage=StageType.SCHEDULE, name="الجدولة", description="جدولة النشر", order=6),
]


class WorkbenchStore:
    def __init__(self) -> None:
        self._workflows: dict[str, Workflow] = {}
        # (workflow_id, stage) -> state
        self._states: dict[tuple[str, StageType], WorkflowState] = {}

    @staticmethod
    def stages() -> list[StageDefinition]:
        return list(STAGE_DEFINITIONS)

    def list_workflows(self) -> list[Workflow]:
        return list(self._workflows.values())

    def get_workflow(self, workflow_id: str) -> WorkflowDetail:
        workflow = self._workflows.get(workflow_id)
        if workflow is None:
            raise WorkflowNotFoundError(f"Workflow {workflow_id} not found")
        states = [s for (wid, _), s in self._states.items() if wid == workflow_id]
        return WorkflowDetail(workflow=workflow, states=states)

    def create_workflow(self, data: WorkflowCreate) -> Workflow:
        """Create a workflow at the idea stage with an empty state per stage."""
        workflow = Workflow(id=uuid.uuid4().hex, **data.model_dump())
        self._workflows[workflow.id] = workflow

        now = datetime.now(timezone.utc)
        for definition in STAGE_DEFINITIONS:
            self._states[(workflow.id, definition.stage)] = WorkflowState(
                id=uuid.uuid4().hex,
                workflow_id=workflow.id,
                stage=definition.stage,
                status=StageStatus.NOT_STARTED,
                created_at=now,
                updated_at=now,
            )
        logger.info("Workflow %s created (%s)", workflow.id, workflow.type)
        return workflow

    def save_state(self, data: WorkflowStateSave) -> WorkflowState:
        """Create or update the state of one stage.

        On update, metadata keys are merged into the stored metadata and
        fields left as None keep their stored value.
        """
        key = (data.workflow_id, data.stage)
        now = datetime.now(timezone.utc)
        existing = self._states.get(key)

        if existing is None:
            state = WorkflowState(
                id=uuid.uuid4().hex,
                workflow_id=data.workflow_id,
                stage=data.stage,
                content=data.content or "",
                metadata=data.metadata or StageMetadata(),
                status=data.status or StageStatus.IN_PROGRESS,
                created_at=now,
                updated_at=now,
            )
        else:
            metadata = existing.metadata
            if data.metadata is not None:
                metadata = metadata.model_copy(
                    update=data.metadata.model_dump(exclude_unset=True)
                )
            state = existing.model_copy(
                update={
                    "content": data.content if data.content is not None else existing.content,
                    "metadata": metadata,
                    "status": data.status or existing.status,
                    "updated_at": now,
                }
            )
        self._states[key] = state

        workflow = self._workflows.get(data.workflow_id)
        if workflow is not None:
            workflow.current_stage = data.stage
            workflow.updated_at = now
        return state

    def get_state(self, workflow_id: str, stage: StageType) -> WorkflowState:
        state = self._states.get((workflow_id, stage))
        if state is None:
            return WorkflowState(workflow_id=workflow_id, stage=stage)
        return state

    def seed_samples(self) -> None:
        """Populate the store with a demo article workflow."""
        workflow = self.create_workflow(
            WorkflowCreate(
                name="مقال عن الذكاء الاصطناعي",
                description="إنشاء مقال شامل عن تطور الذكاء الاصطناعي",
            )
        )
        self.save_state(
            WorkflowStateSave(
                workflow_id=workflow.id,
                stage=StageType.IDEA,
                content="فكرة: كتابة مقال عن تأثير الذكاء الاصطناعي على المجتمع العربي",
                metadata=StageMetadata(
                    keywords=["ذكاء اصطناعي", "تكنولوجيا", "مجتمع"],
                    target_audience="المهتمين بالتكنولوجيا",
                ),
                status=StageStatus.COMPLETED,
            )
        )
        self.save_state(
            WorkflowStateSave(
                workflow_id=workflow.id,
                stage=StageType.RESEARCH,
                content="جمع مصادر عن تطور AI في 2024...",
                metadata=StageMetadata(
                    sources=["OpenAI Blog", "MIT Technology Review"],
                    notes="التركيز على التطبيقات العملية",
                ),
                status=StageStatus.IN_PROGRESS,
            )
        )
