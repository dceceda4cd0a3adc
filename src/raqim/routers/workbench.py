from fastapi import APIRouter, Depends, HTTPException

from raqim.dependencies import get_workbench_store
from raqim.exceptions import WorkflowNotFoundError
from raqim.schemas.workbench import (
    StageDefinition,
    StageType,
    Workflow,
    WorkflowCreate,
    WorkflowDetail,
    WorkflowState,
    WorkflowStateSave,
)
from raqim.services.workbench_store import WorkbenchStore

router = APIRouter(prefix="/api/workbench", tags=["workbench"])


@router.get("/stages", response_model=list[StageDefinition])
async def list_stages(store: WorkbenchStore = Depends(get_workbench_store)) -> list[StageDefinition]:
    return store.stages()


@router.get("/workflows", response_model=list[Workflow])
async def list_workflows(store: WorkbenchStore = Depends(get_workbench_store)) -> list[Workflow]:
    return store.list_workflows()


@router.get("/workflows/{workflow_id}", response_model=WorkflowDetail)
async def get_workflow(
    workflow_id: str,
    store: WorkbenchStore = Depends(get_workbench_store),
) -> WorkflowDetail:
    try:
        return store.get_workflow(workflow_id)
    except WorkflowNotFoundError:
        raise HTTPException(status_code=404, detail="Workflow not found")


@router.post("/workflows", response_model=Workflow)
async def create_workflow(
    body: WorkflowCreate,
    store: WorkbenchStore = Depends(get_workbench_store),
) -> Workflow:
    """Create a workflow with an empty state for each stage."""
    return store.create_workflow(body)


@router.post("/state", response_model=WorkflowState)
async def save_state(
    body: WorkflowStateSave,
    store: WorkbenchStore = Depends(get_workbench_store),
) -> WorkflowState:
    """Create or update the working state of one stage."""
    return store.save_state(body)


@router.get("/state/{workflow_id}/{stage}", response_model=WorkflowState)
async def get_state(
    workflow_id: str,
    stage: StageType,
    store: WorkbenchStore = Depends(get_workbench_store),
) -> WorkflowState:
    return store.get_state(workflow_id, stage)
