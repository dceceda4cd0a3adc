from fastapi import APIRouter, Depends

from raqim.dependencies import get_brain_store
from raqim.schemas.brain import (
    BrainStats,
    Decision,
    DecisionCreate,
    Project,
    ProjectCreate,
    Session,
    SessionCreate,
)
from raqim.services.brain_store import BrainStore

router = APIRouter(prefix="/api/brain", tags=["brain"])


@router.get("/projects", response_model=list[Project])
async def list_projects(store: BrainStore = Depends(get_brain_store)) -> list[Project]:
    return store.list_projects()


@router.post("/projects", response_model=Project)
async def create_project(
    body: ProjectCreate,
    store: BrainStore = Depends(get_brain_store),
) -> Project:
    return store.create_project(body)


@router.get("/sessions", response_model=list[Session])
async def list_sessions(store: BrainStore = Depends(get_brain_store)) -> list[Session]:
    return store.list_sessions()


@router.post("/sessions", response_model=Session)
async def create_session(
    body: SessionCreate,
    store: BrainStore = Depends(get_brain_store),
) -> Session:
    return store.create_session(body)


@router.get("/decisions", response_model=list[Decision])
async def list_decisions(store: BrainStore = Depends(get_brain_store)) -> list[Decision]:
    return store.list_decisions()


@router.post("/decisions", response_model=Decision)
async def create_decision(
    body: DecisionCreate,
    store: BrainStore = Depends(get_brain_store),
) -> Decision:
    return store.create_decision(body)


@router.get("/stats", response_model=BrainStats)
async def stats(store: BrainStore = Depends(get_brain_store)) -> BrainStats:
    """Counters for the Brain dashboard."""
    return store.stats()
