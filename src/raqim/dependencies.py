from fastapi import Request

from raqim.services.brain_store import BrainStore
from raqim.services.chat import ChatService
from raqim.services.workbench_store import WorkbenchStore


def get_chat_service(request: Request) -> ChatService:
    """Retrieve the ChatService singleton from app state."""
    return request.app.state.chat


def get_brain_store(request: Request) -> BrainStore:
    """Retrieve the BrainStore singleton from app state."""
    return request.app.state.brain


def get_workbench_store(request: Request) -> WorkbenchStore:
    """Retrieve the WorkbenchStore singleton from app state."""
    return request.app.state.workbench
