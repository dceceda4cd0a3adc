from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from raqim.config import Settings
from raqim.services.brain_store import BrainStore
from raqim.services.chat import ChatService
from raqim.services.llm import LLMClient
from raqim.services.message_store import MessageStore
from raqim.services.workbench_store import WorkbenchStore


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        llm_api_key="",
        llm_base_url="http://localhost:9999",
        llm_model_name="test-model",
        chat_history_limit=10,
        seed_sample_data=False,
    )


@pytest.fixture
def mock_llm() -> MagicMock:
    """Create a mocked LLMClient that reports itself unconfigured."""
    llm = MagicMock(spec=LLMClient)
    llm.is_configured = False
    return llm


@pytest.fixture
def message_store() -> MessageStore:
    return MessageStore()


@pytest.fixture
def chat_service(mock_llm: MagicMock, message_store: MessageStore, test_settings: Settings) -> ChatService:
    return ChatService(mock_llm, message_store, test_settings)


@pytest.fixture
def brain_store() -> BrainStore:
    return BrainStore()


@pytest.fixture
def workbench_store() -> WorkbenchStore:
    return WorkbenchStore()


@pytest.fixture
def test_app(
    mock_llm: MagicMock,
    chat_service: ChatService,
    brain_store: BrainStore,
    workbench_store: WorkbenchStore,
):
    """Create a test FastAPI app with in-memory stores and a mocked LLM."""
    from fastapi import FastAPI
    from raqim.routers.brain import router as brain_router
    from raqim.routers.chat import router as chat_router
    from raqim.routers.evaluation import router as evaluation_router
    from raqim.routers.workbench import router as workbench_router

    app = FastAPI()
    app.state.llm_client = mock_llm
    app.state.chat = chat_service
    app.state.brain = brain_store
    app.state.workbench = workbench_store
    app.include_router(chat_router)
    app.include_router(evaluation_router)
    app.include_router(brain_router)
    app.include_router(workbench_router)
    return app


@pytest.fixture
def client(test_app) -> TestClient:
    return TestClient(test_app)
