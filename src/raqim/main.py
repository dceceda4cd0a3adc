import logging
from contextlib import asynccontextmanager

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from raqim.config import settings
from raqim.exceptions import RaqimError
from raqim.services.brain_store import BrainStore
from raqim.services.chat import ChatService
from raqim.services.llm import LLMClient
from raqim.services.message_store import MessageStore
from raqim.services.workbench_store import WorkbenchStore
from raqim.routers import brain, chat, evaluation, workbench

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build in-memory stores and the LLM client on startup."""
    logger.info("Starting Raqim service ...")

    llm_client = LLMClient(settings)
    try:
        app.state.llm_client = llm_client
        app.state.chat = ChatService(llm_client, MessageStore(), settings)
        app.state.brain = BrainStore()
        app.state.workbench = WorkbenchStore()
        if settings.seed_sample_data:
            app.state.brain.seed_samples()
            app.state.workbench.seed_samples()

        if not llm_client.is_configured:
            logger.warning("LLM_API_KEY not set, chat will use canned replies")
        logger.info("Raqim service ready.")
        yield
    finally:
        logger.info("Shutting down Raqim service ...")
        await llm_client.close()


app = FastAPI(
    title="Raqim",
    description="Personal assistant API with rule-based response quality scoring",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chat.router)
app.include_router(evaluation.router)
app.include_router(brain.router)
app.include_router(workbench.router)


@app.get("/api/health")
async def health(request: Request) -> dict:
    return {
        "status": "ok",
        "llm_configured": request.app.state.llm_client.is_configured,
    }


@app.exception_handler(RaqimError)
async def raqim_error_handler(request: Request, exc: RaqimError):
    return JSONResponse(status_code=500, content={"detail": str(exc)})
