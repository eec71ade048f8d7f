"""FastAPI application factory"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..core.config import Settings
from ..core.exceptions import (
    DocumentSourceUnavailableError,
    FaqChatException,
    get_status_code,
)
from ..core.logging_config import get_logger, log_with_context
from ..domain.repositories import DocumentRepository
from ..infrastructure import JsonFileDocumentRepository
from ..services.chat_service import ChatService
from .routers import chat as chat_router
from .routers import stats as stats_router

logger = get_logger("faq_chat.api")


def create_app(
    settings: Settings | None = None, repository: DocumentRepository | None = None
) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        settings: Application settings. Defaults to config.yml / built-in defaults
        repository: Document source. Defaults to the JSON file named in settings

    Returns:
        Configured FastAPI app with the chat service on app.state
    """
    settings = settings or Settings.from_config()
    repository = repository or JsonFileDocumentRepository(settings.data_path)
    service = ChatService.from_settings(settings, repository)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not settings.reload_per_request:
            try:
                service.load_store()
            except DocumentSourceUnavailableError as e:
                # Requests retry the load and report 503 until the source is fixed
                log_with_context(
                    logger,
                    "error",
                    "startup_load_failed",
                    source=repository.describe(),
                    error=e.message,
                )
        yield

    app = FastAPI(title="faq-chat", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.chat_service = service

    @app.exception_handler(FaqChatException)
    async def faqchat_exception_handler(request: Request, exc: FaqChatException):
        """Handle custom FaqChat exceptions"""
        return JSONResponse(status_code=get_status_code(exc), content=exc.to_dict())

    app.include_router(chat_router.router, prefix="/api", tags=["Chat"])
    app.include_router(stats_router.router, prefix="/stats", tags=["Stats"])

    return app
