"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from meeting_summarizer.api.v1.router import router as api_router
from meeting_summarizer.config import get_settings
from meeting_summarizer.domain.errors import (
    DistributionError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from meeting_summarizer.infrastructure.remote import build_remote_summarizer

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

settings = get_settings()

ERROR_STATUS = {
    ValidationError: 400,
    NotFoundError: 404,
    PersistenceError: 500,
    DistributionError: 500,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    logger.info("Starting Meeting Summarizer application...")
    logger.info(f"Environment: {settings.environment}")
    remote = build_remote_summarizer(settings)
    app.state.remote_summarizer = remote
    if remote is not None:
        logger.info(f"Remote summarization provider: {remote.name}")
    else:
        logger.info("No remote credential configured, using local summarization only")

    yield

    logger.info("Shutting down Meeting Summarizer application...")
    if remote is not None:
        await remote.close()
    app.state.remote_summarizer = None


async def handle_app_error(request: Request, exc: Exception) -> JSONResponse:
    """Translate application errors into JSON error responses."""
    status_code = next(
        (code for cls, code in ERROR_STATUS.items() if isinstance(exc, cls)), 500
    )
    return JSONResponse({"detail": str(exc)}, status_code=status_code)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as 400 instead of 422."""
    errors = [
        {"loc": ".".join(str(p) for p in err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse({"detail": "Invalid request", "errors": errors}, status_code=400)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    docs_kwargs = {}
    if settings.is_production:
        docs_kwargs = {"docs_url": None, "redoc_url": None, "openapi_url": None}

    app = FastAPI(
        title="Meeting Summarizer",
        description="Summarize meeting transcripts, edit the result and share it by email",
        version="0.1.0",
        lifespan=lifespan,
        **docs_kwargs,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for error_class in ERROR_STATUS:
        app.add_exception_handler(error_class, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)

    # Include routers
    app.include_router(api_router)

    @app.get("/health")
    async def health_check() -> JSONResponse:
        """Lightweight health check with DB connectivity test."""
        from meeting_summarizer.infrastructure.database import async_session_factory

        summarizer = settings.remote_provider if settings.remote_api_key else "local"
        try:
            async with async_session_factory() as session:
                await session.execute(text("SELECT 1"))
            return JSONResponse(
                {"status": "healthy", "database": "connected", "summarizer": summarizer}
            )
        except Exception:
            return JSONResponse(
                {"status": "unhealthy", "database": "disconnected", "summarizer": summarizer},
                status_code=503,
            )

    return app


# Create app instance
app = create_app()
