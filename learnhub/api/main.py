"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, learnhub.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from learnhub.api.deps.dependencies import USER_ID_HEADER, get_service_cache
from learnhub.api.routers.router_utils import register_exception_handlers
from learnhub.boundary.db.create_tables import create_all_tables
from learnhub.configs import get_settings
from learnhub.observability.logger import configure_logging
from learnhub.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import (
    chat_router,
    health_router,
    jobs_router,
    learning_modules_router,
    media_router,
    notes_router,
    realtime_router,
    reminders_router,
    video_router,
)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    configure_logging(settings.effective_log_level)
    logger = logging.getLogger("uvicorn")
    logger.info(f"Environment: {settings.environment}")

    # Startup
    if settings.database.auto_create:
        await create_all_tables()
        logger.info("Database tables ready")
    logger.info(f"Generation mode: {settings.generation.mode}")

    yield

    # Shutdown
    await get_service_cache().aclose()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="LearnHub API",
        description="Student study companion: notes, reminders, learning modules and media generation",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware (last added runs first)
    app.add_middleware(RequestLoggingMiddleware, quiet_paths=(f"{API_PREFIX}/health",))
    app.add_middleware(CorrelationMiddleware, user_header=USER_ID_HEADER)

    register_exception_handlers(app)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(notes_router, prefix=API_PREFIX)
    app.include_router(reminders_router, prefix=API_PREFIX)
    app.include_router(learning_modules_router, prefix=API_PREFIX)
    app.include_router(realtime_router, prefix=API_PREFIX)
    app.include_router(chat_router, prefix=API_PREFIX)
    app.include_router(media_router, prefix=API_PREFIX)
    app.include_router(jobs_router, prefix=API_PREFIX)
    app.include_router(video_router, prefix=API_PREFIX)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "learnhub.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
