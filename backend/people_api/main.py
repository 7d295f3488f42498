"""People API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Every error path answers with an ErrorEnvelope (see api/error_handlers.py)
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager

Run with:
    uvicorn people_api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from people_api.api.error_handlers import register_error_handlers
from people_api.api.routes import health, people
from people_api.config import get_settings
from people_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"{settings.service_name} started")
    yield
    logger.info(f"{settings.service_name} shutting down")


def create_app() -> FastAPI:
    """Build the application: middleware, routes, error handlers."""
    settings = get_settings()
    app = FastAPI(
        title="People API", version=settings.service_version, lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(people.router)

    register_error_handlers(app)
    return app


app = create_app()
