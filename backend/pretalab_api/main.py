"""Pretalab API — FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Collaborators live in app.state.container; an injected container is used
      as-is and never closed by the app, a self-built one is closed on shutdown
    - CORS configured from settings (not hardcoded)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pretalab_api.api.error_handlers import register_error_handlers
from pretalab_api.api.routes import gemini, health, root, tasks, transactions
from pretalab_api.config import Settings, get_settings
from pretalab_api.infrastructure.container import AppContainer, build_container
from pretalab_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None, container: AppContainer | None = None,
) -> FastAPI:
    """Build the application. Tests pass their own container."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level, settings.log_format)
        owned = getattr(app.state, "container", None) is None
        if owned:
            app.state.container = build_container(settings)
            if settings.database_create_tables and app.state.container.db:
                await app.state.container.db.create_all()
        logger.info("Pretalab API started")
        yield
        logger.info("Pretalab API shutting down")
        if owned:
            await app.state.container.close()
            app.state.container = None

    app = FastAPI(title="Pretalab API", version="1.0.0", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(root.router)
    app.include_router(health.router)
    app.include_router(tasks.router)
    app.include_router(transactions.router)
    app.include_router(gemini.router)

    register_error_handlers(app)
    return app


app = create_app()
