"""Pollen8 API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map Pollen8Error → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - DatabaseSessionManager created in the lifespan, stored on app.state,
      disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - No module-level DB singleton: tests swap app.state.db_manager per test
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pollen8.api.error_handlers import register_error_handlers
from pollen8.api.routes import analytics, health, invites, network
from pollen8.config import get_settings
from pollen8.infrastructure.database import DatabaseSessionManager
from pollen8.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if getattr(app.state, "db_manager", None) is None:
        app.state.db_manager = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
    logger.info("Pollen8 API started")
    yield
    logger.info("Pollen8 API shutting down")
    await app.state.db_manager.dispose()
    app.state.db_manager = None


app = FastAPI(title="Pollen8 API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(network.router)
app.include_router(invites.router)
app.include_router(analytics.router)

register_error_handlers(app)
