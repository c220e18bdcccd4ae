"""CertStudy API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CertStudyError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Official qualification catalogue seeded at startup (idempotent, opt-out via settings)
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api.error_handlers import register_error_handlers
from app.core.errors import DatabaseError
from app.infrastructure.database import init_db
from app.infrastructure.observability import setup_logging
from app.config import get_settings
from app.services.seed_qualifications import seed_official_qualifications
from app.api.routes import (
    admin, articles, comments, health, preview, qualifications,
    study_records, users,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.auto_create_schema:
        await manager.create_schema()
    if settings.seed_qualifications_on_startup:
        try:
            async with manager.session() as db:
                await seed_official_qualifications(db)
        except DatabaseError as e:
            logger.error(f"Qualification seeding skipped: {e.message}")
    if not settings.admin_token:
        logger.warning("ADMIN_TOKEN not set: admin endpoints reject every request")
    logger.info("CertStudy API started")
    yield
    await manager.dispose()
    logger.info("CertStudy API shutting down")


app = FastAPI(
    title="CertStudy API", version="1.0.0", lifespan=lifespan,
)

# CORS: configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(users.router)
app.include_router(articles.router)
app.include_router(comments.router)
app.include_router(qualifications.router)
app.include_router(study_records.router)
app.include_router(admin.router)
app.include_router(preview.router)

register_error_handlers(app)

# Static files: serves the SPA build in production
# mounted AFTER API routes so /api/v1/* takes precedence
if os.path.isdir("static"):
    app.mount("/", StaticFiles(directory="static", html=True), name="static")
