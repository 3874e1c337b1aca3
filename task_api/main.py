"""Task Manager API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TaskManagerError → structured JSON responses
    - Every path except the console path passes the API-key middleware
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - CORS added after the API-key middleware so it wraps it: preflight requests
      are answered without a key
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from task_api.api.api_key import ApiKeyMiddleware
from task_api.api.error_handlers import register_error_handlers
from task_api.api.routes import health, tasks, users
from task_api.config import get_settings
from task_api.infrastructure.database import close_db, init_db
from task_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Task Manager API started")
    yield
    await close_db()
    logger.info("Task Manager API shutting down")


app = FastAPI(
    title="Task Manager API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    ApiKeyMiddleware,
    api_key=settings.api_key,
    header_name=settings.api_key_header,
    console_path=settings.console_path,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(tasks.router)
app.include_router(users.router)

register_error_handlers(app)
