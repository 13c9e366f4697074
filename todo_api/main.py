"""
Todo API - Main Application

REST backend for user registration/login and per-user todo management,
secured with bearer tokens.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_api.auth.router import router as auth_router
from todo_api.config import settings
from todo_api.context import build_context
from todo_api.errors import register_exception_handlers
from todo_api.security import validate_security_config
from todo_api.todos.router import router as todos_router

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup: refuse to run without a signing secret
    validate_security_config(settings)
    context = build_context(settings)
    await context.database.connect()
    app.state.context = context
    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} started")

    yield

    # Shutdown: release the connection pool
    await context.database.disconnect()
    app.state.context = None


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="API for managing tasks with JWT Authentication",
    docs_url=settings.DOCS_URL,
    redoc_url=None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials="*" not in settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)

register_exception_handlers(app)


@app.get("/health", tags=["Health"])
async def health_check() -> dict:
    """
    Health check endpoint.

    Returns the service status and version information.
    """
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


@app.get("/", tags=["Root"])
async def root() -> dict:
    """Root endpoint with service information."""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": settings.DOCS_URL,
    }


app.include_router(auth_router)
app.include_router(todos_router)
