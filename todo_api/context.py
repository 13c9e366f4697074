"""
Todo API - Application Context

Process-scoped collaborators built once at startup and injected into
request handlers through FastAPI dependencies.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Annotated, AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.auth.passwords import PasswordHasher
from todo_api.auth.tokens import TokenService
from todo_api.config import Settings
from todo_api.database import Database


@dataclass(frozen=True)
class AppContext:
    settings: Settings
    database: Database
    passwords: PasswordHasher
    tokens: TokenService


def build_context(settings: Settings) -> AppContext:
    """Construct the context. Raises ConfigurationError without a JWT secret."""
    return AppContext(
        settings=settings,
        database=Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO),
        passwords=PasswordHasher(rounds=settings.BCRYPT_ROUNDS),
        tokens=TokenService(
            secret=settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
            lifetime=timedelta(minutes=settings.JWT_EXPIRES_MINUTES),
        ),
    )


def get_context(request: Request) -> AppContext:
    """Dependency returning the context stored on the application."""
    context = getattr(request.app.state, "context", None)
    if context is None:
        raise RuntimeError("Application context not initialized. Is the lifespan running?")
    return context


async def get_session(
    context: Annotated[AppContext, Depends(get_context)]
) -> AsyncIterator[AsyncSession]:
    """Dependency yielding a database session for the request."""
    async with context.database.session() as session:
        yield session
