import logging
from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.auth.repository import UserRepository
from todo_api.auth.service import AuthService
from todo_api.auth.tokens import TokenService
from todo_api.context import AppContext, get_context, get_session
from todo_api.errors import InvalidTokenError, MissingTokenError, TokenExpiredError

logger = logging.getLogger(__name__)

# auto_error=False so a missing or non-Bearer header reaches our own error
bearer_scheme = HTTPBearer(auto_error=False, bearerFormat="JWT")


def get_token_service(
    context: Annotated[AppContext, Depends(get_context)]
) -> TokenService:
    return context.tokens


def get_auth_service(
    context: Annotated[AppContext, Depends(get_context)],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> AuthService:
    """Dependency to get AuthService instance with the SQL user repository."""
    return AuthService(UserRepository(session), context.passwords, context.tokens)


async def get_current_user_id(
    request: Request,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> int:
    """
    Gate for protected routes.

    Verifies the bearer token and records the caller's id on
    ``request.state.user_id``. Never touches the store.
    """
    if credentials is None:
        raise MissingTokenError()

    try:
        user_id = tokens.verify(credentials.credentials)
    except TokenExpiredError:
        logger.debug(f"Rejected expired token on {request.url.path}")
        raise
    except InvalidTokenError:
        logger.debug(f"Rejected invalid token on {request.url.path}")
        raise

    request.state.user_id = user_id
    return user_id


# Type alias for cleaner dependency injection
CurrentUserId = Annotated[int, Depends(get_current_user_id)]
