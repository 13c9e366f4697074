import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from todo_api.auth.models import User
from todo_api.auth.passwords import PasswordHasher
from todo_api.auth.repository import UserRepositoryInterface
from todo_api.auth.tokens import TokenService
from todo_api.errors import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class AuthService:
    """Registration and login on top of the user repository."""

    def __init__(
        self,
        repository: UserRepositoryInterface,
        hasher: PasswordHasher,
        tokens: TokenService,
    ):
        self.repository = repository
        self.hasher = hasher
        self.tokens = tokens

    async def hash_password(self, password: str) -> str:
        """Hash off the event loop; bcrypt is CPU-bound."""
        return await run_in_threadpool(self.hasher.hash, password)

    async def verify_password(self, password: str, password_hash: str) -> bool:
        return await run_in_threadpool(self.hasher.verify, password, password_hash)

    async def register_user(self, email: str, password: str) -> User:
        """Register a new user. Raises ConflictError if the email is taken."""
        if await self.repository.exists_by_email(email):
            raise ConflictError()

        password_hash = await self.hash_password(password)
        user = await self.repository.create(email=email, password_hash=password_hash)
        logger.info(f"Registered user id={user.id}")
        return user

    async def authenticate_user(self, email: Optional[str], password: Optional[str]) -> User:
        """Check credentials and return the matching user."""
        if not email or not password:
            raise ValidationError("Email and password are required")

        user = await self.repository.get_by_email(email)
        if user is None:
            raise NotFoundError("User not found")
        if not await self.verify_password(password, user.password_hash):
            logger.info(f"Rejected login for user id={user.id}: bad password")
            raise InvalidCredentialsError()
        return user

    async def login(self, email: Optional[str], password: Optional[str]) -> str:
        """Authenticate and issue an identity token."""
        user = await self.authenticate_user(email, password)
        return self.tokens.issue(user.id)
