import logging
from abc import ABC, abstractmethod
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.auth.models import User
from todo_api.db_models import UserRow
from todo_api.errors import ConflictError

logger = logging.getLogger(__name__)


class UserRepositoryInterface(ABC):
    """Abstract interface for user repository."""

    @abstractmethod
    async def create(self, email: str, password_hash: str) -> User:
        """Create a new user. Raises ConflictError if the email is taken."""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check if email is registered."""
        pass


class UserRepository(UserRepositoryInterface):
    """SQLAlchemy implementation of the user repository."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, email: str, password_hash: str) -> User:
        row = UserRow(email=email, password=password_hash)
        self.session.add(row)
        try:
            await self.session.commit()
        except IntegrityError as exc:
            # Lost a race with a concurrent registration of the same email
            await self.session.rollback()
            raise ConflictError() from exc
        await self.session.refresh(row)
        logger.info(f"Created user id={row.id}")
        return User.from_row(row)

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.session.execute(select(UserRow).where(UserRow.email == email))
        row = result.scalar_one_or_none()
        if row is None:
            return None
        return User.from_row(row)

    async def exists_by_email(self, email: str) -> bool:
        result = await self.session.execute(
            select(UserRow.id).where(UserRow.email == email).limit(1)
        )
        return result.scalar_one_or_none() is not None
