"""
Todo API - Todo Repository

Repository pattern for todo data access.
Every query filters on the owner as well as the id.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.db_models import TodoRow
from todo_api.todos.models import Todo


class TodoRepositoryInterface(ABC):
    """
    Abstract interface for todo repository.

    All operations are scoped by owner_id to enforce ownership isolation.
    """

    @abstractmethod
    async def create(self, owner_id: int, task: str, completed: bool = False) -> Todo:
        pass

    @abstractmethod
    async def list_by_owner(self, owner_id: int) -> List[Todo]:
        pass

    @abstractmethod
    async def get_by_id(self, todo_id: int, owner_id: int) -> Optional[Todo]:
        pass

    @abstractmethod
    async def update(self, todo_id: int, owner_id: int, updates: dict) -> Optional[Todo]:
        """Apply ``updates``; None if no todo matches (id, owner)."""
        pass

    @abstractmethod
    async def delete(self, todo_id: int, owner_id: int) -> bool:
        pass


class TodoRepository(TodoRepositoryInterface):
    """SQLAlchemy implementation of the todo repository."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, owner_id: int, task: str, completed: bool = False) -> Todo:
        row = TodoRow(task=task, completed=completed, user_id=owner_id)
        self.session.add(row)
        await self.session.commit()
        await self.session.refresh(row)
        return Todo.from_row(row)

    async def list_by_owner(self, owner_id: int) -> List[Todo]:
        result = await self.session.execute(
            select(TodoRow).where(TodoRow.user_id == owner_id).order_by(TodoRow.id)
        )
        return [Todo.from_row(row) for row in result.scalars()]

    async def get_by_id(self, todo_id: int, owner_id: int) -> Optional[Todo]:
        result = await self.session.execute(
            select(TodoRow).where(TodoRow.id == todo_id, TodoRow.user_id == owner_id)
        )
        row = result.scalar_one_or_none()
        if row is None:
            return None
        return Todo.from_row(row)

    async def update(self, todo_id: int, owner_id: int, updates: dict) -> Optional[Todo]:
        result = await self.session.execute(
            update(TodoRow)
            .where(TodoRow.id == todo_id, TodoRow.user_id == owner_id)
            .values(**updates)
        )
        if result.rowcount == 0:
            await self.session.rollback()
            return None
        await self.session.commit()
        return await self.get_by_id(todo_id, owner_id)

    async def delete(self, todo_id: int, owner_id: int) -> bool:
        result = await self.session.execute(
            delete(TodoRow).where(TodoRow.id == todo_id, TodoRow.user_id == owner_id)
        )
        await self.session.commit()
        return result.rowcount > 0
