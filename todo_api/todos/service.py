"""
Todo API - Todo Service

Business rules for todo operations on top of the repository.
"""

from typing import List

from todo_api.errors import NotFoundError, ValidationError
from todo_api.todos.repository import TodoRepositoryInterface
from todo_api.todos.schemas import TodoCreateRequest, TodoResponse, TodoUpdateRequest
from todo_api.todos.models import Todo


class TodoService:
    """Service layer for todo business logic."""

    not_found_message = "Todo not found"

    def __init__(self, repository: TodoRepositoryInterface):
        self.repository = repository

    @staticmethod
    def _to_response(todo: Todo) -> TodoResponse:
        return TodoResponse(
            id=todo.id,
            task=todo.task,
            completed=todo.completed,
            user_id=todo.user_id,
        )

    async def create_todo(self, owner_id: int, request: TodoCreateRequest) -> TodoResponse:
        """Create a todo for the owner. New todos always start uncompleted."""
        todo = await self.repository.create(
            owner_id=owner_id,
            task=request.task,
            completed=False,
        )
        return self._to_response(todo)

    async def list_todos(self, owner_id: int) -> List[TodoResponse]:
        todos = await self.repository.list_by_owner(owner_id)
        return [self._to_response(todo) for todo in todos]

    async def get_todo(self, todo_id: int, owner_id: int) -> TodoResponse:
        todo = await self.repository.get_by_id(todo_id, owner_id)
        if todo is None:
            raise NotFoundError(self.not_found_message)
        return self._to_response(todo)

    async def update_todo(
        self,
        todo_id: int,
        owner_id: int,
        request: TodoUpdateRequest | None,
    ) -> TodoResponse:
        """Update only the provided fields of the owner's todo."""
        updates = request.provided_fields() if request is not None else {}
        if not updates:
            raise ValidationError("No update data provided")

        todo = await self.repository.update(todo_id, owner_id, updates)
        if todo is None:
            raise NotFoundError(self.not_found_message)
        return self._to_response(todo)

    async def delete_todo(self, todo_id: int, owner_id: int) -> None:
        deleted = await self.repository.delete(todo_id, owner_id)
        if not deleted:
            raise NotFoundError(self.not_found_message)
