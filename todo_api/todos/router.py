"""
Todo API - Todo Router

CRUD endpoints for todo management.
All endpoints are JWT-protected and user-scoped.
"""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.auth.dependencies import CurrentUserId, get_current_user_id
from todo_api.context import get_session
from todo_api.errors import store_errors
from todo_api.todos.repository import TodoRepository, TodoRepositoryInterface
from todo_api.todos.schemas import TodoCreateRequest, TodoResponse, TodoUpdateRequest
from todo_api.todos.service import TodoService


router = APIRouter(
    prefix="/api/todos",
    tags=["Todos"],
    dependencies=[Depends(get_current_user_id)],
)


async def get_todo_repository(
    session: Annotated[AsyncSession, Depends(get_session)]
) -> TodoRepositoryInterface:
    """Dependency to get todo repository instance."""
    return TodoRepository(session)


async def get_todo_service(
    repository: Annotated[TodoRepositoryInterface, Depends(get_todo_repository)]
) -> TodoService:
    """Dependency to get todo service instance."""
    return TodoService(repository)


@router.get(
    "",
    response_model=List[TodoResponse],
    summary="Get all user tasks",
)
async def list_todos(
    user_id: CurrentUserId,
    service: Annotated[TodoService, Depends(get_todo_service)],
) -> List[TodoResponse]:
    with store_errors("Error at receiving tasks!"):
        return await service.list_todos(user_id)


@router.post(
    "",
    response_model=TodoResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
)
async def create_todo(
    request: TodoCreateRequest,
    user_id: CurrentUserId,
    service: Annotated[TodoService, Depends(get_todo_service)],
) -> TodoResponse:
    """
    Create a new todo for the authenticated user.

    The todo always starts uncompleted, whatever `completed` says.
    """
    with store_errors("Error at creating task!"):
        return await service.create_todo(owner_id=user_id, request=request)


@router.get(
    "/{todo_id}",
    response_model=TodoResponse,
    summary="Get a single task",
)
async def get_todo(
    todo_id: int,
    user_id: CurrentUserId,
    service: Annotated[TodoService, Depends(get_todo_service)],
) -> TodoResponse:
    """Returns 404 if the todo doesn't exist or belongs to another user."""
    with store_errors("Error in receiving task!"):
        return await service.get_todo(todo_id, user_id)


@router.put(
    "/{todo_id}",
    response_model=TodoResponse,
    summary="Update a task",
)
async def update_todo(
    todo_id: int,
    user_id: CurrentUserId,
    service: Annotated[TodoService, Depends(get_todo_service)],
    request: Optional[TodoUpdateRequest] = None,
) -> TodoResponse:
    """
    Update a todo by ID.

    Only provided fields will be updated; at least one is required.
    Returns 404 if the todo doesn't exist or belongs to another user.
    """
    with store_errors("Error at receiving task!"):
        return await service.update_todo(todo_id, user_id, request)


@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a task",
)
async def delete_todo(
    todo_id: int,
    user_id: CurrentUserId,
    service: Annotated[TodoService, Depends(get_todo_service)],
) -> Response:
    """Returns 404 if the todo doesn't exist or belongs to another user."""
    with store_errors("Error at receiving task!"):
        await service.delete_todo(todo_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
