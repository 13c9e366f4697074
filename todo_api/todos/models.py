"""
Todo API - Todo Models

Internal todo model passed between repository and service.
"""

from dataclasses import dataclass

from todo_api.db_models import TodoRow


@dataclass
class Todo:
    """A single to-do item owned by one user."""

    id: int
    task: str
    completed: bool
    user_id: int

    @classmethod
    def from_row(cls, row: TodoRow) -> "Todo":
        return cls(
            id=row.id,
            task=row.task,
            completed=row.completed,
            user_id=row.user_id,
        )
