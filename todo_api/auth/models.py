from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from todo_api.db_models import UserRow


@dataclass
class User:
    """User entity for authentication."""

    id: int
    email: str
    password_hash: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: UserRow) -> "User":
        """Create user from a database row."""
        return cls(
            id=row.id,
            email=row.email,
            password_hash=row.password,
            created_at=row.created_at,
        )
