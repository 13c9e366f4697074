"""
Todo API - Todo Schemas

Pydantic models for todo API requests and responses.
"""

from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic_core import PydanticCustomError


def _json_bool(value: Any) -> Any:
    """Accept JSON booleans and the strings "true"/"false", nothing else."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true"
    raise PydanticCustomError("bool_type", "Input should be a valid boolean")


CompletedFlag = Annotated[bool, BeforeValidator(_json_bool)]


class TodoCreateRequest(BaseModel):
    """Request model for creating a todo."""

    model_config = ConfigDict(extra="forbid")

    task: str = Field(min_length=3, description="Task text")
    completed: Optional[CompletedFlag] = Field(
        default=None,
        description="Accepted for compatibility; new todos always start uncompleted",
    )


class TodoUpdateRequest(BaseModel):
    """Request model for updating a todo. At least one field must be given."""

    task: Optional[str] = Field(default=None, min_length=3, description="Task text")
    completed: Optional[CompletedFlag] = Field(default=None, description="Completion flag")

    def provided_fields(self) -> dict:
        """Fields present in the payload with a non-null value."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class TodoResponse(BaseModel):
    """Response model for a single todo."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(description="Todo ID")
    task: str = Field(description="Task text")
    completed: bool = Field(description="Completion flag")
    user_id: int = Field(alias="userId", description="Owner user ID")
