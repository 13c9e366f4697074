"""
Todo API - Authentication Schemas

Pydantic models for authentication requests and responses.
"""

from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, validate_email


def _check_email(value: str) -> str:
    """Reject invalid addresses but keep the email exactly as sent."""
    validate_email(value)
    return value


# Login looks the address up verbatim, so registration must store it verbatim
EmailAddress = Annotated[str, AfterValidator(_check_email)]


class UserRegisterRequest(BaseModel):
    """Request schema for user registration."""

    model_config = ConfigDict(extra="forbid")

    email: EmailAddress
    password: str = Field(..., min_length=6, max_length=30)


class UserLoginRequest(BaseModel):
    """Request schema for user login. Presence is checked by the endpoint."""

    email: Optional[str] = None
    password: Optional[str] = None


class UserResponse(BaseModel):
    """Public user information response."""

    id: int
    email: str


class TokenResponse(BaseModel):
    """Response schema for successful authentication."""

    token: str
