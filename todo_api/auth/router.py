"""
Todo API - Authentication Router

Endpoints for user registration and login.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, status

from todo_api.auth.dependencies import get_auth_service
from todo_api.auth.schemas import (
    TokenResponse,
    UserLoginRequest,
    UserRegisterRequest,
    UserResponse,
)
from todo_api.auth.service import AuthService
from todo_api.errors import store_errors
from todo_api.validation import validate_payload


router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
)
async def register(
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
    request: Optional[UserRegisterRequest] = None,
) -> UserResponse:
    """
    Register a new user with email and password.

    - Email must be a valid address not already in use
    - Password must be 6-30 characters
    """
    if request is None:
        # A missing body is validated as an empty object
        request = validate_payload(UserRegisterRequest, {})

    with store_errors("Error during registration"):
        user = await auth_service.register_user(
            email=request.email,
            password=request.password,
        )
    return UserResponse(id=user.id, email=user.email)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login user",
)
async def login(
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
    request: Optional[UserLoginRequest] = None,
) -> TokenResponse:
    """
    Authenticate user and return a JWT valid for one hour.

    Use the returned token in the Authorization header:
    `Authorization: Bearer <token>`
    """
    if request is None:
        request = UserLoginRequest()

    with store_errors("Error during login"):
        token = await auth_service.login(
            email=request.email,
            password=request.password,
        )
    return TokenResponse(token=token)
