"""
Authentication endpoints.

Register and log in with email and password; resolve the current user
from a bearer token. Logout is client-side only.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from riftdex.api.deps import get_auth_service, get_bearer_token
from riftdex.models.user import AuthResult, PublicUser
from riftdex.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


class RegisterRequest(BaseModel):
    """Request model for registration. Presence is checked by the service."""

    name: str | None = None
    email: str | None = None
    password: str | None = Field(default=None, description="At least 6 characters")


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


@router.post("/register", response_model=AuthResult, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> AuthResult:
    """Create an account and return a session token for it."""
    return await auth.register(request.name, request.email, request.password)


@router.post("/login", response_model=AuthResult)
async def login(
    request: LoginRequest,
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> AuthResult:
    """
    Exchange email and password for a session token.

    Unknown email and wrong password both return the same 401.
    """
    return await auth.login(request.email, request.password)


@router.get("/me", response_model=PublicUser)
async def me(
    auth: Annotated[AuthService, Depends(get_auth_service)],
    token: Annotated[str | None, Depends(get_bearer_token)],
) -> PublicUser:
    """Return the user the bearer token belongs to."""
    return await auth.current_user(token)
