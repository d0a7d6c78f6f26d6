"""Request/response schemas for auth endpoints."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["admin", "operator"]


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(..., min_length=1, max_length=255, description="Username")
    password: str = Field(..., min_length=1, max_length=128, description="Password")


class LoginUser(BaseModel):
    """Public profile of the user who logged in."""

    id: int
    username: str
    name: str
    role: Role


class LoginResponse(BaseModel):
    """JWT returned after successful login, plus the resolved user."""

    token: str = Field(..., description="JWT access token; send as 'Authorization: Bearer <token>'")
    user: LoginUser


class CurrentUser(BaseModel):
    """Authenticated identity (from token claims) for dependency injection."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str | None = None
    role: Role
