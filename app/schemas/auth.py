"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from app.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
)
from app.schemas.submissions import EMAIL_MAX_LEN, NAME_MAX_LEN


class RegisterRequest(BaseModel):
    """Body of POST /auth/register."""

    name: str = Field(..., max_length=NAME_MAX_LEN, description="Display name")
    email: str = Field(..., max_length=EMAIL_MAX_LEN, description="Email (login identity)")
    password: str = Field(
        ..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN, description="Password"
    )


class UserLoginRequest(BaseModel):
    """Body of POST /auth/login."""

    email: str = Field(..., max_length=EMAIL_MAX_LEN, description="Email")
    password: str = Field(..., max_length=PASSWORD_MAX_LEN, description="Password")


class AdminLoginRequest(BaseModel):
    """Body of POST /admin/login."""

    username: str = Field(
        ..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN, description="Username"
    )
    password: str = Field(..., max_length=PASSWORD_MAX_LEN, description="Password")


class UserOut(BaseModel):
    """Public view of a user (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


class AdminOut(BaseModel):
    """Public view of an admin (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str | None = None
    role: str


class UserAuthResponse(BaseModel):
    """Token and account returned after registration or user login."""

    success: bool = True
    message: str
    token: str = Field(..., description="Bearer access token")
    user: UserOut


class AdminAuthResponse(BaseModel):
    """Token and account returned after admin login."""

    success: bool = True
    message: str
    token: str = Field(..., description="Bearer access token")
    admin: AdminOut
