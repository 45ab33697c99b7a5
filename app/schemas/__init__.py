"""Pydantic request/response schemas."""

from app.schemas.auth import (
    AdminAuthResponse,
    AdminLoginRequest,
    AdminOut,
    RegisterRequest,
    UserAuthResponse,
    UserLoginRequest,
    UserOut,
)
from app.schemas.common import ErrorResponse
from app.schemas.health import HealthResponse, PingResponse
from app.schemas.submissions import (
    ContactCreate,
    ContactListResponse,
    ContactOut,
    MessageResponse,
    SponsorCreate,
    SponsorListResponse,
    SponsorOut,
)

__all__ = [
    "AdminAuthResponse",
    "AdminLoginRequest",
    "AdminOut",
    "ContactCreate",
    "ContactListResponse",
    "ContactOut",
    "ErrorResponse",
    "HealthResponse",
    "MessageResponse",
    "PingResponse",
    "RegisterRequest",
    "SponsorCreate",
    "SponsorListResponse",
    "SponsorOut",
    "UserAuthResponse",
    "UserLoginRequest",
    "UserOut",
]
