"""User registration and login, plus the admin authorization dependency."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.api.deps import get_auth_service, get_token_issuer
from app.core.security import ROLE_ADMIN, TokenClaims, TokenIssuer, authorize
from app.schemas.auth import RegisterRequest, UserAuthResponse, UserLoginRequest, UserOut
from app.schemas.common import ErrorResponse
from app.services.auth import AuthService

router = APIRouter()
security = HTTPBearer(auto_error=False)


@router.post(
    "/register",
    response_model=UserAuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def register(
    body: RegisterRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> UserAuthResponse:
    """Create an account and return a 24h access token."""
    result = service.register(body.name, body.email, body.password)
    return UserAuthResponse(
        message="Registration successful",
        token=result.token,
        user=UserOut.model_validate(result.account),
    )


@router.post(
    "/login",
    response_model=UserAuthResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
def login(
    body: UserLoginRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> UserAuthResponse:
    """
    Authenticate with email and password; returns an access token.
    Include the token in the Authorization header as: Bearer <token>
    """
    result = service.login_user(body.email, body.password)
    return UserAuthResponse(
        message="Login successful",
        token=result.token,
        user=UserOut.model_validate(result.account),
    )


def require_admin(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> TokenClaims:
    """
    Dependency: admit only requests carrying a valid admin token.

    Raises 401 when the token is missing, expired or forged and 403 when it
    belongs to a non-admin. Works from the token alone; no database lookup.
    """
    token = credentials.credentials if credentials is not None else None
    return authorize(token, issuer, required_role=ROLE_ADMIN)
