"""Admin login and the token-protected submission dashboard."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.auth import require_admin
from app.api.deps import get_auth_service, get_contact_store, get_sponsor_store
from app.core.security import TokenClaims
from app.schemas.auth import AdminAuthResponse, AdminLoginRequest, AdminOut
from app.schemas.common import ErrorResponse
from app.schemas.submissions import (
    ContactListResponse,
    ContactOut,
    MessageResponse,
    SponsorListResponse,
    SponsorOut,
)
from app.services.auth import AuthService
from app.services.submissions import SubmissionStore

router = APIRouter()

AdminClaims = Annotated[TokenClaims, Depends(require_admin)]
ContactStore = Annotated[SubmissionStore, Depends(get_contact_store)]
SponsorStore = Annotated[SubmissionStore, Depends(get_sponsor_store)]

_protected = {
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
}


@router.post(
    "/login",
    response_model=AdminAuthResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
def admin_login(
    body: AdminLoginRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> AdminAuthResponse:
    """Authenticate an administrator by username; returns an 8h admin token."""
    result = service.login_admin(body.username, body.password)
    return AdminAuthResponse(
        message="Admin login successful",
        token=result.token,
        admin=AdminOut.model_validate(result.account),
    )


@router.get("/contacts", response_model=ContactListResponse, responses=_protected)
def list_contacts(_admin: AdminClaims, store: ContactStore) -> ContactListResponse:
    """All contact messages, newest first."""
    return ContactListResponse(data=[ContactOut.model_validate(c) for c in store.list_all()])


@router.get("/sponsors", response_model=SponsorListResponse, responses=_protected)
def list_sponsors(_admin: AdminClaims, store: SponsorStore) -> SponsorListResponse:
    """All sponsorship requests, newest first."""
    return SponsorListResponse(data=[SponsorOut.model_validate(s) for s in store.list_all()])


@router.put("/contacts/{record_id}/read", response_model=MessageResponse, responses=_protected)
def mark_contact_read(record_id: int, _admin: AdminClaims, store: ContactStore) -> MessageResponse:
    store.mark_read(record_id)
    return MessageResponse(message="Marked as read")


@router.put("/sponsors/{record_id}/read", response_model=MessageResponse, responses=_protected)
def mark_sponsor_read(record_id: int, _admin: AdminClaims, store: SponsorStore) -> MessageResponse:
    store.mark_read(record_id)
    return MessageResponse(message="Marked as read")


@router.delete("/contacts/{record_id}", response_model=MessageResponse, responses=_protected)
def delete_contact(record_id: int, _admin: AdminClaims, store: ContactStore) -> MessageResponse:
    store.delete(record_id)
    return MessageResponse(message="Message deleted")


@router.delete("/sponsors/{record_id}", response_model=MessageResponse, responses=_protected)
def delete_sponsor(record_id: int, _admin: AdminClaims, store: SponsorStore) -> MessageResponse:
    store.delete(record_id)
    return MessageResponse(message="Request deleted")
