"""Public contact and sponsorship forms. Each save triggers a best-effort admin email."""

from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Depends, status

from app.api.deps import get_contact_store, get_notifier, get_sponsor_store
from app.schemas.common import ErrorResponse
from app.schemas.submissions import (
    ContactCreate,
    ContactCreatedResponse,
    ContactOut,
    SponsorCreate,
    SponsorCreatedResponse,
    SponsorOut,
)
from app.services.notification import NotificationSender
from app.services.submissions import SubmissionStore, validate_contact, validate_sponsor

router = APIRouter()


@router.post(
    "/contacts",
    response_model=ContactCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def create_contact(
    body: ContactCreate,
    background_tasks: BackgroundTasks,
    store: Annotated[SubmissionStore, Depends(get_contact_store)],
    notifier: Annotated[NotificationSender, Depends(get_notifier)],
) -> ContactCreatedResponse:
    """Save a contact message and notify the site admin."""
    contact = ContactOut.model_validate(store.insert(**validate_contact(body)))
    background_tasks.add_task(notifier.notify_contact, contact.model_dump())
    return ContactCreatedResponse(message="Message sent successfully", data=contact)


@router.post(
    "/sponsors",
    response_model=SponsorCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def create_sponsor(
    body: SponsorCreate,
    background_tasks: BackgroundTasks,
    store: Annotated[SubmissionStore, Depends(get_sponsor_store)],
    notifier: Annotated[NotificationSender, Depends(get_notifier)],
) -> SponsorCreatedResponse:
    """Save a sponsorship request and notify the site admin."""
    sponsor = SponsorOut.model_validate(store.insert(**validate_sponsor(body)))
    background_tasks.add_task(notifier.notify_sponsor, sponsor.model_dump())
    return SponsorCreatedResponse(
        message="Sponsorship request submitted successfully", data=sponsor
    )
