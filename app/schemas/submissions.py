"""Request/response schemas for contact and sponsorship submissions."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

NAME_MAX_LEN = 255
EMAIL_MAX_LEN = 255
PHONE_MAX_LEN = 64
MESSAGE_MAX_LEN = 10_000


class ContactCreate(BaseModel):
    """Body of POST /contacts."""

    name: str = Field(..., max_length=NAME_MAX_LEN)
    email: str = Field(..., max_length=EMAIL_MAX_LEN)
    message: str = Field(..., max_length=MESSAGE_MAX_LEN)


class SponsorCreate(BaseModel):
    """Body of POST /sponsors. The site form posts supportType in camelCase."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., max_length=NAME_MAX_LEN, description="Name or organization")
    email: str = Field(..., max_length=EMAIL_MAX_LEN)
    phone: str | None = Field(default=None, max_length=PHONE_MAX_LEN)
    support_type: str = Field(..., alias="supportType", max_length=255)
    message: str = Field(..., max_length=MESSAGE_MAX_LEN)


class ContactOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    full_name: str
    email: str
    message: str
    is_read: bool
    created_at: datetime | None = None


class SponsorOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str | None = None
    support_type: str
    message: str
    is_read: bool
    created_at: datetime | None = None


class ContactCreatedResponse(BaseModel):
    success: bool = True
    message: str
    data: ContactOut


class SponsorCreatedResponse(BaseModel):
    success: bool = True
    message: str
    data: SponsorOut


class ContactListResponse(BaseModel):
    """Response for GET /admin/contacts (newest first)."""

    success: bool = True
    data: list[ContactOut]


class SponsorListResponse(BaseModel):
    """Response for GET /admin/sponsors (newest first)."""

    success: bool = True
    data: list[SponsorOut]


class MessageResponse(BaseModel):
    """Acknowledgement for admin mutations (mark read, delete)."""

    success: bool = True
    message: str
