"""Contact and sponsorship submissions: validation and persistence."""

import logging
import re
from typing import Any

from sqlalchemy.orm import Session

from app.core.errors import InvalidInputError, NotFoundError
from app.models import Contact, Sponsor
from app.schemas.submissions import ContactCreate, SponsorCreate

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _require(*values: str | None, message: str) -> None:
    if any(v is None or not v.strip() for v in values):
        raise InvalidInputError(message)


def _validate_email(email: str) -> str:
    email = email.strip()
    if not EMAIL_PATTERN.match(email):
        raise InvalidInputError("Invalid email format")
    return email


def validate_contact(body: ContactCreate) -> dict[str, Any]:
    """Return column values for a contact message, or raise InvalidInputError."""
    _require(body.name, body.email, body.message, message="All fields are required")
    return {
        "full_name": body.name.strip(),
        "email": _validate_email(body.email),
        "message": body.message.strip(),
    }


def validate_sponsor(body: SponsorCreate) -> dict[str, Any]:
    """Return column values for a sponsorship request; phone is optional."""
    _require(
        body.name, body.email, body.support_type, body.message, message="Required fields missing"
    )
    phone = body.phone.strip() if body.phone and body.phone.strip() else None
    return {
        "name": body.name.strip(),
        "email": _validate_email(body.email),
        "phone": phone,
        "support_type": body.support_type.strip(),
        "message": body.message.strip(),
    }


class SubmissionStore:
    """Insert, list (newest first), mark read and delete one submission kind."""

    def __init__(
        self,
        db: Session,
        model: type[Contact] | type[Sponsor],
        not_found_message: str,
    ) -> None:
        self.db = db
        self.model = model
        self.not_found_message = not_found_message

    @classmethod
    def contacts(cls, db: Session) -> "SubmissionStore":
        return cls(db, Contact, "Message not found")

    @classmethod
    def sponsors(cls, db: Session) -> "SubmissionStore":
        return cls(db, Sponsor, "Request not found")

    def insert(self, **fields: Any) -> Contact | Sponsor:
        record = self.model(**fields)
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        logger.info("Saved %s id=%s", self.model.__tablename__, record.id)
        return record

    def list_all(self) -> list[Contact] | list[Sponsor]:
        return (
            self.db.query(self.model)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
            .all()
        )

    def mark_read(self, record_id: int) -> None:
        updated = (
            self.db.query(self.model)
            .filter(self.model.id == record_id)
            .update({self.model.is_read: True}, synchronize_session=False)
        )
        self.db.commit()
        if not updated:
            raise NotFoundError(self.not_found_message)

    def delete(self, record_id: int) -> None:
        deleted = (
            self.db.query(self.model)
            .filter(self.model.id == record_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        if not deleted:
            raise NotFoundError(self.not_found_message)
        logger.info("Deleted %s id=%s", self.model.__tablename__, record_id)
