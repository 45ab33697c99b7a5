"""Credential store: persisted user and admin accounts keyed by a unique identity."""

import logging
from collections.abc import Callable
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import DuplicateIdentityError
from app.core.security import ROLE_ADMIN, ROLE_USER
from app.models import AdminUser, User

logger = logging.getLogger(__name__)

Account = User | AdminUser


def normalize_email(email: str) -> str:
    return email.strip().lower()


def normalize_username(username: str) -> str:
    return username.strip()


class AccountStore:
    """
    Lookup and creation of one account kind (users by email, admins by username).

    create() relies on the unique index on the identity column: when two
    creates race past the existence check, the loser's IntegrityError is
    reported as DuplicateIdentityError.
    """

    def __init__(
        self,
        db: Session,
        model: type[User] | type[AdminUser],
        identity_field: str,
        role: str,
        normalize: Callable[[str], str],
        duplicate_message: str,
    ) -> None:
        self.db = db
        self.model = model
        self.identity_field = identity_field
        self.role = role
        self.normalize = normalize
        self.duplicate_message = duplicate_message

    @classmethod
    def users(cls, db: Session) -> "AccountStore":
        return cls(db, User, "email", ROLE_USER, normalize_email, "Email already registered")

    @classmethod
    def admins(cls, db: Session) -> "AccountStore":
        return cls(
            db, AdminUser, "username", ROLE_ADMIN, normalize_username, "Username already taken"
        )

    @property
    def _identity_column(self):
        return getattr(self.model, self.identity_field)

    def find_by_identity(self, identity: str) -> Account | None:
        """Return the account whose identity matches (after normalization), or None."""
        return (
            self.db.query(self.model)
            .filter(self._identity_column == self.normalize(identity))
            .first()
        )

    def get(self, account_id: int) -> Account | None:
        return self.db.query(self.model).filter(self.model.id == account_id).first()

    def create(self, identity: str, password_hash: str, **fields: Any) -> Account:
        """Insert a new account with this store's role. Raises DuplicateIdentityError."""
        account = self.model(
            **{self.identity_field: self.normalize(identity)},
            password_hash=password_hash,
            role=self.role,
            **fields,
        )
        self.db.add(account)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info(
                "Rejected duplicate %s for %s", self.identity_field, self.model.__tablename__
            )
            raise DuplicateIdentityError(self.duplicate_message) from e
        self.db.refresh(account)
        return account
