"""Process-scoped collaborators built from settings and injected into routes."""

from datetime import timedelta
from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.database import get_db
from app.core.security import PasswordHasher, TokenIssuer
from app.services.auth import AuthService
from app.services.credentials import AccountStore
from app.services.notification import NotificationSender
from app.services.submissions import SubmissionStore


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=get_settings().BCRYPT_ROUNDS)


@lru_cache
def get_token_issuer() -> TokenIssuer:
    settings = get_settings()
    return TokenIssuer(
        secret=settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


@lru_cache
def get_notifier() -> NotificationSender:
    return NotificationSender(get_settings())


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> AuthService:
    """Dependency: an AuthService bound to this request's DB session."""
    settings = get_settings()
    return AuthService(
        users=AccountStore.users(db),
        admins=AccountStore.admins(db),
        hasher=hasher,
        issuer=issuer,
        user_ttl=timedelta(hours=settings.USER_TOKEN_EXPIRE_HOURS),
        admin_ttl=timedelta(hours=settings.ADMIN_TOKEN_EXPIRE_HOURS),
    )


def get_contact_store(db: Annotated[Session, Depends(get_db)]) -> SubmissionStore:
    return SubmissionStore.contacts(db)


def get_sponsor_store(db: Annotated[Session, Depends(get_db)]) -> SubmissionStore:
    return SubmissionStore.sponsors(db)
