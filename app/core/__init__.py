"""Core app configuration, database session, security primitives and error taxonomy."""

from app.core.config import get_settings, settings
from app.core.database import get_db
from app.core.errors import ErrorKind, ServiceError
from app.core.security import PasswordHasher, TokenIssuer, authorize

__all__ = [
    "ErrorKind",
    "PasswordHasher",
    "ServiceError",
    "TokenIssuer",
    "authorize",
    "get_db",
    "get_settings",
    "settings",
]
