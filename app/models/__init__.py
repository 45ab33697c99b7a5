"""SQLAlchemy ORM models."""

from app.models.admin_user import AdminUser
from app.models.base import Base
from app.models.contact import Contact
from app.models.sponsor import Sponsor
from app.models.user import User

__all__ = ["AdminUser", "Base", "Contact", "Sponsor", "User"]
