"""ORM model for dashboard administrators."""

from sqlalchemy import Column, DateTime, Integer, String, func

from app.models.base import Base


class AdminUser(Base):
    """Administrator account; logs in by username. role is always 'admin'."""

    __tablename__ = "admin_users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default="admin", server_default="admin")
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
