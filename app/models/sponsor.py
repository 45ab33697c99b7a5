"""ORM model for sponsorship requests."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, false, func

from app.models.base import Base


class Sponsor(Base):
    """Sponsorship request; support_type is free text chosen on the site form."""

    __tablename__ = "sponsors"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(64), nullable=True)
    support_type = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    is_read = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        index=True,
    )
