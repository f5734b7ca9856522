"""SQLAlchemy ORM models mapping to domain entities.

These models represent the database schema and handle persistence concerns.
They should be converted to/from domain entities via repository mappers.
"""

from sqlalchemy import Column, DateTime, Text, Uuid
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class SubscriptionModel(Base):
    """ORM model for subscriptions table."""

    __tablename__ = "subscriptions"

    id = Column(Uuid, primary_key=True)
    email = Column(Text, unique=True, nullable=False, index=True)
    name = Column(Text, nullable=False)
    subscribed_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        return f"<SubscriptionModel(id={self.id})>"
