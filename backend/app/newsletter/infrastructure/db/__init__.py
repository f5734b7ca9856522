"""Database infrastructure components.

This module exports SQLAlchemy models, session management utilities,
and the Base class for ORM model definitions.
"""

from app.newsletter.infrastructure.db.models import Base, SubscriptionModel
from app.newsletter.infrastructure.db.session import (
    dispose_engine,
    get_async_session_local,
    get_db_session,
    get_engine,
)

__all__ = [
    # Base class
    "Base",
    # Models
    "SubscriptionModel",
    # Session utilities
    "get_engine",
    "get_async_session_local",
    "get_db_session",
    "dispose_engine",
]
