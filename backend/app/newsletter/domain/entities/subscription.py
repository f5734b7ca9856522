"""Subscription entity representing a newsletter signup."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Self
from uuid import UUID, uuid4

from app.newsletter.domain.value_objects.subscriber_email import SubscriberEmail
from app.newsletter.domain.value_objects.subscriber_name import SubscriberName


@dataclass
class Subscription:
    """Domain entity representing a subscriber's newsletter signup.

    Attributes:
        id: Unique identifier, generated on creation.
        email: Validated address the newsletter is sent to.
        name: Validated subscriber display name.
        subscribed_at: When the signup happened (UTC).
    """

    email: SubscriberEmail
    name: SubscriberName
    id: UUID = field(default_factory=uuid4)
    subscribed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, email: SubscriberEmail, name: SubscriberName) -> Self:
        """Start a new subscription for an already validated subscriber."""
        return cls(email=email, name=name)
