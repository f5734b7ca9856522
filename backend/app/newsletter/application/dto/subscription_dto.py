"""Data Transfer Objects for subscription requests and responses.

Raw request fields are plain strings on purpose: domain validation happens
in the use case through the SubscriberName and SubscriberEmail value objects.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SubscribeRequest(BaseModel):
    """Untrusted signup data as submitted by the subscriber."""

    name: str = Field(description="Subscriber display name")
    email: str = Field(description="Subscriber email address")


class SubscriptionDTO(BaseModel):
    """Subscription data for API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(description="Unique subscription identifier")
    email: str = Field(description="Subscribed email address")
    name: str = Field(description="Subscriber display name")
    subscribed_at: datetime = Field(description="When the subscription was created (UTC)")
