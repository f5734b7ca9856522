"""Domain value objects for the newsletter service.

This module exports immutable value objects used throughout the domain layer:
- SubscriberEmail: Validated subscriber email addresses
- SubscriberName: Validated subscriber display names
"""

from app.newsletter.domain.value_objects.subscriber_email import SubscriberEmail
from app.newsletter.domain.value_objects.subscriber_name import SubscriberName

__all__ = ["SubscriberEmail", "SubscriberName"]
