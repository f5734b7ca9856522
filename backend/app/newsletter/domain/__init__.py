# Domain layer - pure business rules, no framework dependencies

from app.newsletter.domain.entities.subscription import Subscription
from app.newsletter.domain.exceptions import SubscriberValidationError
from app.newsletter.domain.value_objects.subscriber_email import SubscriberEmail
from app.newsletter.domain.value_objects.subscriber_name import SubscriberName

__all__ = [
    "Subscription",
    "SubscriberEmail",
    "SubscriberName",
    "SubscriberValidationError",
]
