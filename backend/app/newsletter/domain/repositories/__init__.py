# Repository ports - implemented in the infrastructure layer

from .subscription_repository import SubscriptionRepository

__all__ = ["SubscriptionRepository"]
