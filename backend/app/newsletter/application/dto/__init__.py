# DTOs for API request/response contracts

from .subscription_dto import SubscribeRequest, SubscriptionDTO

__all__ = [
    "SubscribeRequest",
    "SubscriptionDTO",
]
