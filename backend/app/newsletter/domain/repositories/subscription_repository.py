"""Abstract repository interface for Subscription entities."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.subscription import Subscription


class SubscriptionRepository(ABC):
    """Abstract repository for Subscription persistence operations.

    All methods are async to support non-blocking I/O in the
    infrastructure layer.
    """

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Subscription]:
        """Retrieve the subscription for an email address.

        Args:
            email: The email address to search for.

        Returns:
            The Subscription if one exists, None otherwise.
        """
        pass

    @abstractmethod
    async def save(self, subscription: Subscription) -> Subscription:
        """Persist a new subscription.

        Args:
            subscription: The Subscription entity to store.

        Returns:
            The stored Subscription entity.

        Raises:
            SubscriptionAlreadyExistsError: If the email is already subscribed.
        """
        pass
