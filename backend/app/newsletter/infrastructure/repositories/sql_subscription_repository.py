"""SQLAlchemy implementation of SubscriptionRepository.

Provides async database operations for Subscription entities using
SQLAlchemy 2.0 async patterns with asyncpg driver.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.newsletter.application.exceptions import SubscriptionAlreadyExistsError
from app.newsletter.domain.entities.subscription import Subscription
from app.newsletter.domain.repositories.subscription_repository import SubscriptionRepository
from app.newsletter.domain.value_objects.subscriber_email import SubscriberEmail
from app.newsletter.domain.value_objects.subscriber_name import SubscriberName
from app.newsletter.infrastructure.db.models import SubscriptionModel


class SqlSubscriptionRepository(SubscriptionRepository):
    """SQLAlchemy-based implementation of the SubscriptionRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with a database session.

        Args:
            session: An async SQLAlchemy session.
        """
        self._session = session

    async def get_by_email(self, email: str) -> Optional[Subscription]:
        """Retrieve the subscription for an email address."""
        stmt = select(SubscriptionModel).where(SubscriptionModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def save(self, subscription: Subscription) -> Subscription:
        """Insert a new subscription row.

        The unique constraint on email is the final word on duplicates,
        covering signups that race past the use case's lookup.
        """
        model = self._to_model(subscription)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            raise SubscriptionAlreadyExistsError(subscription.email.value) from e
        return self._to_entity(model)

    def _to_entity(self, model: SubscriptionModel) -> Subscription:
        """Convert a SubscriptionModel to a Subscription domain entity."""
        return Subscription(
            id=model.id,
            email=SubscriberEmail(model.email),
            name=SubscriberName(model.name),
            subscribed_at=model.subscribed_at,
        )

    def _to_model(self, entity: Subscription) -> SubscriptionModel:
        """Convert a Subscription domain entity to a SubscriptionModel."""
        return SubscriptionModel(
            id=entity.id,
            email=entity.email.value,
            name=entity.name.value,
            subscribed_at=entity.subscribed_at,
        )
