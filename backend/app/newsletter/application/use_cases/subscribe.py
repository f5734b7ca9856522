"""Use case for subscribing a new reader to the newsletter.

Implements signup by orchestrating:
- Name and email validation via the SubscriberName/SubscriberEmail value objects
- Subscription persistence via SubscriptionRepository
- Confirmation delivery via EmailSender
"""

import logging
from typing import Optional

from app.newsletter.application.dto.subscription_dto import SubscribeRequest, SubscriptionDTO
from app.newsletter.application.exceptions import (
    InvalidSubscriberError,
    SubscriptionAlreadyExistsError,
)
from app.newsletter.application.interfaces.email_sender import EmailSender
from app.newsletter.domain.entities.subscription import Subscription
from app.newsletter.domain.exceptions import SubscriberValidationError
from app.newsletter.domain.repositories.subscription_repository import SubscriptionRepository
from app.newsletter.domain.value_objects.subscriber_email import SubscriberEmail
from app.newsletter.domain.value_objects.subscriber_name import SubscriberName

CONFIRMATION_SUBJECT = "Welcome to our newsletter!"


class SubscribeUseCase:
    """Application service for creating newsletter subscriptions.

    Untrusted input is parsed into domain values before anything is
    stored or sent, so malformed data never reaches the email sender.
    """

    def __init__(
        self,
        subscription_repository: SubscriptionRepository,
        email_sender: EmailSender,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """Initialize the use case with required dependencies.

        Args:
            subscription_repository: Repository for subscription persistence.
            email_sender: Port used to send the confirmation email.
            logger: Logger for signup events (default: module logger).
        """
        self._subscription_repository = subscription_repository
        self._email_sender = email_sender
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self, request: SubscribeRequest) -> SubscriptionDTO:
        """Execute the signup.

        Args:
            request: Raw name and email submitted by the subscriber.

        Returns:
            SubscriptionDTO representing the stored subscription.

        Raises:
            InvalidSubscriberError: If the name or email is invalid.
            SubscriptionAlreadyExistsError: If the email is already subscribed.
            EmailDeliveryError: If the confirmation email could not be sent.
        """
        # 1. Parse untrusted input into domain values
        try:
            name = SubscriberName.parse(request.name)
        except SubscriberValidationError as e:
            raise InvalidSubscriberError("name", e.value, e.reason) from e

        try:
            email = SubscriberEmail.parse(request.email)
        except SubscriberValidationError as e:
            raise InvalidSubscriberError("email", e.value, e.reason) from e

        # 2. Reject duplicates before writing
        existing = await self._subscription_repository.get_by_email(email.value)
        if existing is not None:
            raise SubscriptionAlreadyExistsError(email.value)

        # 3. Persist
        subscription = await self._subscription_repository.save(
            Subscription.create(email=email, name=name)
        )
        self._logger.info(f"Saved new subscriber {subscription.id}")

        # 4. Confirm
        await self._email_sender.send_email(
            recipient=subscription.email,
            subject=CONFIRMATION_SUBJECT,
            html_content=self._html_body(subscription.name),
            text_content=self._text_body(subscription.name),
        )

        return SubscriptionDTO(
            id=subscription.id,
            email=subscription.email.value,
            name=subscription.name.value,
            subscribed_at=subscription.subscribed_at,
        )

    @staticmethod
    def _html_body(name: SubscriberName) -> str:
        return (
            f"<h2>Welcome, {name.value.strip()}!</h2>"
            "<p>Thanks for subscribing to our newsletter.</p>"
        )

    @staticmethod
    def _text_body(name: SubscriberName) -> str:
        return f"Welcome, {name.value.strip()}!\n\nThanks for subscribing to our newsletter."
