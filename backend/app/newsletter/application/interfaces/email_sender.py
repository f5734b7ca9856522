"""Email sender interface for dispatching transactional emails."""

from abc import ABC, abstractmethod

from app.newsletter.domain.value_objects.subscriber_email import SubscriberEmail


class EmailSender(ABC):
    """Abstract base class for transactional email delivery.

    Implementations send a single message per call and never retry;
    retry policy belongs to the caller.
    """

    @abstractmethod
    async def send_email(
        self,
        recipient: SubscriberEmail,
        subject: str,
        html_content: str,
        text_content: str,
    ) -> None:
        """Send one email to the given recipient.

        Args:
            recipient: Validated recipient address.
            subject: Message subject line.
            html_content: HTML body.
            text_content: Plain-text body.

        Raises:
            EmailDeliveryError: If the provider did not accept the message.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        ...
