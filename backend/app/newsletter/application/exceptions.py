"""Application-layer exceptions for use case error handling.

These exceptions represent failures that can occur while a use case runs.
They are designed to be caught and mapped to appropriate HTTP responses by
the presentation layer.
"""

from typing import Optional


class ApplicationError(Exception):
    """Base class for all application-layer exceptions."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class InvalidSubscriberError(ApplicationError):
    """Raised when submitted subscriber data fails domain validation."""

    def __init__(self, field: str, value: str, reason: str) -> None:
        super().__init__(
            message=f"Invalid {field}: {reason}",
            code="INVALID_SUBSCRIBER"
        )
        self.field = field
        self.value = value


class SubscriptionAlreadyExistsError(ApplicationError):
    """Raised when attempting to subscribe an email twice."""

    def __init__(self, email: str) -> None:
        super().__init__(
            message=f"{email} is already subscribed",
            code="SUBSCRIPTION_ALREADY_EXISTS"
        )
        self.email = email


class EmailDeliveryError(ApplicationError):
    """Raised when the email provider did not accept a message.

    Covers transport failures, timeouts and non-2xx provider responses.
    No retry has been attempted when this is raised.

    Attributes:
        recipient: Address the message was meant for.
        status_code: Provider HTTP status, if a response was received.
        is_timeout: True if no response arrived within the configured timeout.
    """

    def __init__(
        self,
        recipient: str,
        reason: str,
        status_code: Optional[int] = None,
        is_timeout: bool = False,
    ) -> None:
        super().__init__(
            message=f"Failed to deliver email to {recipient}: {reason}",
            code="EMAIL_DELIVERY_FAILED"
        )
        self.recipient = recipient
        self.status_code = status_code
        self.is_timeout = is_timeout


class EmailClientConfigurationError(ApplicationError):
    """Raised at startup when the email client cannot be built."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            message=f"Unable to build the email client: {reason}",
            code="EMAIL_CLIENT_MISCONFIGURED"
        )
