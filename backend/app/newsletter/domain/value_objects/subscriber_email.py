"""SubscriberEmail value object for validated email addresses."""

from dataclasses import dataclass
from typing import Self

from email_validator import EmailNotValidError, validate_email

from app.newsletter.domain.exceptions import SubscriberValidationError


@dataclass(frozen=True)
class SubscriberEmail:
    """Immutable value object representing a validated email address.

    The address is checked against the RFC grammar by ``email-validator``
    (no DNS deliverability lookup) and stored exactly as given.

    Attributes:
        value: The validated email address string.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate email format after initialization."""
        try:
            validate_email(self.value, check_deliverability=False)
        except EmailNotValidError as e:
            raise SubscriberValidationError(
                self.value, f"{self.value!r} is an invalid email: {e}"
            ) from e

    @classmethod
    def parse(cls, value: str) -> Self:
        """Create a SubscriberEmail from untrusted input.

        Args:
            value: Raw email address, e.g. from a form field.

        Returns:
            A new SubscriberEmail instance.

        Raises:
            SubscriberValidationError: If the address is not a valid email.
        """
        return cls(value)

    def __str__(self) -> str:
        return self.value
