"""Postmark REST API client for sending transactional emails.

Postmark API documentation: https://postmarkapp.com/developer/api/email-api
"""

import asyncio
import logging
from typing import Optional

import httpx
from pydantic import SecretStr

from app.newsletter.application.exceptions import (
    EmailClientConfigurationError,
    EmailDeliveryError,
)
from app.newsletter.application.interfaces.email_sender import EmailSender
from app.newsletter.domain.value_objects.subscriber_email import SubscriberEmail

# Header Postmark reads the server token from
AUTHORIZATION_HEADER = "X-Postmark-Server-Token"

# Default timeout for HTTP requests
DEFAULT_TIMEOUT_SECONDS = 10.0


class EmailClient(EmailSender):
    """Postmark API client implementing the EmailSender interface.

    One instance is built at startup and shared by all requests. Nothing
    about the client changes after construction, so concurrent sends need
    no locking; each call owns its own request/response exchange.

    Attributes:
        _client: httpx AsyncClient for making HTTP requests.
        _base_url: Postmark API base URL.
        _sender: Address every message is sent from.
        _authorization_token: Postmark server token, revealed only when
            attached to an outgoing request.
    """

    def __init__(
        self,
        base_url: str,
        sender: SubscriberEmail,
        authorization_token: SecretStr,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """Initialize the Postmark client.

        Args:
            base_url: Postmark API base URL.
            sender: Validated sender address.
            authorization_token: Postmark server token.
            timeout: HTTP request timeout in seconds.
            logger: Logger for delivery events (default: module logger).

        Raises:
            EmailClientConfigurationError: If the base URL is unusable or the
                HTTP client cannot be built.
        """
        try:
            url = httpx.URL(base_url)
        except httpx.InvalidURL as e:
            raise EmailClientConfigurationError(f"invalid base URL {base_url!r}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise EmailClientConfigurationError(f"invalid base URL {base_url!r}")
        if timeout <= 0:
            raise EmailClientConfigurationError("timeout must be positive")

        self._base_url = base_url.rstrip("/")
        self._sender = sender
        self._authorization_token = authorization_token
        self._timeout = timeout
        self._logger = logger or logging.getLogger(__name__)
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def sender(self) -> SubscriberEmail:
        return self._sender

    @property
    def timeout(self) -> float:
        return self._timeout

    async def send_email(
        self,
        recipient: SubscriberEmail,
        subject: str,
        html_content: str,
        text_content: str,
    ) -> None:
        """Send one email through Postmark.

        Args:
            recipient: Validated recipient address.
            subject: Message subject line.
            html_content: HTML body.
            text_content: Plain-text body.

        Raises:
            EmailDeliveryError: On transport failure, timeout, or a non-2xx
                response from Postmark.
        """
        try:
            # Total deadline for the whole exchange, body included
            async with asyncio.timeout(self._timeout):
                response = await self._client.post(
                    "/email",
                    headers={
                        "Content-Type": "application/json",
                        AUTHORIZATION_HEADER: self._authorization_token.get_secret_value(),
                    },
                    json={
                        "From": self._sender.value,
                        "To": recipient.value,
                        "Subject": subject,
                        "HtmlBody": html_content,
                        "TextBody": text_content,
                    },
                )
                response.raise_for_status()

        except (httpx.TimeoutException, TimeoutError) as e:
            self._logger.error(
                f"Timeout after {self._timeout}s sending email to {recipient}"
            )
            raise EmailDeliveryError(
                recipient.value, f"timed out after {self._timeout}s", is_timeout=True
            ) from e
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            self._logger.error(f"Postmark error sending email to {recipient}: {status_code}")
            raise EmailDeliveryError(
                recipient.value,
                f"provider responded with HTTP {status_code}",
                status_code=status_code,
            ) from e
        except httpx.HTTPError as e:
            self._logger.error(
                f"Transport error sending email to {recipient}: {type(e).__name__}"
            )
            raise EmailDeliveryError(recipient.value, f"transport error: {e}") from e

        self._logger.info(f"Email sent to {recipient}")

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "EmailClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    def __repr__(self) -> str:
        return f"EmailClient(base_url={self._base_url!r}, sender={self._sender.value!r})"
