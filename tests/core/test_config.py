"""Tests for settings and application startup wiring."""

import io
import logging
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from app.core.config import Settings
from app.core.logging import setup_logging
from app.main import build_email_client, create_app
from app.newsletter.application.exceptions import EmailClientConfigurationError
from app.newsletter.domain.exceptions import SubscriberValidationError
from app.newsletter.infrastructure.db.session import _get_async_database_url


class TestSettings:
    """Tests for email-related settings helpers."""

    def test_timeout_is_converted_to_seconds(self) -> None:
        settings = Settings(email_timeout_milliseconds=250)

        assert settings.email_timeout == 0.25

    def test_sender_is_parsed(self) -> None:
        settings = Settings(email_sender="newsletter@example.com")

        assert settings.sender().value == "newsletter@example.com"

    def test_invalid_sender_is_rejected(self) -> None:
        settings = Settings(email_sender="not-an-email")

        with pytest.raises(SubscriberValidationError):
            settings.sender()

    def test_default_database_url_uses_asyncpg(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The default DSN names the async driver the engine is built with."""
        monkeypatch.delenv("DATABASE_URL", raising=False)
        settings = Settings(_env_file=None)

        assert str(settings.database_url).startswith("postgresql+asyncpg://")
        with patch(
            "app.newsletter.infrastructure.db.session.get_settings", return_value=settings
        ):
            assert _get_async_database_url() == str(settings.database_url)

    def test_plain_postgresql_url_gets_asyncpg_driver(self) -> None:
        settings = Settings(database_url="postgresql://u:p@db:5432/newsletter")

        with patch(
            "app.newsletter.infrastructure.db.session.get_settings", return_value=settings
        ):
            assert _get_async_database_url() == "postgresql+asyncpg://u:p@db:5432/newsletter"

    def test_token_is_redacted(self) -> None:
        settings = Settings(email_authorization_token=SecretStr("top-secret"))

        assert "top-secret" not in repr(settings)
        assert settings.email_authorization_token.get_secret_value() == "top-secret"


class TestStartup:
    """Tests for building the app and its email client."""

    @pytest.mark.asyncio
    async def test_build_email_client_uses_settings(self) -> None:
        settings = Settings(
            email_base_url="http://localhost:9999",
            email_sender="newsletter@example.com",
            email_timeout_milliseconds=500,
        )

        client = build_email_client(settings)
        try:
            assert client.base_url == "http://localhost:9999"
            assert client.sender.value == "newsletter@example.com"
            assert client.timeout == 0.5
        finally:
            await client.close()

    def test_invalid_base_url_aborts_startup(self) -> None:
        with pytest.raises(EmailClientConfigurationError):
            build_email_client(Settings(email_base_url="localhost"))

    def test_app_starts_and_reports_health(self) -> None:
        app = create_app()

        with TestClient(app) as client:
            assert app.state.email_client is not None
            response = client.get("/health_check")

        assert response.status_code == 200


def test_setup_logging_writes_to_given_stream() -> None:
    stream = io.StringIO()
    setup_logging(level="INFO", stream=stream)

    logging.getLogger("app.test").info("hello")
    logging.getLogger("httpx").info("suppressed")

    output = stream.getvalue()
    assert "| INFO     | app.test | hello" in output
    assert "suppressed" not in output
