"""FastAPI application factory and main entry point."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from app.core.config import Settings, get_settings
from app.core.logging import get_logger, setup_logging
from app.newsletter.infrastructure.db.session import dispose_engine
from app.newsletter.infrastructure.external.postmark_client import EmailClient
from app.newsletter.presentation.api import health, subscriptions

logger = get_logger(__name__)


def build_email_client(settings: Settings) -> EmailClient:
    """Build the Postmark client from settings.

    Raises:
        SubscriberValidationError: If the configured sender is not a valid email.
        EmailClientConfigurationError: If the base URL or timeout is unusable.
    """
    return EmailClient(
        base_url=settings.email_base_url,
        sender=settings.sender(),
        authorization_token=settings.email_authorization_token,
        timeout=settings.email_timeout,
        logger=get_logger("app.newsletter.email"),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown events."""
    settings = get_settings()

    # Startup
    setup_logging(level="DEBUG" if settings.debug else "INFO")
    logger.info("Newsletter service starting up...")
    logger.info(f"Environment: {settings.app_env}")

    # Misconfiguration here is fatal: let it abort startup
    app.state.email_client = build_email_client(settings)
    logger.info(f"Email client ready (provider: {settings.email_base_url})")

    yield

    # Shutdown
    logger.info("Newsletter service shutting down...")
    await app.state.email_client.close()
    await dispose_engine()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title="Newsletter",
        description="Newsletter subscriptions with transactional confirmation emails",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(subscriptions.router, tags=["Subscriptions"])

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.application_host,
        port=settings.application_port,
        reload=settings.is_development,
    )
