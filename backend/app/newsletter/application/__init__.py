"""Application layer - use cases and orchestration.

This layer contains:
- DTOs: Data Transfer Objects for API input/output
- Interfaces: Ports for external integrations
- Use Cases: Application services that orchestrate domain logic
- Exceptions: Application-level error types
"""

from app.newsletter.application.dto import SubscribeRequest, SubscriptionDTO
from app.newsletter.application.exceptions import (
    ApplicationError,
    EmailClientConfigurationError,
    EmailDeliveryError,
    InvalidSubscriberError,
    SubscriptionAlreadyExistsError,
)
from app.newsletter.application.use_cases import SubscribeUseCase

__all__ = [
    # DTOs
    "SubscribeRequest",
    "SubscriptionDTO",
    # Use Cases
    "SubscribeUseCase",
    # Exceptions
    "ApplicationError",
    "InvalidSubscriberError",
    "SubscriptionAlreadyExistsError",
    "EmailDeliveryError",
    "EmailClientConfigurationError",
]
