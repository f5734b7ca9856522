"""Application use cases for orchestrating domain logic."""

from app.newsletter.application.use_cases.subscribe import SubscribeUseCase

__all__ = [
    "SubscribeUseCase",
]
