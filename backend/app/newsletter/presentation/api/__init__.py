# FastAPI routers - subscriptions, health
from app.newsletter.presentation.api import health, subscriptions

__all__ = ["health", "subscriptions"]
