from app.newsletter.domain.entities.subscription import Subscription

__all__ = ["Subscription"]
