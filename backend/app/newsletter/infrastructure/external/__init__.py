# External clients - Postmark

from .postmark_client import EmailClient

__all__ = [
    "EmailClient",
]
