# Ports for external integrations (EmailSender)

from .email_sender import EmailSender

__all__ = [
    "EmailSender",
]
