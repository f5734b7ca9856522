"""FastAPI dependencies shared by the API routers."""

from fastapi import HTTPException, Request, status

from app.newsletter.application.interfaces.email_sender import EmailSender


def get_email_client(request: Request) -> EmailSender:
    """Return the email client built during application startup.

    Raises:
        HTTPException: 503 if the app was started without an email client.
    """
    email_client = getattr(request.app.state, "email_client", None)
    if email_client is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Email delivery is not configured",
        )
    return email_client
