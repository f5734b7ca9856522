"""Newsletter subscription API endpoints.

- POST /subscriptions - Subscribe with URL-form-encoded name and email
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Form, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.newsletter.application.dto.subscription_dto import SubscribeRequest, SubscriptionDTO
from app.newsletter.application.exceptions import (
    EmailDeliveryError,
    InvalidSubscriberError,
    SubscriptionAlreadyExistsError,
)
from app.newsletter.application.interfaces.email_sender import EmailSender
from app.newsletter.application.use_cases.subscribe import SubscribeUseCase
from app.newsletter.infrastructure.db.session import get_db_session
from app.newsletter.infrastructure.repositories.sql_subscription_repository import (
    SqlSubscriptionRepository,
)
from app.newsletter.presentation.api.dependencies import get_email_client

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/subscriptions", response_model=SubscriptionDTO, status_code=status.HTTP_200_OK)
async def subscribe(
    name: Annotated[Optional[str], Form()] = None,
    email: Annotated[Optional[str], Form()] = None,
    session: AsyncSession = Depends(get_db_session),
    email_client: EmailSender = Depends(get_email_client),
) -> SubscriptionDTO:
    """Subscribe a new reader and send a confirmation email.

    Args:
        name: Subscriber display name (form field).
        email: Subscriber email address (form field).
        session: Database session (injected).
        email_client: Email sender (injected).

    Returns:
        SubscriptionDTO representing the stored subscription.

    Raises:
        HTTPException: 400 if a field is missing or invalid.
        HTTPException: 409 if the email is already subscribed.
        HTTPException: 500 if the confirmation email could not be sent.
    """
    missing = [field for field, value in (("name", name), ("email", email)) if value is None]
    if missing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Missing form field(s): {', '.join(missing)}",
        )

    use_case = SubscribeUseCase(
        subscription_repository=SqlSubscriptionRepository(session),
        email_sender=email_client,
    )

    try:
        result = await use_case.execute(SubscribeRequest(name=name, email=email))
        await session.commit()
        return result
    except InvalidSubscriberError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        ) from e
    except SubscriptionAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=e.message,
        ) from e
    except EmailDeliveryError as e:
        await session.rollback()
        logger.error(f"Subscription not confirmed: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to send the confirmation email",
        ) from e
