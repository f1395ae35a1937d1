"""Stripe Connect onboarding and webhook endpoints."""

import time

from fastapi import APIRouter, Request, status

from src.api.core.decorators.auth import require_role
from src.api.core.dependencies import AsyncSessionDep, StaffSessionDep
from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import APIResponse, MessageCode
from src.api.stripe.schemas import StripeConnectData, StripeConnectResponse
from src.database.models import StaffRoleName
from src.modules.payments.service import StripeConnectService, StripeWebhookService
from src.utils.logger import get_logger

logger = get_logger(__name__)

# Mounted under /api/crm
connect_router = APIRouter(prefix="/stripe", tags=["stripe"])
# Mounted at the root; Stripe calls it directly
router = APIRouter(prefix="/stripe", tags=["stripe"])

MAX_WEBHOOK_PAYLOAD = 1024 * 1024
WEBHOOK_TOLERANCE_SECONDS = 300


@connect_router.post("/connect", response_model=StripeConnectResponse)
@require_role(StaffRoleName.ADMIN)
async def create_connect_link(
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> StripeConnectResponse:
    """Start or resume Stripe Express onboarding for the organization."""
    url = await StripeConnectService(db).create_onboarding_link(session)
    return APIResponse.success_response(
        message_code=MessageCode.STRIPE_ACCOUNT_LINK_CREATED,
        data=StripeConnectData(url=url),
    )


@router.post("/webhook")
async def stripe_webhook(
    request: Request,
    db: AsyncSessionDep,
):
    """Handle Stripe webhook events."""
    payload = await request.body()

    if not payload:
        raise DonorHubException(
            MessageCode.BAD_REQUEST,
            status.HTTP_400_BAD_REQUEST,
            details={"description": "Empty webhook payload"},
        )

    if len(payload) > MAX_WEBHOOK_PAYLOAD:
        raise DonorHubException(
            MessageCode.BAD_REQUEST,
            status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            details={"description": "Webhook payload too large"},
        )

    signature = request.headers.get("stripe-signature")
    if not signature:
        raise DonorHubException(
            MessageCode.BAD_REQUEST,
            status.HTTP_400_BAD_REQUEST,
            details={"description": "Missing stripe-signature header"},
        )

    webhook_service = StripeWebhookService(db)
    try:
        event = webhook_service.validate_webhook_signature(payload, signature)
    except ValueError as e:
        logger.error(f"Webhook validation error: {e}")
        raise DonorHubException(
            MessageCode.BAD_REQUEST,
            status.HTTP_400_BAD_REQUEST,
            details={"description": "Invalid webhook data"},
        ) from e

    event_timestamp = event.get("created", 0)
    if abs(int(time.time()) - event_timestamp) > WEBHOOK_TOLERANCE_SECONDS:
        logger.warning(f"Webhook event timestamp too old: {event_timestamp}")
        raise DonorHubException(
            MessageCode.BAD_REQUEST,
            status.HTTP_400_BAD_REQUEST,
            details={"description": "Webhook event timestamp too old"},
        )

    if await webhook_service.handle_webhook_event(event):
        logger.info(f"Successfully processed webhook event: {event['type']}")
        return {"status": "success"}

    logger.debug(f"Webhook event not handled: {event['type']}")
    return {"status": "ignored"}
