"""Stripe Connect onboarding and webhook handling."""

import stripe  # type: ignore
from fastapi import status
from stripe import SignatureVerificationError, StripeError  # type: ignore

from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.core.context import PublicSession, StaffSession
from src.modules.organization.completeness import CompletenessService
from src.modules.organization.repository import OrganizationLookup
from src.modules.organization.service import OrganizationService
from src.utils.settings.stripe import StripeSettings


class StripeConnectService(BaseService):
    """Creates Express accounts and onboarding links for organizations."""

    def __init__(self, db, settings: StripeSettings | None = None):
        super().__init__(db)
        self.settings = settings or StripeSettings()
        stripe.api_key = self.settings.STRIPE_SECRET_KEY.get_secret_value()

    async def create_onboarding_link(self, session: StaffSession) -> str:
        org_service = OrganizationService(self.db)
        organization = await org_service.get_organization(session)

        account_id = organization.stripe_account_id
        if account_id is None:
            try:
                account = stripe.Account.create(
                    type="express",
                    metadata={"organization_id": str(organization.id)},
                )
            except StripeError as e:
                self.logger.error(f"Stripe error creating account: {e}")
                raise DonorHubException(
                    MessageCode.EXTERNAL_SERVICE_ERROR,
                    status.HTTP_502_BAD_GATEWAY,
                    {"description": "Failed to create Stripe account"},
                ) from e
            account_id = account["id"]
            await org_service.update_organization(
                session, {"stripe_account_id": account_id}
            )
            self.logger.info(
                "Created Stripe account",
                organization_id=str(organization.id),
                account_id=account_id,
            )

        try:
            link = stripe.AccountLink.create(
                account=account_id,
                refresh_url=self.settings.STRIPE_CONNECT_REFRESH_URL,
                return_url=self.settings.STRIPE_CONNECT_RETURN_URL,
                type="account_onboarding",
            )
        except StripeError as e:
            self.logger.error(f"Stripe error creating account link: {e}")
            raise DonorHubException(
                MessageCode.EXTERNAL_SERVICE_ERROR,
                status.HTTP_502_BAD_GATEWAY,
                {"description": "Failed to create Stripe onboarding link"},
            ) from e
        return link["url"]


class StripeWebhookService(BaseService):
    """Verifies and dispatches Stripe webhook events."""

    def __init__(self, db, settings: StripeSettings | None = None):
        super().__init__(db)
        self.settings = settings or StripeSettings()

    def validate_webhook_signature(self, payload: bytes, signature: str) -> dict:
        """Validate Stripe webhook signature and return event."""
        try:
            return stripe.Webhook.construct_event(
                payload, signature, self.settings.STRIPE_WEBHOOK_SECRET
            )
        except ValueError:
            raise ValueError("Invalid payload")
        except SignatureVerificationError:
            raise ValueError("Invalid signature")

    async def handle_webhook_event(self, event: dict) -> bool:
        """Dispatch an event; False when the type is not handled."""
        if event["type"] == "account.updated":
            return await self._handle_account_updated(event["data"]["object"])
        return False

    async def _handle_account_updated(self, account: dict) -> bool:
        organization = await OrganizationLookup(self.db).find_by_stripe_account(
            account["id"]
        )
        if organization is None:
            self.logger.warning(
                "account.updated for unknown Stripe account", account_id=account["id"]
            )
            return False

        result = await CompletenessService(self.db).recompute(
            PublicSession(organization_id=organization.id)
        )
        self.logger.info(
            "Recomputed completeness from Stripe webhook",
            organization_id=str(organization.id),
            is_publicly_active=result.is_publicly_active,
            changed=result.changed,
        )
        return True
