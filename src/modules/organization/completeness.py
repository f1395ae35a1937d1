"""Derived public status of an organization.

An organization is publicly active when it can take payments and every
required website page is published. The flag is recomputed after the inputs
change and written only when the computed value differs from the stored one.
"""

from dataclasses import dataclass, field

from fastapi import status

from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.core.context import Session
from src.database.models import Organization
from src.modules.organization.repository import OrganizationRepository
from src.modules.page.repository import OrganizationPageRepository
from src.modules.payments.verification import PaymentAccountVerifier
from src.modules.publishing.rules import REQUIRED_PAGE_TYPES

PAYMENT_REQUIREMENT = "Stripe account not verified"
PAGES_REQUIREMENT = "Required pages not published"


@dataclass
class CompletenessStatus:
    is_publicly_active: bool
    payment_account_verified: bool
    required_pages_published: bool
    missing_requirements: list[str] = field(default_factory=list)


@dataclass
class CompletenessResult:
    is_publicly_active: bool
    changed: bool


class CompletenessService(BaseService):
    def __init__(self, db, verifier: PaymentAccountVerifier | None = None):
        super().__init__(db)
        self.verifier = verifier or PaymentAccountVerifier()

    async def _evaluate(
        self, session: Session, organization: Organization
    ) -> CompletenessStatus:
        payment_verified = self.verifier.is_verified(organization.stripe_account_id)

        pages = await OrganizationPageRepository(self.db, session).list()
        published_types = {page.page_type for page in pages if page.is_published}
        pages_published = all(
            page_type in published_types for page_type in REQUIRED_PAGE_TYPES
        )

        missing = []
        if not payment_verified:
            missing.append(PAYMENT_REQUIREMENT)
        if not pages_published:
            missing.append(PAGES_REQUIREMENT)

        return CompletenessStatus(
            is_publicly_active=payment_verified and pages_published,
            payment_account_verified=payment_verified,
            required_pages_published=pages_published,
            missing_requirements=missing,
        )

    async def get_completeness_status(self, session: Session) -> CompletenessStatus:
        organization = await OrganizationRepository(self.db, session).get()
        return await self._evaluate(session, organization)

    async def recompute(self, session: Session) -> CompletenessResult:
        """Refresh ``is_publicly_active``; no write when nothing changed."""
        org_repo = OrganizationRepository(self.db, session)
        organization = await org_repo.get()
        evaluated = await self._evaluate(session, organization)

        if organization.is_publicly_active == evaluated.is_publicly_active:
            return CompletenessResult(evaluated.is_publicly_active, changed=False)

        async with self.transaction():
            await org_repo.set_publicly_active(
                organization, evaluated.is_publicly_active
            )
        self.logger.info(
            "Organization public status changed",
            organization_id=str(organization.id),
            is_publicly_active=evaluated.is_publicly_active,
        )
        return CompletenessResult(evaluated.is_publicly_active, changed=True)

    async def publish_site(self, session: Session) -> CompletenessStatus:
        organization = await OrganizationRepository(self.db, session).get()
        evaluated = await self._evaluate(session, organization)
        if evaluated.missing_requirements:
            raise DonorHubException(
                MessageCode.SITE_INCOMPLETE,
                status.HTTP_400_BAD_REQUEST,
                {"missing_requirements": evaluated.missing_requirements},
                message=(
                    "Cannot publish site. Missing requirements: "
                    + ", ".join(evaluated.missing_requirements)
                ),
            )
        await self.recompute(session)
        return evaluated
