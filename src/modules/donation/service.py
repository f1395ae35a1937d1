from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID

from fastapi import status

from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.core.context import DonorSession, PublicSession, StaffSession
from src.database.models import Campaign, CampaignQuestion, Donation
from src.modules.campaign.repository import (
    CampaignDesignationRepository,
    CampaignQuestionRepository,
    CampaignRepository,
)
from src.modules.designation.repository import DesignationRepository
from src.modules.donation.repository import DonationFilters, DonationRepository
from src.modules.donor.repository import DonorAccountRepository


@dataclass
class DonorDetails:
    first_name: str
    last_name: str
    email: str


@dataclass
class DonationRequest:
    amount: Decimal
    donor: DonorDetails
    designation_id: UUID | None = None
    # question id -> answer
    answers: dict[UUID, str] = field(default_factory=dict)


def check_answers(
    questions: list[CampaignQuestion], answers: dict[UUID, str]
) -> None:
    """Answers must target the campaign's questions and cover required ones."""
    known = {question.id for question in questions}
    unknown = [str(question_id) for question_id in answers if question_id not in known]
    if unknown:
        raise DonorHubException(
            MessageCode.INVALID_INPUT,
            status.HTTP_400_BAD_REQUEST,
            {
                "description": "Answers reference questions outside this campaign",
                "question_ids": unknown,
            },
        )

    missing = [
        str(question.id)
        for question in questions
        if question.is_required and not (answers.get(question.id) or "").strip()
    ]
    if missing:
        raise DonorHubException(
            MessageCode.INVALID_INPUT,
            status.HTTP_400_BAD_REQUEST,
            {
                "description": "Required questions are unanswered",
                "question_ids": missing,
            },
        )


class DonationService(BaseService):
    async def list_donations(
        self,
        session: StaffSession,
        filters: DonationFilters,
        limit: int,
        offset: int,
    ) -> tuple[list[Donation], int]:
        return await DonationRepository(self.db, session).list(filters, limit, offset)

    async def get_donation(self, session: StaffSession, donation_id: UUID) -> Donation:
        return await DonationRepository(self.db, session).get(donation_id)

    async def list_donor_history(self, session: DonorSession) -> list[Donation]:
        return await DonationRepository(self.db, session).list_for_donor(
            session.donor_account_id
        )

    async def _resolve_designation(
        self, session: PublicSession, campaign: Campaign, designation_id: UUID | None
    ) -> UUID:
        designation_id = designation_id or campaign.default_designation_id
        if designation_id is None:
            raise DonorHubException(
                MessageCode.INVALID_INPUT,
                status.HTTP_400_BAD_REQUEST,
                {"description": "A designation is required for this campaign"},
            )

        designation = await DesignationRepository(self.db, session).get_available(
            designation_id
        )
        if designation.id != campaign.default_designation_id:
            linked = await CampaignDesignationRepository(self.db, session).list_ids(
                campaign.id
            )
            if designation.id not in linked:
                raise DonorHubException(
                    MessageCode.DESIGNATION_NOT_FOUND,
                    status.HTTP_404_NOT_FOUND,
                    {"description": "Designation is not offered by this campaign"},
                )
        return designation.id

    async def create_public_donation(
        self, session: PublicSession, slug: str, request: DonationRequest
    ) -> Donation:
        """Record a donation made through a published campaign page.

        The donor is matched by email within the organization, or created as a
        guest who can later claim the account by registering. The donation
        stays pending until the payment provider reports the charge.
        """
        campaign = await CampaignRepository(self.db, session).get_active_by_slug(slug)
        designation_id = await self._resolve_designation(
            session, campaign, request.designation_id
        )
        questions = await CampaignQuestionRepository(self.db, session).list(
            campaign.id
        )
        check_answers(questions, request.answers)

        donors = DonorAccountRepository(self.db, session)
        repo = DonationRepository(self.db, session)
        async with self.transaction():
            donor = await donors.find_by_email(request.donor.email)
            if donor is None:
                donor = await donors.create(
                    request.donor.first_name,
                    request.donor.last_name,
                    request.donor.email,
                )
            donation = await repo.create(
                campaign_id=campaign.id,
                donor_account_id=donor.id,
                designation_id=designation_id,
                amount=request.amount,
            )
            await repo.add_answers(donation, request.answers.items())
            donation_id = donation.id

        self.logger.info(
            "Donation recorded",
            organization_id=str(session.organization_id),
            campaign_id=str(campaign.id),
            donation_id=str(donation_id),
            guest=donor.is_guest,
        )
        return await repo.get(donation_id)
