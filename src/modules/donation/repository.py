from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable
from uuid import UUID

from fastapi import status
from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.core.base import BaseRepository
from src.database.models import Donation, DonationAnswer, DonationStatus, DonorAccount


@dataclass
class DonationFilters:
    status: DonationStatus | None = None
    campaign_id: UUID | None = None
    designation_id: UUID | None = None
    donor_email: str | None = None


class DonationRepository(BaseRepository):
    def _filtered(self, stmt, filters: DonationFilters):
        stmt = stmt.where(Donation.organization_id == self.organization_id)
        if filters.status is not None:
            stmt = stmt.where(Donation.status == filters.status)
        if filters.campaign_id is not None:
            stmt = stmt.where(Donation.campaign_id == filters.campaign_id)
        if filters.designation_id is not None:
            stmt = stmt.where(Donation.designation_id == filters.designation_id)
        if filters.donor_email:
            stmt = stmt.join(
                DonorAccount, DonorAccount.id == Donation.donor_account_id
            ).where(DonorAccount.email == filters.donor_email.lower())
        return stmt

    async def list(
        self, filters: DonationFilters, limit: int, offset: int
    ) -> tuple[list[Donation], int]:
        with self.translate_errors("list donations"):
            total = await self.db.scalar(
                self._filtered(select(func.count(Donation.id)), filters)
            )
            result = await self.db.execute(
                self._filtered(select(Donation), filters)
                .options(
                    selectinload(Donation.donor_account),
                    selectinload(Donation.campaign),
                    selectinload(Donation.designation),
                )
                .order_by(Donation.created_at.desc())
                .limit(limit)
                .offset(offset)
            )
        return list(result.scalars().all()), total or 0

    async def get(self, donation_id: UUID) -> Donation:
        with self.translate_errors("load donation"):
            result = await self.db.execute(
                select(Donation)
                .where(
                    Donation.id == donation_id,
                    Donation.organization_id == self.organization_id,
                )
                .options(
                    selectinload(Donation.donor_account),
                    selectinload(Donation.campaign),
                    selectinload(Donation.designation),
                    selectinload(Donation.answers).selectinload(
                        DonationAnswer.question
                    ),
                )
                .execution_options(populate_existing=True)
            )
            donation = result.scalar_one_or_none()
        if donation is None:
            raise DonorHubException(
                MessageCode.DONATION_NOT_FOUND, status.HTTP_404_NOT_FOUND
            )
        return donation

    async def list_for_donor(self, donor_account_id: UUID) -> list[Donation]:
        with self.translate_errors("list donor donations"):
            result = await self.db.execute(
                select(Donation)
                .where(
                    Donation.donor_account_id == donor_account_id,
                    Donation.organization_id == self.organization_id,
                )
                .options(
                    selectinload(Donation.campaign),
                    selectinload(Donation.designation),
                )
                .order_by(Donation.created_at.desc())
            )
        return list(result.scalars().all())

    async def create(
        self,
        campaign_id: UUID,
        donor_account_id: UUID,
        designation_id: UUID,
        amount: Decimal,
    ) -> Donation:
        """Record a pending donation; the charge id arrives with the payment."""
        donation = Donation(
            organization_id=self.organization_id,
            campaign_id=campaign_id,
            donor_account_id=donor_account_id,
            designation_id=designation_id,
            amount=amount,
            status=DonationStatus.PENDING,
        )
        self.db.add(donation)
        with self.translate_errors("create donation"):
            await self.db.flush()
        return donation

    async def add_answers(
        self, donation: Donation, answers: Iterable[tuple[UUID, str]]
    ) -> int:
        if donation.organization_id != self.organization_id:
            raise DonorHubException(
                MessageCode.DONATION_NOT_FOUND, status.HTTP_404_NOT_FOUND
            )
        rows = [
            DonationAnswer(
                donation_id=donation.id, question_id=question_id, answer_value=value
            )
            for question_id, value in answers
        ]
        if not rows:
            return 0
        self.db.add_all(rows)
        with self.translate_errors("save donation answers"):
            await self.db.flush()
        return len(rows)
