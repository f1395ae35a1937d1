from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import func, select

from src.core.base import BaseRepository
from src.database.models import Campaign, Donation, DonationStatus


class StatsRepository(BaseRepository):
    """Aggregates over ``[start, end)`` windows of the session's organization."""

    async def count_active_campaigns(self, start: datetime, end: datetime) -> int:
        with self.translate_errors("count campaigns"):
            count = await self.db.scalar(
                select(func.count(Campaign.id)).where(
                    Campaign.organization_id == self.organization_id,
                    Campaign.is_active.is_(True),
                    Campaign.created_at >= start,
                    Campaign.created_at < end,
                )
            )
        return count or 0

    async def sum_completed(self, start: datetime, end: datetime) -> Decimal:
        with self.translate_errors("sum donations"):
            total = await self.db.scalar(
                select(func.coalesce(func.sum(Donation.amount), 0)).where(
                    Donation.organization_id == self.organization_id,
                    Donation.status == DonationStatus.COMPLETED,
                    Donation.created_at >= start,
                    Donation.created_at < end,
                )
            )
        return Decimal(str(total or 0))

    async def completed_donor_ids(self, start: datetime, end: datetime) -> set[UUID]:
        with self.translate_errors("load donors"):
            result = await self.db.execute(
                select(Donation.donor_account_id)
                .where(
                    Donation.organization_id == self.organization_id,
                    Donation.status == DonationStatus.COMPLETED,
                    Donation.created_at >= start,
                    Donation.created_at < end,
                )
                .distinct()
            )
        return set(result.scalars().all())
