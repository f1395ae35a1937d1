from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from uuid import UUID

from src.core.base import BaseService
from src.core.context import StaffSession
from src.database.models.base import utcnow
from src.modules.stats.repository import StatsRepository


class StatsPeriod(str, Enum):
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


@dataclass
class Metric:
    value: float
    # Relative to the previous period, 0.25 meaning +25%
    change: float


@dataclass
class StatsSummary:
    period: StatsPeriod
    active_campaigns: Metric
    total_donations: Metric
    active_donors: Metric
    retention_rate: Metric


def _month_start(moment: datetime, months_back: int) -> datetime:
    year, month = divmod(moment.year * 12 + moment.month - 1 - months_back, 12)
    return moment.replace(
        year=year, month=month + 1, day=1, hour=0, minute=0, second=0, microsecond=0
    )


def period_starts(
    period: StatsPeriod, now: datetime
) -> tuple[datetime, datetime, datetime]:
    """Starts of the period before last, the last period and the current one.

    Weeks are rolling seven day windows; months and years are calendar aligned.
    """
    match period:
        case StatsPeriod.WEEK:
            week = timedelta(days=7)
            return now - 3 * week, now - 2 * week, now - week
        case StatsPeriod.MONTH:
            return _month_start(now, 2), _month_start(now, 1), _month_start(now, 0)
        case StatsPeriod.YEAR:
            january = _month_start(now, now.month - 1)
            return (
                january.replace(year=january.year - 2),
                january.replace(year=january.year - 1),
                january,
            )


def relative_change(current: float, previous: float) -> float:
    if previous == 0:
        return 1.0 if current > 0 else 0.0
    return round((current - previous) / previous, 4)


def retention(earlier: set[UUID], later: set[UUID]) -> float:
    """Share of ``earlier`` donors who gave again in ``later``."""
    if not earlier:
        return 0.0
    return round(len(earlier & later) / len(earlier), 2)


class StatsService(BaseService):
    async def summary(
        self,
        session: StaffSession,
        period: StatsPeriod = StatsPeriod.MONTH,
        now: datetime | None = None,
    ) -> StatsSummary:
        """Dashboard figures for the current period, each with its change."""
        now = now or utcnow()
        before_start, previous_start, current_start = period_starts(period, now)
        repo = StatsRepository(self.db, session)

        campaigns = await repo.count_active_campaigns(current_start, now)
        previous_campaigns = await repo.count_active_campaigns(
            previous_start, current_start
        )

        total = round(float(await repo.sum_completed(current_start, now)))
        previous_total = round(
            float(await repo.sum_completed(previous_start, current_start))
        )

        donors = await repo.completed_donor_ids(current_start, now)
        previous_donors = await repo.completed_donor_ids(previous_start, current_start)
        before_donors = await repo.completed_donor_ids(before_start, previous_start)

        rate = retention(previous_donors, donors)
        previous_rate = retention(before_donors, previous_donors)

        return StatsSummary(
            period=period,
            active_campaigns=Metric(
                campaigns, relative_change(campaigns, previous_campaigns)
            ),
            total_donations=Metric(total, relative_change(total, previous_total)),
            active_donors=Metric(
                len(donors), relative_change(len(donors), len(previous_donors))
            ),
            retention_rate=Metric(rate, relative_change(rate, previous_rate)),
        )
