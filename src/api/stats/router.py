"""Dashboard statistics for the CRM."""

from fastapi import APIRouter, Request

from src.api.core.decorators.auth import ANY_STAFF_ROLE, require_role
from src.api.core.dependencies import AsyncSessionDep, StaffSessionDep
from src.api.core.messages import APIResponse
from src.api.stats.schemas import StatsSummaryModel, StatsSummaryResponse
from src.modules.stats.service import StatsPeriod, StatsService

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("/summary", response_model=StatsSummaryResponse)
@require_role(*ANY_STAFF_ROLE)
async def get_summary(
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
    period: StatsPeriod = StatsPeriod.MONTH,
) -> StatsSummaryResponse:
    """Campaign, giving and donor figures compared with the previous period."""
    summary = await StatsService(db).summary(session, period)
    return APIResponse.success_response(
        data=StatsSummaryModel.model_validate(summary)
    )
