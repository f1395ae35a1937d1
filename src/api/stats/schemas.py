"""Dashboard statistics schemas."""

from pydantic import BaseModel

from src.api.core.messages import APIResponse
from src.modules.stats.service import StatsPeriod


class MetricModel(BaseModel):
    value: float
    change: float

    class Config:
        from_attributes = True


class StatsSummaryModel(BaseModel):
    period: StatsPeriod
    active_campaigns: MetricModel
    total_donations: MetricModel
    active_donors: MetricModel
    retention_rate: MetricModel

    class Config:
        from_attributes = True


StatsSummaryResponse = APIResponse[StatsSummaryModel]
