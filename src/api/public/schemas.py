"""Schemas for the anonymous public site."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from src.api.campaign.schemas import QuestionModel
from src.api.core.messages import APIResponse
from src.api.designation.schemas import DesignationModel
from src.api.donation.schemas import DonationDetailModel
from src.database.models import DonationStatus

MAX_ANSWERS = 100


class PublicCampaignModel(BaseModel):
    id: UUID
    external_name: str | None = None
    internal_name: str
    slug: str
    goal_amount: Decimal | None = None
    icon: str | None = None
    page_config: dict | None = None
    default_designation_id: UUID | None = None
    designations: list[DesignationModel] = []
    questions: list[QuestionModel] = []


class DonorDetailsRequest(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr


class AnswerRequest(BaseModel):
    question_id: UUID
    answer_value: str = Field(..., max_length=5000)


class DonationCreateRequest(BaseModel):
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    designation_id: UUID | None = None
    donor: DonorDetailsRequest
    answers: list[AnswerRequest] = Field(default_factory=list, max_length=MAX_ANSWERS)


class HistoryCampaignModel(BaseModel):
    id: UUID
    external_name: str | None = None
    slug: str
    goal_amount: Decimal | None = None
    icon: str | None = None
    is_active: bool

    class Config:
        from_attributes = True


class HistoryDesignationModel(BaseModel):
    id: UUID
    name: str
    description: str | None = None
    goal_amount: Decimal | None = None
    is_archived: bool

    class Config:
        from_attributes = True


class DonorDonationModel(BaseModel):
    """One entry of a donor's own giving history."""

    id: UUID
    amount: Decimal
    status: DonationStatus
    created_at: datetime
    campaign: HistoryCampaignModel
    designation: HistoryDesignationModel

    class Config:
        from_attributes = True


PublicCampaignResponse = APIResponse[PublicCampaignModel]
PublicDonationResponse = APIResponse[DonationDetailModel]
DonorHistoryResponse = APIResponse[list[DonorDonationModel]]
