"""Campaign API schemas, including linked designations and custom questions."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from src.api.core.constants import MAX_SYNC_DESIGNATIONS, MAX_SYNC_QUESTIONS
from src.api.core.messages import APIResponse
from src.api.designation.schemas import DesignationModel
from src.database.models import QuestionType


class CampaignModel(BaseModel):
    id: UUID
    organization_id: UUID
    default_designation_id: UUID | None = None
    internal_name: str
    external_name: str | None = None
    slug: str
    goal_amount: Decimal | None = None
    icon: str | None = None
    page_config: dict | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class CampaignCreateRequest(BaseModel):
    internal_name: str = Field(..., min_length=1, max_length=255)
    external_name: str | None = Field(None, max_length=255)
    slug: str | None = Field(None, max_length=255)
    goal_amount: Decimal | None = Field(None, ge=0, max_digits=12, decimal_places=2)
    icon: str | None = Field(None, max_length=255)
    page_config: dict | None = None
    default_designation_id: UUID | None = None


class CampaignUpdateRequest(BaseModel):
    internal_name: str | None = Field(None, min_length=1, max_length=255)
    external_name: str | None = Field(None, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=255)
    goal_amount: Decimal | None = Field(None, ge=0, max_digits=12, decimal_places=2)
    icon: str | None = Field(None, max_length=255)
    page_config: dict | None = None
    default_designation_id: UUID | None = None


class PageConfigRequest(BaseModel):
    page_config: dict


class PageConfigData(BaseModel):
    page_config: dict


class DesignationSyncRequest(BaseModel):
    designation_ids: list[UUID] = Field(
        default_factory=list, max_length=MAX_SYNC_DESIGNATIONS
    )


class DesignationSyncData(BaseModel):
    added: int
    removed: int
    total: int


class DesignationLinkRequest(BaseModel):
    designation_id: UUID


class QuestionModel(BaseModel):
    id: UUID
    campaign_id: UUID
    question_text: str
    question_type: QuestionType
    options: list[str] | None = None
    is_required: bool
    display_order: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class QuestionCreateRequest(BaseModel):
    question_text: str = Field(..., min_length=1, max_length=500)
    question_type: QuestionType
    options: list[str] | None = None
    is_required: bool = False
    display_order: int = Field(0, ge=0)


class QuestionUpdateRequest(BaseModel):
    question_text: str | None = Field(None, min_length=1, max_length=500)
    question_type: QuestionType | None = None
    options: list[str] | None = None
    is_required: bool | None = None
    display_order: int | None = Field(None, ge=0)


class QuestionSyncItem(QuestionCreateRequest):
    id: UUID | None = None


class QuestionSyncRequest(BaseModel):
    questions: list[QuestionSyncItem] = Field(
        default_factory=list, max_length=MAX_SYNC_QUESTIONS
    )


class QuestionSyncData(BaseModel):
    added: int
    updated: int
    removed: int
    total: int


CampaignResponse = APIResponse[CampaignModel]
CampaignListResponse = APIResponse[list[CampaignModel]]
CampaignDeleteResponse = APIResponse[bool]
PageConfigResponse = APIResponse[PageConfigData]
DesignationSyncResponse = APIResponse[DesignationSyncData]
CampaignDesignationListResponse = APIResponse[list[DesignationModel]]
CampaignDesignationResponse = APIResponse[DesignationModel]
QuestionResponse = APIResponse[QuestionModel]
QuestionListResponse = APIResponse[list[QuestionModel]]
QuestionSyncResponse = APIResponse[QuestionSyncData]
