"""Donation and donor history schemas (read-only)."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel

from src.api.core.messages import APIResponse, Paginated
from src.database.models import Donation, DonationStatus


class DonorModel(BaseModel):
    id: UUID
    first_name: str
    last_name: str
    email: str
    is_guest: bool
    created_at: datetime

    class Config:
        from_attributes = True


class DonationModel(BaseModel):
    id: UUID
    campaign_id: UUID
    campaign_name: str
    designation_id: UUID
    designation_name: str
    donor: DonorModel
    amount: Decimal
    status: DonationStatus
    stripe_charge_id: str | None = None
    created_at: datetime

    @classmethod
    def from_donation(cls, donation: Donation) -> "DonationModel":
        return cls(
            id=donation.id,
            campaign_id=donation.campaign_id,
            campaign_name=donation.campaign.internal_name,
            designation_id=donation.designation_id,
            designation_name=donation.designation.name,
            donor=DonorModel.model_validate(donation.donor_account),
            amount=donation.amount,
            status=donation.status,
            stripe_charge_id=donation.stripe_charge_id,
            created_at=donation.created_at,
        )


class DonationAnswerModel(BaseModel):
    question_id: UUID
    question_text: str
    answer_value: str


class DonationDetailModel(DonationModel):
    answers: list[DonationAnswerModel]

    @classmethod
    def from_donation(cls, donation: Donation) -> "DonationDetailModel":
        summary = DonationModel.from_donation(donation)
        return cls(
            **summary.model_dump(),
            answers=[
                DonationAnswerModel(
                    question_id=answer.question_id,
                    question_text=answer.question.question_text,
                    answer_value=answer.answer_value,
                )
                for answer in donation.answers
            ],
        )


DonationListResponse = APIResponse[Paginated[DonationModel]]
DonationDetailResponse = APIResponse[DonationDetailModel]
DonorListResponse = APIResponse[Paginated[DonorModel]]
DonorResponse = APIResponse[DonorModel]
