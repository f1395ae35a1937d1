"""Donation records and answers to campaign questions."""

import uuid
from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Numeric, String, Text
from sqlalchemy.dialects.postgresql import UUID as SQLAlchemyUUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, utcnow


class DonationStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


class Donation(Base):
    __tablename__ = "donations"

    id: Mapped[UUID] = mapped_column(
        SQLAlchemyUUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    organization_id: Mapped[UUID] = mapped_column(
        ForeignKey("organizations.id", ondelete="CASCADE"), index=True, nullable=False
    )
    campaign_id: Mapped[UUID] = mapped_column(
        ForeignKey("campaigns.id"), index=True, nullable=False
    )
    donor_account_id: Mapped[UUID] = mapped_column(
        ForeignKey("donor_accounts.id"), index=True, nullable=False
    )
    designation_id: Mapped[UUID] = mapped_column(
        ForeignKey("designations.id"), nullable=False
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    stripe_charge_id: Mapped[str | None] = mapped_column(
        String(255), unique=True, nullable=True
    )
    status: Mapped[DonationStatus] = mapped_column(
        String(32), default=DonationStatus.PENDING, nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    campaign = relationship("Campaign")
    designation = relationship("Designation")
    donor_account = relationship("DonorAccount", back_populates="donations")
    answers = relationship(
        "DonationAnswer", back_populates="donation", passive_deletes=True
    )


class DonationAnswer(Base):
    __tablename__ = "donation_answers"

    id: Mapped[UUID] = mapped_column(
        SQLAlchemyUUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    donation_id: Mapped[UUID] = mapped_column(
        ForeignKey("donations.id", ondelete="CASCADE"), index=True, nullable=False
    )
    question_id: Mapped[UUID] = mapped_column(
        ForeignKey("campaign_questions.id"), nullable=False
    )
    answer_value: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )

    donation = relationship("Donation", back_populates="answers")
    question = relationship("CampaignQuestion")
