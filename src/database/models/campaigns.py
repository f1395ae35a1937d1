"""Campaign, its available designations and its custom questions."""

import uuid
from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import UUID as SQLAlchemyUUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, JSONType, utcnow


class QuestionType(str, Enum):
    TEXT = "text"
    TEXTAREA = "textarea"
    EMAIL = "email"
    PHONE = "phone"
    NUMBER = "number"
    SELECT = "select"
    RADIO = "radio"
    CHECKBOX = "checkbox"
    DATE = "date"
    URL = "url"


# Question types whose answers come from a fixed option list
CHOICE_QUESTION_TYPES = frozenset(
    {QuestionType.SELECT, QuestionType.RADIO, QuestionType.CHECKBOX}
)


class Campaign(Base):
    __tablename__ = "campaigns"

    id: Mapped[UUID] = mapped_column(
        SQLAlchemyUUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    organization_id: Mapped[UUID] = mapped_column(
        ForeignKey("organizations.id", ondelete="CASCADE"), index=True, nullable=False
    )
    default_designation_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("designations.id", ondelete="SET NULL"), nullable=True
    )
    internal_name: Mapped[str] = mapped_column(String(255), nullable=False)
    external_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    slug: Mapped[str] = mapped_column(String(255), nullable=False)
    goal_amount: Mapped[Decimal | None] = mapped_column(
        Numeric(12, 2), nullable=True
    )
    icon: Mapped[str | None] = mapped_column(String(255), nullable=True)
    page_config: Mapped[dict | None] = mapped_column(JSONType, nullable=True)
    # Flipped to true only by the publish workflow
    is_active: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    organization = relationship("Organization", back_populates="campaigns")
    default_designation = relationship("Designation")
    available_designations = relationship(
        "CampaignAvailableDesignation",
        back_populates="campaign",
        passive_deletes=True,
    )
    questions = relationship(
        "CampaignQuestion",
        back_populates="campaign",
        passive_deletes=True,
    )

    __table_args__ = (
        UniqueConstraint("organization_id", "slug", name="unique_campaign_org_slug"),
    )


class CampaignAvailableDesignation(Base):
    """Designation a donor may pick when giving to a campaign."""

    __tablename__ = "campaign_available_designations"

    id: Mapped[UUID] = mapped_column(
        SQLAlchemyUUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    campaign_id: Mapped[UUID] = mapped_column(
        ForeignKey("campaigns.id", ondelete="CASCADE"), index=True, nullable=False
    )
    designation_id: Mapped[UUID] = mapped_column(
        ForeignKey("designations.id", ondelete="CASCADE"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )

    campaign = relationship("Campaign", back_populates="available_designations")
    designation = relationship("Designation")

    __table_args__ = (
        UniqueConstraint(
            "campaign_id", "designation_id", name="unique_campaign_designation"
        ),
    )


class CampaignQuestion(Base):
    __tablename__ = "campaign_questions"

    id: Mapped[UUID] = mapped_column(
        SQLAlchemyUUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    campaign_id: Mapped[UUID] = mapped_column(
        ForeignKey("campaigns.id", ondelete="CASCADE"), index=True, nullable=False
    )
    question_text: Mapped[str] = mapped_column(String(500), nullable=False)
    question_type: Mapped[QuestionType] = mapped_column(String(32), nullable=False)
    options: Mapped[list | None] = mapped_column(JSONType, nullable=True)
    is_required: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    display_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    campaign = relationship("Campaign", back_populates="questions")
