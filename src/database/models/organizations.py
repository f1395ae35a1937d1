"""Organization (tenant) model."""

import uuid
from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy.dialects.postgresql import UUID as SQLAlchemyUUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, JSONType, utcnow


class Organization(Base):
    __tablename__ = "organizations"

    id: Mapped[UUID] = mapped_column(
        SQLAlchemyUUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    subdomain: Mapped[str] = mapped_column(
        String(63), unique=True, index=True, nullable=False
    )
    stripe_account_id: Mapped[str | None] = mapped_column(
        String(255), unique=True, nullable=True
    )
    # Derived by the completeness check, never written by clients
    is_publicly_active: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    settings: Mapped[dict | None] = mapped_column(JSONType, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    # Relationships (defined via string references to avoid circular imports)
    staff_roles = relationship(
        "StaffRole", back_populates="organization", passive_deletes=True
    )
    campaigns = relationship(
        "Campaign", back_populates="organization", passive_deletes=True
    )
    designations = relationship(
        "Designation", back_populates="organization", passive_deletes=True
    )
    pages = relationship(
        "OrganizationPage", back_populates="organization", passive_deletes=True
    )
