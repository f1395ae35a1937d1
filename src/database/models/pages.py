"""Organization website pages."""

import uuid
from datetime import datetime
from enum import Enum
from uuid import UUID

from sqlalchemy import Boolean, DateTime, ForeignKey, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID as SQLAlchemyUUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, JSONType, utcnow


class PageType(str, Enum):
    LANDING = "landing"
    ABOUT = "about"


class OrganizationPage(Base):
    __tablename__ = "organization_pages"

    id: Mapped[UUID] = mapped_column(
        SQLAlchemyUUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    organization_id: Mapped[UUID] = mapped_column(
        ForeignKey("organizations.id", ondelete="CASCADE"), index=True, nullable=False
    )
    page_type: Mapped[PageType] = mapped_column(String(32), nullable=False)
    content_config: Mapped[dict | None] = mapped_column(JSONType, nullable=True)
    is_published: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    organization = relationship("Organization", back_populates="pages")

    __table_args__ = (
        UniqueConstraint("organization_id", "page_type", name="unique_org_page_type"),
    )
