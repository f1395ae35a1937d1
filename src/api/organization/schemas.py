"""Organization API schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.api.core.messages import APIResponse

SUBDOMAIN_PATTERN = r"^[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?$"


class OrganizationModel(BaseModel):
    id: UUID
    name: str
    subdomain: str
    stripe_account_id: str | None = None
    is_publicly_active: bool
    settings: dict | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class PublicOrganizationModel(BaseModel):
    """Organization fields visible on the public site."""

    id: UUID
    name: str
    subdomain: str
    is_publicly_active: bool
    settings: dict | None = None

    class Config:
        from_attributes = True


class OrganizationUpdateRequest(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    subdomain: str | None = Field(None, pattern=SUBDOMAIN_PATTERN)
    stripe_account_id: str | None = Field(None, max_length=255)
    settings: dict | None = None


class CompletenessModel(BaseModel):
    is_publicly_active: bool
    payment_account_verified: bool
    required_pages_published: bool
    missing_requirements: list[str]

    class Config:
        from_attributes = True


OrganizationResponse = APIResponse[OrganizationModel]
PublicOrganizationResponse = APIResponse[PublicOrganizationModel]
OrganizationDeleteResponse = APIResponse[bool]
CompletenessResponse = APIResponse[CompletenessModel]
