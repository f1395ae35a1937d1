"""Designation API schemas."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from src.api.core.messages import APIResponse


class DesignationModel(BaseModel):
    id: UUID
    name: str
    description: str | None = None
    goal_amount: Decimal | None = None
    is_archived: bool
    created_at: datetime

    class Config:
        from_attributes = True


class DesignationCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    goal_amount: Decimal | None = Field(None, ge=0, max_digits=12, decimal_places=2)


class DesignationUpdateRequest(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    goal_amount: Decimal | None = Field(None, ge=0, max_digits=12, decimal_places=2)


DesignationResponse = APIResponse[DesignationModel]
DesignationListResponse = APIResponse[list[DesignationModel]]
