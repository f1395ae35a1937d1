"""Organization website page schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from src.api.core.messages import APIResponse
from src.database.models import PageType


class PageModel(BaseModel):
    id: UUID
    page_type: PageType
    content_config: dict | None = None
    is_published: bool
    updated_at: datetime

    class Config:
        from_attributes = True


class PageUpdateRequest(BaseModel):
    content_config: dict | None = None
    is_published: bool | None = None


class PagePublishRequest(BaseModel):
    # Publishes the stored config when omitted
    content_config: dict | None = None


PageResponse = APIResponse[PageModel]
PageListResponse = APIResponse[list[PageModel]]
