"""Organization website pages."""

from fastapi import APIRouter, Request

from src.api.core.decorators.auth import ANY_STAFF_ROLE, require_role
from src.api.core.dependencies import AsyncSessionDep, StaffSessionDep
from src.api.core.messages import APIResponse, MessageCode
from src.api.page.schemas import (
    PageListResponse,
    PageModel,
    PagePublishRequest,
    PageResponse,
    PageUpdateRequest,
)
from src.database.models import PageType
from src.modules.page.service import OrganizationPageService

router = APIRouter(prefix="/pages", tags=["pages"])


@router.get("", response_model=PageListResponse)
@require_role(*ANY_STAFF_ROLE)
async def list_pages(
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> PageListResponse:
    pages = await OrganizationPageService(db).list_pages(session)
    return APIResponse.success_response(
        data=[PageModel.model_validate(page) for page in pages]
    )


@router.get("/{page_type}", response_model=PageResponse)
@require_role(*ANY_STAFF_ROLE)
async def get_page(
    page_type: PageType,
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> PageResponse:
    page = await OrganizationPageService(db).get_page(session, page_type)
    return APIResponse.success_response(data=PageModel.model_validate(page))


@router.patch("/{page_type}", response_model=PageResponse)
@require_role(*ANY_STAFF_ROLE)
async def update_page(
    page_type: PageType,
    request: Request,
    page_data: PageUpdateRequest,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> PageResponse:
    page = await OrganizationPageService(db).update_page(
        session,
        page_type,
        content_config=page_data.content_config,
        is_published=page_data.is_published,
    )
    return APIResponse.success_response(
        message_code=MessageCode.PAGE_UPDATED, data=PageModel.model_validate(page)
    )


@router.post("/{page_type}/publish", response_model=PageResponse)
@require_role(*ANY_STAFF_ROLE)
async def publish_page(
    page_type: PageType,
    request: Request,
    page_data: PagePublishRequest,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> PageResponse:
    page = await OrganizationPageService(db).publish_page(
        session, page_type, page_data.content_config
    )
    return APIResponse.success_response(
        message_code=MessageCode.PAGE_PUBLISHED, data=PageModel.model_validate(page)
    )
