"""Organization domain router."""

from fastapi import APIRouter, Request

from src.api.core.decorators.auth import ANY_STAFF_ROLE, require_role
from src.api.core.dependencies import AsyncSessionDep, StaffSessionDep
from src.api.core.messages import APIResponse, MessageCode
from src.api.organization.schemas import (
    CompletenessModel,
    CompletenessResponse,
    OrganizationDeleteResponse,
    OrganizationModel,
    OrganizationResponse,
    OrganizationUpdateRequest,
)
from src.database.models import StaffRoleName
from src.modules.organization.completeness import CompletenessService
from src.modules.organization.service import OrganizationService

router = APIRouter(prefix="/organization", tags=["organization"])


@router.get("", response_model=OrganizationResponse)
@require_role(*ANY_STAFF_ROLE)
async def get_organization(
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> OrganizationResponse:
    organization = await OrganizationService(db).get_organization(session)
    return APIResponse.success_response(
        data=OrganizationModel.model_validate(organization)
    )


@router.patch("", response_model=OrganizationResponse)
@require_role(*ANY_STAFF_ROLE)
async def update_organization(
    request: Request,
    organization_data: OrganizationUpdateRequest,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> OrganizationResponse:
    organization = await OrganizationService(db).update_organization(
        session, organization_data.model_dump(exclude_unset=True)
    )
    return APIResponse.success_response(
        message_code=MessageCode.ORGANIZATION_UPDATED,
        data=OrganizationModel.model_validate(organization),
    )


@router.delete("", response_model=OrganizationDeleteResponse)
@require_role(StaffRoleName.ADMIN)
async def delete_organization(
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> OrganizationDeleteResponse:
    """Delete the organization and everything it owns (admin only)."""
    await OrganizationService(db).delete_organization(session)
    return APIResponse.success_response(
        message_code=MessageCode.ORGANIZATION_DELETED, data=True
    )


@router.get("/completeness", response_model=CompletenessResponse)
@require_role(*ANY_STAFF_ROLE)
async def get_completeness(
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> CompletenessResponse:
    completeness = await CompletenessService(db).get_completeness_status(session)
    return APIResponse.success_response(
        data=CompletenessModel.model_validate(completeness)
    )


@router.post("/publish", response_model=CompletenessResponse)
@require_role(*ANY_STAFF_ROLE)
async def publish_site(
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> CompletenessResponse:
    """Make the public site live once every requirement is met."""
    completeness = await CompletenessService(db).publish_site(session)
    return APIResponse.success_response(
        message_code=MessageCode.SITE_PUBLISHED,
        data=CompletenessModel.model_validate(completeness),
    )
