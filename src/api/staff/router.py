"""Staff membership management (admin only)."""

from uuid import UUID

from fastapi import APIRouter, Request

from src.api.core.decorators.auth import require_role
from src.api.core.dependencies import AsyncSessionDep, StaffSessionDep
from src.api.core.messages import APIResponse, MessageCode
from src.api.staff.schemas import (
    StaffInviteData,
    StaffInviteRequest,
    StaffInviteResponse,
    StaffListResponse,
    StaffMemberModel,
    StaffMemberResponse,
    StaffRemoveResponse,
    StaffRoleUpdateRequest,
)
from src.database.models import StaffRoleName
from src.modules.staff.service import StaffService

router = APIRouter(prefix="/staff", tags=["staff"])


@router.get("", response_model=StaffListResponse)
@require_role(StaffRoleName.ADMIN)
async def list_staff(
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> StaffListResponse:
    memberships = await StaffService(db).list_members(session)
    return APIResponse.success_response(
        data=[StaffMemberModel.from_membership(m) for m in memberships]
    )


@router.post("", response_model=StaffInviteResponse, status_code=201)
@require_role(StaffRoleName.ADMIN)
async def invite_staff(
    request: Request,
    invite_data: StaffInviteRequest,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> StaffInviteResponse:
    result = await StaffService(db).invite_member(
        session,
        email=invite_data.email,
        first_name=invite_data.first_name,
        last_name=invite_data.last_name,
        role=invite_data.role,
    )
    return APIResponse.success_response(
        message_code=MessageCode.STAFF_INVITED,
        data=StaffInviteData(
            member=StaffMemberModel.from_membership(result.membership),
            temporary_password=result.temporary_password,
        ),
    )


@router.patch("/{staff_account_id}", response_model=StaffMemberResponse)
@require_role(StaffRoleName.ADMIN)
async def change_staff_role(
    staff_account_id: UUID,
    request: Request,
    role_data: StaffRoleUpdateRequest,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> StaffMemberResponse:
    membership = await StaffService(db).change_role(
        session, staff_account_id, role_data.role
    )
    return APIResponse.success_response(
        message_code=MessageCode.ROLE_CHANGED,
        data=StaffMemberModel.from_membership(membership),
    )


@router.delete("/{staff_account_id}", response_model=StaffRemoveResponse)
@require_role(StaffRoleName.ADMIN)
async def remove_staff(
    staff_account_id: UUID,
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> StaffRemoveResponse:
    await StaffService(db).remove_member(session, staff_account_id)
    return APIResponse.success_response(
        message_code=MessageCode.STAFF_REMOVED, data=True
    )
