"""Designation (fund) management."""

from uuid import UUID

from fastapi import APIRouter, Request

from src.api.core.decorators.auth import ANY_STAFF_ROLE, require_role
from src.api.core.dependencies import AsyncSessionDep, StaffSessionDep
from src.api.core.messages import APIResponse, MessageCode
from src.api.designation.schemas import (
    DesignationCreateRequest,
    DesignationListResponse,
    DesignationModel,
    DesignationResponse,
    DesignationUpdateRequest,
)
from src.database.models import StaffRoleName
from src.modules.designation.service import DesignationService

router = APIRouter(prefix="/designations", tags=["designations"])


@router.get("", response_model=DesignationListResponse)
@require_role(*ANY_STAFF_ROLE)
async def list_designations(
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
    include_archived: bool = False,
) -> DesignationListResponse:
    designations = await DesignationService(db).list_designations(
        session, include_archived=include_archived
    )
    return APIResponse.success_response(
        data=[DesignationModel.model_validate(d) for d in designations]
    )


@router.post("", response_model=DesignationResponse, status_code=201)
@require_role(*ANY_STAFF_ROLE)
async def create_designation(
    request: Request,
    designation_data: DesignationCreateRequest,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> DesignationResponse:
    designation = await DesignationService(db).create_designation(
        session,
        name=designation_data.name,
        description=designation_data.description,
        goal_amount=designation_data.goal_amount,
    )
    return APIResponse.success_response(
        message_code=MessageCode.DESIGNATION_CREATED,
        data=DesignationModel.model_validate(designation),
    )


@router.get("/{designation_id}", response_model=DesignationResponse)
@require_role(*ANY_STAFF_ROLE)
async def get_designation(
    designation_id: UUID,
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> DesignationResponse:
    designation = await DesignationService(db).get_designation(session, designation_id)
    return APIResponse.success_response(
        data=DesignationModel.model_validate(designation)
    )


@router.patch("/{designation_id}", response_model=DesignationResponse)
@require_role(*ANY_STAFF_ROLE)
async def update_designation(
    designation_id: UUID,
    request: Request,
    designation_data: DesignationUpdateRequest,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> DesignationResponse:
    designation = await DesignationService(db).update_designation(
        session, designation_id, designation_data.model_dump(exclude_unset=True)
    )
    return APIResponse.success_response(
        message_code=MessageCode.DESIGNATION_UPDATED,
        data=DesignationModel.model_validate(designation),
    )


@router.delete("/{designation_id}", response_model=DesignationResponse)
@require_role(StaffRoleName.ADMIN)
async def archive_designation(
    designation_id: UUID,
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> DesignationResponse:
    """Archive a designation; it stays attached to past donations."""
    designation = await DesignationService(db).archive_designation(
        session, designation_id
    )
    return APIResponse.success_response(
        message_code=MessageCode.DESIGNATION_ARCHIVED,
        data=DesignationModel.model_validate(designation),
    )
