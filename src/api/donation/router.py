"""Donation and donor history for the CRM."""

from uuid import UUID

from fastapi import APIRouter, Query, Request
from pydantic import EmailStr

from src.api.core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from src.api.core.decorators.auth import ANY_STAFF_ROLE, require_role
from src.api.core.dependencies import AsyncSessionDep, StaffSessionDep
from src.api.core.messages import APIResponse, Paginated, PaginationInfo
from src.api.donation.schemas import (
    DonationDetailModel,
    DonationDetailResponse,
    DonationListResponse,
    DonationModel,
    DonorListResponse,
    DonorModel,
    DonorResponse,
)
from src.database.models import DonationStatus
from src.modules.donation.repository import DonationFilters
from src.modules.donation.service import DonationService
from src.modules.donor.service import DonorService

router = APIRouter(tags=["donations"])


@router.get("/donations", response_model=DonationListResponse)
@require_role(*ANY_STAFF_ROLE)
async def list_donations(
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
    status: DonationStatus | None = None,
    campaign_id: UUID | None = None,
    designation_id: UUID | None = None,
    donor_email: EmailStr | None = None,
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    offset: int = Query(0, ge=0),
) -> DonationListResponse:
    """Donations, newest first."""
    filters = DonationFilters(
        status=status,
        campaign_id=campaign_id,
        designation_id=designation_id,
        donor_email=donor_email,
    )
    donations, total = await DonationService(db).list_donations(
        session, filters, limit, offset
    )
    return APIResponse.success_response(
        data=Paginated(
            items=[DonationModel.from_donation(d) for d in donations],
            pagination=PaginationInfo(
                total=total,
                limit=limit,
                offset=offset,
                has_more=offset + len(donations) < total,
            ),
        )
    )


@router.get("/donations/{donation_id}", response_model=DonationDetailResponse)
@require_role(*ANY_STAFF_ROLE)
async def get_donation(
    donation_id: UUID,
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> DonationDetailResponse:
    donation = await DonationService(db).get_donation(session, donation_id)
    return APIResponse.success_response(
        data=DonationDetailModel.from_donation(donation)
    )


@router.get("/donors", response_model=DonorListResponse)
@require_role(*ANY_STAFF_ROLE)
async def list_donors(
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    offset: int = Query(0, ge=0),
) -> DonorListResponse:
    donors, total = await DonorService(db).list_donors(session, limit, offset)
    return APIResponse.success_response(
        data=Paginated(
            items=[DonorModel.model_validate(d) for d in donors],
            pagination=PaginationInfo(
                total=total,
                limit=limit,
                offset=offset,
                has_more=offset + len(donors) < total,
            ),
        )
    )


@router.get("/donors/{donor_account_id}", response_model=DonorResponse)
@require_role(*ANY_STAFF_ROLE)
async def get_donor(
    donor_account_id: UUID,
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> DonorResponse:
    donor = await DonorService(db).get_donor(session, donor_account_id)
    return APIResponse.success_response(data=DonorModel.model_validate(donor))
