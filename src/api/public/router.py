"""Public site endpoints, addressed by organization subdomain."""

from fastapi import APIRouter, Request, Response

from src.api.auth.router import set_session_cookie
from src.api.auth.schemas import (
    DonorLoginRequest,
    DonorProfileModel,
    DonorProfileResponse,
    DonorRegisterRequest,
    LogoutResponse,
)
from src.api.campaign.schemas import QuestionModel
from src.api.core.dependencies import AsyncSessionDep, DonorSessionDep, PublicSessionDep
from src.api.core.messages import APIResponse, MessageCode
from src.api.designation.schemas import DesignationModel
from src.api.donation.schemas import DonationDetailModel
from src.api.organization.schemas import (
    PublicOrganizationModel,
    PublicOrganizationResponse,
)
from src.api.page.schemas import PageListResponse, PageModel, PageResponse
from src.api.public.schemas import (
    DonationCreateRequest,
    DonorDonationModel,
    DonorHistoryResponse,
    PublicCampaignModel,
    PublicCampaignResponse,
    PublicDonationResponse,
)
from src.database.models import PageType
from src.modules.auth.service import DonorAuthService
from src.modules.campaign.designations import CampaignDesignationService
from src.modules.campaign.questions import CampaignQuestionService
from src.modules.campaign.service import CampaignService
from src.modules.donation.service import DonationRequest, DonationService, DonorDetails
from src.modules.donor.service import DonorService
from src.modules.organization.service import OrganizationService
from src.modules.page.service import OrganizationPageService
from src.utils.settings.auth import AuthSettings

router = APIRouter(prefix="/{subdomain}", tags=["public"])


@router.get("", response_model=PublicOrganizationResponse)
async def get_organization(
    request: Request,
    db: AsyncSessionDep,
    session: PublicSessionDep,
) -> PublicOrganizationResponse:
    organization = await OrganizationService(db).get_organization(session)
    return APIResponse.success_response(
        data=PublicOrganizationModel.model_validate(organization)
    )


@router.get("/campaigns/{slug}", response_model=PublicCampaignResponse)
async def get_campaign(
    slug: str,
    request: Request,
    db: AsyncSessionDep,
    session: PublicSessionDep,
) -> PublicCampaignResponse:
    """A published campaign with the choices its donation form offers."""
    campaign = await CampaignService(db).get_public_campaign(session, slug)
    designations = await CampaignDesignationService(db).list_designations(
        session, campaign.id
    )
    questions = await CampaignQuestionService(db).list_questions(session, campaign.id)
    return APIResponse.success_response(
        data=PublicCampaignModel(
            id=campaign.id,
            external_name=campaign.external_name,
            internal_name=campaign.internal_name,
            slug=campaign.slug,
            goal_amount=campaign.goal_amount,
            icon=campaign.icon,
            page_config=campaign.page_config,
            default_designation_id=campaign.default_designation_id,
            designations=[DesignationModel.model_validate(d) for d in designations],
            questions=[QuestionModel.model_validate(q) for q in questions],
        )
    )


@router.post(
    "/campaigns/{slug}/donations",
    response_model=PublicDonationResponse,
    status_code=201,
)
async def create_donation(
    slug: str,
    request: Request,
    donation_data: DonationCreateRequest,
    db: AsyncSessionDep,
    session: PublicSessionDep,
) -> PublicDonationResponse:
    """Record a pending donation; payment is collected by the provider."""
    donation = await DonationService(db).create_public_donation(
        session,
        slug,
        DonationRequest(
            amount=donation_data.amount,
            designation_id=donation_data.designation_id,
            donor=DonorDetails(**donation_data.donor.model_dump()),
            answers={a.question_id: a.answer_value for a in donation_data.answers},
        ),
    )
    return APIResponse.success_response(
        message_code=MessageCode.DONATION_CREATED,
        data=DonationDetailModel.from_donation(donation),
    )


@router.get("/pages", response_model=PageListResponse)
async def list_pages(
    request: Request,
    db: AsyncSessionDep,
    session: PublicSessionDep,
) -> PageListResponse:
    pages = await OrganizationPageService(db).list_published_pages(session)
    return APIResponse.success_response(
        data=[PageModel.model_validate(page) for page in pages]
    )


@router.get("/pages/{page_type}", response_model=PageResponse)
async def get_page(
    page_type: PageType,
    request: Request,
    db: AsyncSessionDep,
    session: PublicSessionDep,
) -> PageResponse:
    page = await OrganizationPageService(db).get_published_page(session, page_type)
    return APIResponse.success_response(data=PageModel.model_validate(page))


@router.post("/donor/register", response_model=DonorProfileResponse, status_code=201)
async def register_donor(
    request: Request,
    response: Response,
    register_data: DonorRegisterRequest,
    db: AsyncSessionDep,
    session: PublicSessionDep,
) -> DonorProfileResponse:
    """Create a donor account, or claim a guest account from a past donation."""
    result = await DonorAuthService(db).register_or_claim(
        session,
        first_name=register_data.first_name,
        last_name=register_data.last_name,
        email=register_data.email,
        password=register_data.password,
    )
    set_session_cookie(response, AuthSettings().DONOR_COOKIE_NAME, result.token)
    return APIResponse.success_response(
        message_code=MessageCode.CREATED,
        data=DonorProfileModel.model_validate(result.donor),
    )


@router.post("/donor/login", response_model=DonorProfileResponse)
async def login_donor(
    request: Request,
    response: Response,
    login_data: DonorLoginRequest,
    db: AsyncSessionDep,
    session: PublicSessionDep,
) -> DonorProfileResponse:
    result = await DonorAuthService(db).login(
        session, email=login_data.email, password=login_data.password
    )
    set_session_cookie(response, AuthSettings().DONOR_COOKIE_NAME, result.token)
    return APIResponse.success_response(
        message_code=MessageCode.LOGGED_IN,
        data=DonorProfileModel.model_validate(result.donor),
    )


@router.post("/donor/logout", response_model=LogoutResponse)
async def logout_donor(
    request: Request,
    response: Response,
    session: PublicSessionDep,
) -> LogoutResponse:
    response.delete_cookie(AuthSettings().DONOR_COOKIE_NAME)
    return APIResponse.success_response(message_code=MessageCode.LOGGED_OUT, data=True)


@router.get("/donor/me", response_model=DonorProfileResponse)
async def get_donor_profile(
    request: Request,
    db: AsyncSessionDep,
    session: DonorSessionDep,
) -> DonorProfileResponse:
    donor = await DonorService(db).get_profile(session)
    return APIResponse.success_response(data=DonorProfileModel.model_validate(donor))


@router.get("/donor/history", response_model=DonorHistoryResponse)
async def get_donor_history(
    request: Request,
    db: AsyncSessionDep,
    session: DonorSessionDep,
) -> DonorHistoryResponse:
    """The signed-in donor's donations, newest first."""
    donations = await DonationService(db).list_donor_history(session)
    return APIResponse.success_response(
        data=[DonorDonationModel.model_validate(d) for d in donations]
    )
