"""Staff signup, login and the current-member view for the CRM."""

from fastapi import APIRouter, Request, Response

from src.api.auth.schemas import (
    CurrentStaffData,
    CurrentStaffResponse,
    LogoutResponse,
    SignupRequest,
    StaffAuthData,
    StaffAuthResponse,
    StaffLoginRequest,
)
from src.api.core.decorators.auth import ANY_STAFF_ROLE, require_role
from src.api.core.dependencies import AsyncSessionDep, StaffSessionDep
from src.api.core.messages import APIResponse, MessageCode
from src.api.organization.schemas import OrganizationModel
from src.api.staff.schemas import StaffMemberModel
from src.modules.auth.service import StaffAuthResult, StaffAuthService
from src.modules.organization.service import OrganizationService
from src.modules.staff.service import StaffService
from src.utils.settings.auth import AuthSettings

router = APIRouter(prefix="/auth", tags=["auth"])
# Mounted at the CRM root
me_router = APIRouter(tags=["auth"])


def set_session_cookie(response: Response, name: str, token: str) -> None:
    settings = AuthSettings()
    response.set_cookie(
        key=name,
        value=token,
        max_age=settings.JWT_EXPIRES_MINUTES * 60,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
    )


def _auth_data(result: StaffAuthResult) -> StaffAuthData:
    return StaffAuthData(
        token=result.token,
        staff_account_id=result.staff_account.id,
        organization_id=result.organization.id,
        subdomain=result.organization.subdomain,
        role=result.role,
    )


@router.post("/signup", response_model=StaffAuthResponse, status_code=201)
async def signup(
    request: Request,
    response: Response,
    signup_data: SignupRequest,
    db: AsyncSessionDep,
) -> StaffAuthResponse:
    """Create an organization and its first admin."""
    result = await StaffAuthService(db).signup(
        organization_name=signup_data.organization_name,
        subdomain=signup_data.subdomain,
        email=signup_data.email,
        password=signup_data.password,
        first_name=signup_data.first_name,
        last_name=signup_data.last_name,
    )
    set_session_cookie(response, AuthSettings().STAFF_COOKIE_NAME, result.token)
    return APIResponse.success_response(
        message_code=MessageCode.SIGNED_UP, data=_auth_data(result)
    )


@router.post("/login", response_model=StaffAuthResponse)
async def login(
    request: Request,
    response: Response,
    login_data: StaffLoginRequest,
    db: AsyncSessionDep,
) -> StaffAuthResponse:
    result = await StaffAuthService(db).login(
        email=login_data.email,
        password=login_data.password,
        subdomain=login_data.subdomain,
    )
    set_session_cookie(response, AuthSettings().STAFF_COOKIE_NAME, result.token)
    return APIResponse.success_response(
        message_code=MessageCode.LOGGED_IN, data=_auth_data(result)
    )


@router.post("/logout", response_model=LogoutResponse)
async def logout(request: Request, response: Response) -> LogoutResponse:
    response.delete_cookie(AuthSettings().STAFF_COOKIE_NAME)
    return APIResponse.success_response(message_code=MessageCode.LOGGED_OUT, data=True)


@me_router.get("/me", response_model=CurrentStaffResponse)
@require_role(*ANY_STAFF_ROLE)
async def get_current_staff(
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> CurrentStaffResponse:
    """The signed-in staff member and the organization they are acting for."""
    membership = await StaffService(db).get_current_member(session)
    organization = await OrganizationService(db).get_organization(session)
    return APIResponse.success_response(
        data=CurrentStaffData(
            member=StaffMemberModel.from_membership(membership),
            organization=OrganizationModel.model_validate(organization),
        )
    )
