from typing import Annotated, AsyncGenerator

import structlog

from fastapi import Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.core.context import DonorSession, PublicSession, StaffSession
from src.database.models import StaffRoleName
from src.modules.auth.tokens import donor_session_from_token, staff_session_from_token
from src.modules.organization.repository import OrganizationLookup
from src.modules.staff.repository import StaffAccountLookup
from src.utils.logger import get_logger
from src.utils.settings.auth import AuthSettings

logger = get_logger(__name__)


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get database session from app state."""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield session


AsyncSessionDep = Annotated[AsyncSession, Depends(get_db_session)]


def _staff_token(request: Request) -> str | None:
    authorization = request.headers.get("Authorization", "")
    if authorization:
        auth_parts = authorization.split(" ")
        if len(auth_parts) != 2 or auth_parts[0].lower() != "bearer":
            raise DonorHubException(
                MessageCode.INVALID_TOKEN,
                status.HTTP_401_UNAUTHORIZED,
                {"description": "Authorization header must be 'Bearer <token>'"},
            )
        return auth_parts[1]
    return request.cookies.get(AuthSettings().STAFF_COOKIE_NAME)


async def require_staff_session(request: Request, db: AsyncSessionDep) -> StaffSession:
    """Staff session from a bearer token or the staff cookie.

    Membership is checked against the database on every request, so a removed
    member loses access immediately and role changes apply without a new token.
    """
    token = _staff_token(request)
    if not token:
        raise DonorHubException(MessageCode.AUTH_REQUIRED, status.HTTP_401_UNAUTHORIZED)

    claims = staff_session_from_token(token)
    membership = await StaffAccountLookup(db).find_membership(
        claims.staff_account_id, claims.organization_id
    )
    if membership is None:
        logger.warning(
            "Staff token without membership",
            staff_account_id=str(claims.staff_account_id),
            organization_id=str(claims.organization_id),
        )
        raise DonorHubException(
            MessageCode.UNAUTHORIZED,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Staff membership not found"},
        )

    session = StaffSession(
        staff_account_id=claims.staff_account_id,
        organization_id=claims.organization_id,
        role=StaffRoleName(membership.role),
    )
    structlog.contextvars.bind_contextvars(
        organization_id=str(session.organization_id)
    )
    return session


async def get_public_session(subdomain: str, db: AsyncSessionDep) -> PublicSession:
    """Anonymous session for the organization behind ``subdomain``."""
    organization = await OrganizationLookup(db).require_by_subdomain(subdomain)
    structlog.contextvars.bind_contextvars(organization_id=str(organization.id))
    return PublicSession(organization_id=organization.id)


PublicSessionDep = Annotated[PublicSession, Depends(get_public_session)]


async def require_donor_session(
    request: Request, public_session: PublicSessionDep
) -> DonorSession:
    token = request.cookies.get(AuthSettings().DONOR_COOKIE_NAME)
    if not token:
        raise DonorHubException(MessageCode.AUTH_REQUIRED, status.HTTP_401_UNAUTHORIZED)

    session = donor_session_from_token(token)
    if session.organization_id != public_session.organization_id:
        raise DonorHubException(
            MessageCode.FORBIDDEN,
            status.HTTP_403_FORBIDDEN,
            {"description": "Donor session belongs to a different organization"},
        )
    return session


StaffSessionDep = Annotated[StaffSession, Depends(require_staff_session)]
DonorSessionDep = Annotated[DonorSession, Depends(require_donor_session)]
