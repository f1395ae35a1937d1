"""Role gating for CRM endpoints."""

from functools import wraps

from fastapi import status

from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.core.context import StaffSession
from src.database.models import StaffRoleName
from src.utils.logger import get_logger

logger = get_logger(__name__)


def require_role(*roles: StaffRoleName):
    """
    Decorator restricting an endpoint to staff holding one of ``roles``.

    The endpoint must take a ``StaffSession`` (usually ``StaffSessionDep``).
    """

    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            session = None
            for value in (*args, *kwargs.values()):
                if isinstance(value, StaffSession):
                    session = value
                    break

            if session is None:
                raise DonorHubException(
                    MessageCode.AUTH_REQUIRED,
                    status.HTTP_401_UNAUTHORIZED,
                    {"description": "Staff session not found"},
                )

            if not session.has_role(*roles):
                logger.warning(
                    "Insufficient role",
                    staff_account_id=str(session.staff_account_id),
                    role=session.role,
                    required=[role.value for role in roles],
                )
                raise DonorHubException(
                    MessageCode.AUTH_INSUFFICIENT_ROLE_PERMISSIONS,
                    status.HTTP_403_FORBIDDEN,
                    details={"required_roles": [role.value for role in roles]},
                )

            return await func(*args, **kwargs)

        return wrapper

    return decorator


# Every CRM endpoint needs at least one of these
ANY_STAFF_ROLE = (StaffRoleName.ADMIN, StaffRoleName.EDITOR)
