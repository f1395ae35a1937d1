"""Signed session tokens for staff and donors."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

from fastapi import status
from jose import JWTError, jwt

from src.api.core.constants import JWT_ALGORITHM
from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.core.context import DonorSession, SessionKind, StaffSession
from src.database.models import StaffRoleName
from src.utils.logger import get_logger
from src.utils.settings.auth import AuthSettings

logger = get_logger(__name__)


def _encode(claims: dict, settings: AuthSettings) -> str:
    expires_at = datetime.now(timezone.utc) + timedelta(
        minutes=settings.JWT_EXPIRES_MINUTES
    )
    return jwt.encode(
        {**claims, "exp": expires_at},
        settings.JWT_SECRET.get_secret_value(),
        algorithm=JWT_ALGORITHM,
    )


def create_staff_token(
    staff_account_id: UUID,
    organization_id: UUID,
    role: StaffRoleName,
    settings: AuthSettings | None = None,
) -> str:
    return _encode(
        {
            "kind": SessionKind.STAFF.value,
            "staffAccountId": str(staff_account_id),
            "organizationId": str(organization_id),
            "role": StaffRoleName(role).value,
        },
        settings or AuthSettings(),
    )


def create_donor_token(
    donor_account_id: UUID,
    organization_id: UUID,
    settings: AuthSettings | None = None,
) -> str:
    return _encode(
        {
            "kind": SessionKind.DONOR.value,
            "donorAccountId": str(donor_account_id),
            "organizationId": str(organization_id),
        },
        settings or AuthSettings(),
    )


def decode_token(token: str, settings: AuthSettings | None = None) -> dict:
    settings = settings or AuthSettings()
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET.get_secret_value(),
            algorithms=[JWT_ALGORITHM],
        )
    except JWTError as e:
        logger.warning(f"JWT decoding failed: {e}")
        raise DonorHubException(
            MessageCode.INVALID_TOKEN,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Invalid or expired authentication token"},
        ) from e


def _require_kind(payload: dict, kind: SessionKind) -> None:
    if payload.get("kind") != kind.value:
        raise DonorHubException(
            MessageCode.AUTH_WRONG_SESSION_KIND,
            status.HTTP_403_FORBIDDEN,
            {"expected": kind.value, "received": payload.get("kind")},
        )


def staff_session_from_token(token: str) -> StaffSession:
    payload = decode_token(token)
    _require_kind(payload, SessionKind.STAFF)
    try:
        return StaffSession(
            staff_account_id=UUID(payload["staffAccountId"]),
            organization_id=UUID(payload["organizationId"]),
            role=StaffRoleName(payload["role"]),
        )
    except (KeyError, ValueError) as e:
        raise DonorHubException(
            MessageCode.INVALID_TOKEN, status.HTTP_401_UNAUTHORIZED
        ) from e


def donor_session_from_token(token: str) -> DonorSession:
    payload = decode_token(token)
    _require_kind(payload, SessionKind.DONOR)
    try:
        return DonorSession(
            donor_account_id=UUID(payload["donorAccountId"]),
            organization_id=UUID(payload["organizationId"]),
        )
    except (KeyError, ValueError) as e:
        raise DonorHubException(
            MessageCode.INVALID_TOKEN, status.HTTP_401_UNAUTHORIZED
        ) from e
