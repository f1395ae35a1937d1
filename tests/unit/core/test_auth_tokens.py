"""Session tokens and role gating."""

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from src.api.core.constants import JWT_ALGORITHM
from src.api.core.decorators.auth import ANY_STAFF_ROLE, require_role
from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.core.context import SessionKind, StaffSession
from src.database.models import StaffRoleName
from src.modules.auth.tokens import (
    create_donor_token,
    create_staff_token,
    decode_token,
    donor_session_from_token,
    staff_session_from_token,
)
from src.utils.settings.auth import AuthSettings
from tests.utils.assertions import assert_donorhub_exception


class TestTokens:
    def test_staff_token_round_trip(self):
        account_id, org_id = uuid.uuid4(), uuid.uuid4()
        token = create_staff_token(account_id, org_id, StaffRoleName.ADMIN)

        session = staff_session_from_token(token)

        assert session.staff_account_id == account_id
        assert session.organization_id == org_id
        assert session.role == StaffRoleName.ADMIN
        assert session.kind == SessionKind.STAFF

    def test_staff_claims_use_camel_case_names(self):
        token = create_staff_token(uuid.uuid4(), uuid.uuid4(), StaffRoleName.EDITOR)

        claims = decode_token(token)

        assert claims["kind"] == "staff"
        assert {"staffAccountId", "organizationId", "role", "exp"} <= set(claims)

    def test_donor_token_round_trip(self):
        donor_id, org_id = uuid.uuid4(), uuid.uuid4()

        session = donor_session_from_token(create_donor_token(donor_id, org_id))

        assert session.donor_account_id == donor_id
        assert session.organization_id == org_id
        assert session.kind == SessionKind.DONOR

    def test_donor_token_is_not_a_staff_token(self):
        token = create_donor_token(uuid.uuid4(), uuid.uuid4())

        with pytest.raises(DonorHubException) as exc_info:
            staff_session_from_token(token)

        assert_donorhub_exception(
            exc_info.value, MessageCode.AUTH_WRONG_SESSION_KIND, 403
        )

    def test_staff_token_is_not_a_donor_token(self):
        token = create_staff_token(uuid.uuid4(), uuid.uuid4(), StaffRoleName.ADMIN)

        with pytest.raises(DonorHubException) as exc_info:
            donor_session_from_token(token)

        assert_donorhub_exception(
            exc_info.value, MessageCode.AUTH_WRONG_SESSION_KIND, 403
        )

    def test_tampered_token_is_rejected(self):
        token = create_staff_token(uuid.uuid4(), uuid.uuid4(), StaffRoleName.ADMIN)

        with pytest.raises(DonorHubException) as exc_info:
            staff_session_from_token(token[:-4] + "abcd")

        assert_donorhub_exception(exc_info.value, MessageCode.INVALID_TOKEN, 401)

    def test_expired_token_is_rejected(self):
        settings = AuthSettings()
        token = jwt.encode(
            {
                "kind": "staff",
                "staffAccountId": str(uuid.uuid4()),
                "organizationId": str(uuid.uuid4()),
                "role": "admin",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            settings.JWT_SECRET.get_secret_value(),
            algorithm=JWT_ALGORITHM,
        )

        with pytest.raises(DonorHubException) as exc_info:
            staff_session_from_token(token)

        assert_donorhub_exception(exc_info.value, MessageCode.INVALID_TOKEN, 401)

    def test_token_with_malformed_claims_is_rejected(self):
        settings = AuthSettings()
        token = jwt.encode(
            {
                "kind": "staff",
                "staffAccountId": "not-a-uuid",
                "organizationId": str(uuid.uuid4()),
                "role": "admin",
            },
            settings.JWT_SECRET.get_secret_value(),
            algorithm=JWT_ALGORITHM,
        )

        with pytest.raises(DonorHubException) as exc_info:
            staff_session_from_token(token)

        assert_donorhub_exception(exc_info.value, MessageCode.INVALID_TOKEN, 401)


def staff(role: StaffRoleName) -> StaffSession:
    return StaffSession(uuid.uuid4(), uuid.uuid4(), role)


class TestRequireRole:
    @pytest.mark.asyncio
    async def test_allowed_role_reaches_endpoint(self):
        @require_role(StaffRoleName.ADMIN)
        async def endpoint(session: StaffSession):
            return "ok"

        assert await endpoint(session=staff(StaffRoleName.ADMIN)) == "ok"

    @pytest.mark.asyncio
    async def test_other_role_is_forbidden(self):
        @require_role(StaffRoleName.ADMIN)
        async def endpoint(session: StaffSession):
            return "ok"

        with pytest.raises(DonorHubException) as exc_info:
            await endpoint(session=staff(StaffRoleName.EDITOR))

        assert_donorhub_exception(
            exc_info.value, MessageCode.AUTH_INSUFFICIENT_ROLE_PERMISSIONS, 403
        )
        assert exc_info.value.details == {"required_roles": ["admin"]}

    @pytest.mark.asyncio
    async def test_any_staff_role_admits_editors(self):
        @require_role(*ANY_STAFF_ROLE)
        async def endpoint(campaign_id, session: StaffSession):
            return campaign_id

        assert await endpoint("c-1", staff(StaffRoleName.EDITOR)) == "c-1"

    @pytest.mark.asyncio
    async def test_missing_session_is_unauthenticated(self):
        @require_role(StaffRoleName.ADMIN)
        async def endpoint(db=None):
            return "ok"

        with pytest.raises(DonorHubException) as exc_info:
            await endpoint(db=object())

        assert_donorhub_exception(exc_info.value, MessageCode.AUTH_REQUIRED, 401)
