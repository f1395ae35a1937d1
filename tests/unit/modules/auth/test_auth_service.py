"""Staff signup and login; donor registration and login."""

import pytest
from sqlalchemy import func, select

from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.core.context import PublicSession
from src.database.models import (
    Organization,
    OrganizationPage,
    StaffRole,
    StaffRoleName,
)
from src.modules.auth.service import DonorAuthService, StaffAuthService
from src.modules.auth.tokens import donor_session_from_token, staff_session_from_token
from tests.factories import DEFAULT_PASSWORD, DonorAccountFactory
from tests.utils.assertions import assert_donorhub_exception

SIGNUP = {
    "organization_name": "Clean Water Trust",
    "subdomain": "clean-water",
    "email": "Founder@CleanWater.org",
    "password": "s3cure-passw0rd",
    "first_name": "Ada",
    "last_name": "Founder",
}


class TestSignup:
    @pytest.mark.asyncio
    async def test_creates_organization_admin_and_pages(self, db_session):
        result = await StaffAuthService(db_session).signup(**SIGNUP)

        assert result.role == StaffRoleName.ADMIN
        assert result.staff_account.email == "founder@cleanwater.org"
        organization = await db_session.scalar(
            select(Organization).where(Organization.subdomain == "clean-water")
        )
        assert organization.is_publicly_active is False
        role = await db_session.scalar(
            select(StaffRole.role).where(
                StaffRole.organization_id == organization.id,
                StaffRole.staff_account_id == result.staff_account.id,
            )
        )
        assert role == StaffRoleName.ADMIN
        page_count = await db_session.scalar(
            select(func.count(OrganizationPage.id)).where(
                OrganizationPage.organization_id == organization.id,
                OrganizationPage.is_published.is_(False),
            )
        )
        assert page_count == 2

    @pytest.mark.asyncio
    async def test_token_carries_new_membership(self, db_session):
        result = await StaffAuthService(db_session).signup(**SIGNUP)

        session = staff_session_from_token(result.token)

        assert session.organization_id == result.organization.id
        assert session.staff_account_id == result.staff_account.id
        assert session.role == StaffRoleName.ADMIN

    @pytest.mark.asyncio
    async def test_taken_subdomain_conflicts(self, db_session, test_organization):
        with pytest.raises(DonorHubException) as exc_info:
            await StaffAuthService(db_session).signup(
                **{**SIGNUP, "subdomain": test_organization.subdomain}
            )

        assert_donorhub_exception(exc_info.value, MessageCode.SUBDOMAIN_TAKEN, 409)

    @pytest.mark.asyncio
    async def test_taken_email_conflicts(self, db_session, admin):
        with pytest.raises(DonorHubException) as exc_info:
            await StaffAuthService(db_session).signup(
                **{**SIGNUP, "email": admin.account.email}
            )

        assert_donorhub_exception(exc_info.value, MessageCode.EMAIL_TAKEN, 409)


class TestStaffLogin:
    @pytest.mark.asyncio
    async def test_valid_credentials_issue_token(self, db_session, editor):
        result = await StaffAuthService(db_session).login(
            editor.account.email.upper(), DEFAULT_PASSWORD, "test-org"
        )

        assert result.role == StaffRoleName.EDITOR
        assert staff_session_from_token(result.token).staff_account_id == (
            editor.account.id
        )

    @pytest.mark.parametrize(
        "overrides",
        [
            {"password": "wrong-password"},
            {"email": "nobody@example.com"},
            {"subdomain": "no-such-org"},
        ],
    )
    @pytest.mark.asyncio
    async def test_bad_credentials_are_rejected(self, db_session, editor, overrides):
        credentials = {
            "email": editor.account.email,
            "password": DEFAULT_PASSWORD,
            "subdomain": "test-org",
            **overrides,
        }

        with pytest.raises(DonorHubException) as exc_info:
            await StaffAuthService(db_session).login(**credentials)

        assert_donorhub_exception(exc_info.value, MessageCode.INVALID_CREDENTIALS, 401)

    @pytest.mark.asyncio
    async def test_non_member_of_organization_is_rejected(
        self, db_session, make_staff, other_organization, test_organization
    ):
        outsider = await make_staff(other_organization)

        with pytest.raises(DonorHubException) as exc_info:
            await StaffAuthService(db_session).login(
                outsider.account.email, DEFAULT_PASSWORD, test_organization.subdomain
            )

        assert_donorhub_exception(exc_info.value, MessageCode.INVALID_CREDENTIALS, 401)


class TestDonorAuth:
    @pytest.mark.asyncio
    async def test_register_new_donor(self, db_session, public_session):
        result = await DonorAuthService(db_session).register_or_claim(
            public_session, "Grace", "Giver", "Grace@Example.com", "donor-password"
        )

        assert result.donor.is_guest is False
        assert result.donor.email == "grace@example.com"
        session = donor_session_from_token(result.token)
        assert session.donor_account_id == result.donor.id
        assert session.organization_id == public_session.organization_id

    @pytest.mark.asyncio
    async def test_guest_account_is_claimed(
        self, db_session, public_session, test_organization
    ):
        guest = await DonorAccountFactory.create_async(
            db_session, organization_id=test_organization.id, email="guest@example.com"
        )

        result = await DonorAuthService(db_session).register_or_claim(
            public_session, "Guest", "Donor", "guest@example.com", "donor-password"
        )

        assert result.donor.id == guest.id
        assert result.donor.is_guest is False

    @pytest.mark.asyncio
    async def test_registered_email_conflicts(self, db_session, public_session):
        service = DonorAuthService(db_session)
        await service.register_or_claim(
            public_session, "Grace", "Giver", "grace@example.com", "donor-password"
        )

        with pytest.raises(DonorHubException) as exc_info:
            await service.register_or_claim(
                public_session, "Grace", "Again", "grace@example.com", "other-password"
            )

        assert_donorhub_exception(
            exc_info.value, MessageCode.DONOR_ACCOUNT_EXISTS, 409
        )

    @pytest.mark.asyncio
    async def test_same_email_registers_separately_per_organization(
        self, db_session, public_session, other_organization
    ):
        service = DonorAuthService(db_session)
        first = await service.register_or_claim(
            public_session, "Grace", "Giver", "grace@example.com", "donor-password"
        )
        second = await service.register_or_claim(
            PublicSession(other_organization.id),
            "Grace",
            "Giver",
            "grace@example.com",
            "donor-password",
        )

        assert first.donor.id != second.donor.id

    @pytest.mark.asyncio
    async def test_login(self, db_session, public_session):
        service = DonorAuthService(db_session)
        registered = await service.register_or_claim(
            public_session, "Grace", "Giver", "grace@example.com", "donor-password"
        )

        result = await service.login(public_session, "grace@example.com", "donor-password")

        assert result.donor.id == registered.donor.id

    @pytest.mark.asyncio
    async def test_guest_cannot_log_in(
        self, db_session, public_session, test_organization
    ):
        await DonorAccountFactory.create_async(
            db_session, organization_id=test_organization.id, email="guest@example.com"
        )

        with pytest.raises(DonorHubException) as exc_info:
            await DonorAuthService(db_session).login(
                public_session, "guest@example.com", ""
            )

        assert_donorhub_exception(exc_info.value, MessageCode.INVALID_CREDENTIALS, 401)
