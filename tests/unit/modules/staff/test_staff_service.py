"""Staff membership management and the last-admin guard."""

import uuid

import pytest
from sqlalchemy import select

from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.core.context import StaffSession
from src.database.models import StaffAccount, StaffRole, StaffRoleName
from src.modules.staff.service import StaffService
from src.utils.hashing import HashingService
from tests.utils.assertions import assert_donorhub_exception


async def membership_ids(db_session, organization_id) -> set:
    result = await db_session.execute(
        select(StaffRole.staff_account_id).where(
            StaffRole.organization_id == organization_id
        )
    )
    return set(result.scalars().all())


@pytest.fixture
def service(db_session):
    return StaffService(db_session)


class TestInviteMember:
    @pytest.mark.asyncio
    async def test_new_email_creates_account_with_temporary_password(
        self, db_session, service, admin_session
    ):
        result = await service.invite_member(
            admin_session, "New.Person@Example.com", "New", "Person"
        )

        assert result.temporary_password
        assert result.membership.role == StaffRoleName.EDITOR
        account = await db_session.scalar(
            select(StaffAccount).where(StaffAccount.email == "new.person@example.com")
        )
        assert HashingService.verify_password(
            result.temporary_password, account.password_hash
        )

    @pytest.mark.asyncio
    async def test_existing_account_joins_without_new_password(
        self, service, admin_session, make_staff, other_organization
    ):
        outsider = await make_staff(other_organization)

        result = await service.invite_member(
            admin_session,
            outsider.account.email,
            "ignored",
            "ignored",
            StaffRoleName.ADMIN,
        )

        assert result.temporary_password is None
        assert result.membership.staff_account_id == outsider.account.id
        assert result.membership.role == StaffRoleName.ADMIN

    @pytest.mark.asyncio
    async def test_existing_member_cannot_be_invited_twice(
        self, service, admin_session, editor
    ):
        with pytest.raises(DonorHubException) as exc_info:
            await service.invite_member(
                admin_session, editor.account.email, "Again", "Again"
            )

        assert_donorhub_exception(exc_info.value, MessageCode.STAFF_ALREADY_MEMBER, 400)

    @pytest.mark.asyncio
    async def test_list_members_is_scoped_to_organization(
        self, service, admin_session, admin, editor, make_staff, other_organization
    ):
        await make_staff(other_organization)

        members = await service.list_members(admin_session)

        assert {m.staff_account_id for m in members} == {
            admin.account.id,
            editor.account.id,
        }


class TestChangeRole:
    @pytest.mark.asyncio
    async def test_promotes_editor(self, service, admin_session, editor):
        membership = await service.change_role(
            admin_session, editor.account.id, StaffRoleName.ADMIN
        )

        assert membership.role == StaffRoleName.ADMIN

    @pytest.mark.asyncio
    async def test_own_role_cannot_be_changed(self, service, admin_session, admin):
        with pytest.raises(DonorHubException) as exc_info:
            await service.change_role(
                admin_session, admin.account.id, StaffRoleName.EDITOR
            )

        assert_donorhub_exception(
            exc_info.value, MessageCode.CANNOT_CHANGE_OWN_ROLE, 400
        )

    @pytest.mark.asyncio
    async def test_unknown_member_is_not_found(self, service, admin_session):
        with pytest.raises(DonorHubException) as exc_info:
            await service.change_role(
                admin_session, uuid.uuid4(), StaffRoleName.ADMIN
            )

        assert_donorhub_exception(exc_info.value, MessageCode.STAFF_NOT_FOUND, 404)


class TestRemoveMember:
    @pytest.mark.asyncio
    async def test_removes_editor(
        self, db_session, service, admin_session, admin, editor, test_organization
    ):
        await service.remove_member(admin_session, editor.account.id)

        assert await membership_ids(db_session, test_organization.id) == {
            admin.account.id
        }

    @pytest.mark.asyncio
    async def test_cannot_remove_yourself(self, service, admin_session, admin):
        with pytest.raises(DonorHubException) as exc_info:
            await service.remove_member(admin_session, admin.account.id)

        assert_donorhub_exception(
            exc_info.value, MessageCode.CANNOT_REMOVE_YOURSELF, 400
        )

    @pytest.mark.asyncio
    async def test_last_admin_cannot_be_removed(
        self, db_session, make_staff, test_organization, editor
    ):
        sole_admin = await make_staff(test_organization, StaffRoleName.ADMIN)
        sole_admin_id = sole_admin.account.id
        org_id = test_organization.id
        # Acting as admin while the stored admin count is one
        acting = StaffSession(
            staff_account_id=editor.account.id,
            organization_id=org_id,
            role=StaffRoleName.ADMIN,
        )

        with pytest.raises(DonorHubException) as exc_info:
            await StaffService(db_session).remove_member(acting, sole_admin_id)

        assert_donorhub_exception(exc_info.value, MessageCode.LAST_ADMIN, 400)
        assert sole_admin_id in await membership_ids(db_session, org_id)

    @pytest.mark.asyncio
    async def test_one_of_two_admins_can_be_removed(
        self, db_session, service, admin_session, make_staff, test_organization
    ):
        second_admin = await make_staff(test_organization, StaffRoleName.ADMIN)

        await service.remove_member(admin_session, second_admin.account.id)

        assert second_admin.account.id not in await membership_ids(
            db_session, test_organization.id
        )

    @pytest.mark.asyncio
    async def test_member_of_other_organization_is_not_found(
        self, service, admin_session, make_staff, other_organization
    ):
        outsider = await make_staff(other_organization, StaffRoleName.ADMIN)

        with pytest.raises(DonorHubException) as exc_info:
            await service.remove_member(admin_session, outsider.account.id)

        assert_donorhub_exception(exc_info.value, MessageCode.STAFF_NOT_FOUND, 404)
