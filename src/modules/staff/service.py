from dataclasses import dataclass
from uuid import UUID

from fastapi import status

from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.core.context import StaffSession
from src.database.models import StaffRole, StaffRoleName
from src.modules.staff.repository import StaffAccountLookup, StaffRoleRepository
from src.utils.hashing import HashingService
from src.utils.settings.auth import AuthSettings


@dataclass
class InviteResult:
    membership: StaffRole
    # Only set when a new account was created for the invitee
    temporary_password: str | None = None


class StaffService(BaseService):
    async def list_members(self, session: StaffSession) -> list[StaffRole]:
        return await StaffRoleRepository(self.db, session).list()

    async def invite_member(
        self,
        session: StaffSession,
        email: str,
        first_name: str,
        last_name: str,
        role: StaffRoleName = StaffRoleName.EDITOR,
    ) -> InviteResult:
        repo = StaffRoleRepository(self.db, session)
        accounts = StaffAccountLookup(self.db)
        temporary_password = None

        async with self.transaction():
            account = await accounts.find_by_email(email)
            if account is None:
                temporary_password = HashingService.generate_temporary_password(
                    AuthSettings().TEMPORARY_PASSWORD_BYTES
                )
                account = await accounts.create(
                    email=email,
                    first_name=first_name,
                    last_name=last_name,
                    password_hash=HashingService.hash_password(temporary_password),
                )
            elif await repo.find(account.id) is not None:
                raise DonorHubException(
                    MessageCode.STAFF_ALREADY_MEMBER, status.HTTP_400_BAD_REQUEST
                )
            await repo.create(account.id, role)

        membership = await repo.get(account.id)
        self.logger.info(
            "Staff member invited",
            organization_id=str(membership.organization_id),
            staff_account_id=str(account.id),
            role=role.value,
            new_account=temporary_password is not None,
        )
        return InviteResult(membership=membership, temporary_password=temporary_password)

    async def change_role(
        self, session: StaffSession, staff_account_id: UUID, role: StaffRoleName
    ) -> StaffRole:
        repo = StaffRoleRepository(self.db, session)
        membership = await repo.get(staff_account_id)
        if staff_account_id == session.staff_account_id:
            raise DonorHubException(
                MessageCode.CANNOT_CHANGE_OWN_ROLE, status.HTTP_400_BAD_REQUEST
            )
        async with self.transaction():
            await repo.set_role(membership, role)
        return membership

    async def remove_member(self, session: StaffSession, staff_account_id: UUID) -> None:
        repo = StaffRoleRepository(self.db, session)
        membership = await repo.get(staff_account_id)
        if staff_account_id == session.staff_account_id:
            raise DonorHubException(
                MessageCode.CANNOT_REMOVE_YOURSELF, status.HTTP_400_BAD_REQUEST
            )
        async with self.transaction():
            if (
                membership.role == StaffRoleName.ADMIN
                and await repo.count_admins() <= 1
            ):
                raise DonorHubException(
                    MessageCode.LAST_ADMIN, status.HTTP_400_BAD_REQUEST
                )
            await repo.delete(membership)
        self.logger.info(
            "Staff member removed",
            organization_id=str(membership.organization_id),
            staff_account_id=str(staff_account_id),
        )

    async def get_current_member(self, session: StaffSession) -> StaffRole:
        """The caller's own membership, with its account loaded."""
        return await StaffRoleRepository(self.db, session).get(session.staff_account_id)
