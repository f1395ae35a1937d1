from uuid import UUID

from fastapi import status
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.core.base import BaseRepository, translate_errors
from src.database.models import StaffAccount, StaffRole, StaffRoleName
from src.utils.logger import get_logger


class StaffRoleRepository(BaseRepository):
    """Memberships of the session's organization."""

    async def list(self) -> list[StaffRole]:
        with self.translate_errors("list staff"):
            result = await self.db.execute(
                select(StaffRole)
                .where(StaffRole.organization_id == self.organization_id)
                .options(selectinload(StaffRole.staff_account))
                .order_by(StaffRole.created_at)
            )
        return list(result.scalars().all())

    async def find(self, staff_account_id: UUID) -> StaffRole | None:
        with self.translate_errors("load staff member"):
            result = await self.db.execute(
                select(StaffRole)
                .where(
                    StaffRole.staff_account_id == staff_account_id,
                    StaffRole.organization_id == self.organization_id,
                )
                .options(selectinload(StaffRole.staff_account))
            )
        return result.scalar_one_or_none()

    async def get(self, staff_account_id: UUID) -> StaffRole:
        membership = await self.find(staff_account_id)
        if membership is None:
            raise DonorHubException(MessageCode.STAFF_NOT_FOUND, status.HTTP_404_NOT_FOUND)
        return membership

    async def count_admins(self) -> int:
        """Count admins, locking their rows until the transaction ends."""
        with self.translate_errors("count admins"):
            result = await self.db.execute(
                select(StaffRole.id)
                .where(
                    StaffRole.organization_id == self.organization_id,
                    StaffRole.role == StaffRoleName.ADMIN,
                )
                .with_for_update()
            )
        return len(result.scalars().all())

    async def create(self, staff_account_id: UUID, role: StaffRoleName) -> StaffRole:
        membership = StaffRole(
            staff_account_id=staff_account_id,
            organization_id=self.organization_id,
            role=role,
        )
        self.db.add(membership)
        with self.translate_errors("add staff member", MessageCode.STAFF_ALREADY_MEMBER):
            await self.db.flush()
        return membership

    async def set_role(self, membership: StaffRole, role: StaffRoleName) -> StaffRole:
        if membership.organization_id != self.organization_id:
            raise DonorHubException(MessageCode.STAFF_NOT_FOUND, status.HTTP_404_NOT_FOUND)
        membership.role = role
        with self.translate_errors("change role"):
            await self.db.flush()
        return membership

    async def delete(self, membership: StaffRole) -> None:
        with self.translate_errors("remove staff member"):
            await self.db.execute(
                delete(StaffRole).where(
                    StaffRole.id == membership.id,
                    StaffRole.organization_id == self.organization_id,
                )
            )


class StaffAccountLookup:
    """Staff identities are global; email is the natural key."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.logger = get_logger(self.__class__.__name__)

    async def find_by_email(self, email: str) -> StaffAccount | None:
        result = await self.db.execute(
            select(StaffAccount).where(StaffAccount.email == email.lower())
        )
        return result.scalar_one_or_none()

    async def find_membership(
        self, staff_account_id: UUID, organization_id: UUID
    ) -> StaffRole | None:
        result = await self.db.execute(
            select(StaffRole).where(
                StaffRole.staff_account_id == staff_account_id,
                StaffRole.organization_id == organization_id,
            )
        )
        return result.scalar_one_or_none()

    async def create(
        self, email: str, first_name: str, last_name: str, password_hash: str
    ) -> StaffAccount:
        account = StaffAccount(
            email=email.lower(),
            first_name=first_name,
            last_name=last_name,
            password_hash=password_hash,
        )
        self.db.add(account)
        with translate_errors(
            self.logger, "create staff account", MessageCode.EMAIL_TAKEN
        ):
            await self.db.flush()
        return account
