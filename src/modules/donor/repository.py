from uuid import UUID

from fastapi import status
from sqlalchemy import func, select

from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.core.base import BaseRepository
from src.database.models import DonorAccount


class DonorAccountRepository(BaseRepository):
    async def find_by_email(self, email: str) -> DonorAccount | None:
        with self.translate_errors("load donor"):
            result = await self.db.execute(
                select(DonorAccount).where(
                    DonorAccount.organization_id == self.organization_id,
                    DonorAccount.email == email.lower(),
                )
            )
        return result.scalar_one_or_none()

    async def get(self, donor_account_id: UUID) -> DonorAccount:
        with self.translate_errors("load donor"):
            result = await self.db.execute(
                select(DonorAccount).where(
                    DonorAccount.id == donor_account_id,
                    DonorAccount.organization_id == self.organization_id,
                )
            )
            donor = result.scalar_one_or_none()
        if donor is None:
            raise DonorHubException(MessageCode.DONOR_NOT_FOUND, status.HTTP_404_NOT_FOUND)
        return donor

    async def list(self, limit: int, offset: int) -> tuple[list[DonorAccount], int]:
        scope = DonorAccount.organization_id == self.organization_id
        with self.translate_errors("list donors"):
            total = await self.db.scalar(
                select(func.count(DonorAccount.id)).where(scope)
            )
            result = await self.db.execute(
                select(DonorAccount)
                .where(scope)
                .order_by(DonorAccount.created_at.desc())
                .limit(limit)
                .offset(offset)
            )
        return list(result.scalars().all()), total or 0

    async def create(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password_hash: str | None = None,
    ) -> DonorAccount:
        donor = DonorAccount(
            organization_id=self.organization_id,
            first_name=first_name,
            last_name=last_name,
            email=email.lower(),
            password_hash=password_hash,
        )
        self.db.add(donor)
        with self.translate_errors("create donor", MessageCode.DONOR_ACCOUNT_EXISTS):
            await self.db.flush()
        return donor

    async def set_password(self, donor: DonorAccount, password_hash: str) -> DonorAccount:
        if donor.organization_id != self.organization_id:
            raise DonorHubException(MessageCode.DONOR_NOT_FOUND, status.HTTP_404_NOT_FOUND)
        donor.password_hash = password_hash
        with self.translate_errors("update donor"):
            await self.db.flush()
        return donor
