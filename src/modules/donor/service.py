from uuid import UUID

from src.core.base import BaseService
from src.core.context import DonorSession, StaffSession
from src.database.models import DonorAccount
from src.modules.donor.repository import DonorAccountRepository


class DonorService(BaseService):
    async def list_donors(
        self, session: StaffSession, limit: int, offset: int
    ) -> tuple[list[DonorAccount], int]:
        return await DonorAccountRepository(self.db, session).list(limit, offset)

    async def get_donor(self, session: StaffSession, donor_account_id: UUID) -> DonorAccount:
        return await DonorAccountRepository(self.db, session).get(donor_account_id)

    async def get_profile(self, session: DonorSession) -> DonorAccount:
        return await DonorAccountRepository(self.db, session).get(
            session.donor_account_id
        )
