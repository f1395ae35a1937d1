from uuid import UUID

from src.core.base import BaseService, drop_nulls
from src.core.context import Session, StaffSession
from src.database.models import Designation
from src.modules.designation.repository import REQUIRED_FIELDS, DesignationRepository


class DesignationService(BaseService):
    async def list_designations(
        self, session: Session, include_archived: bool = False
    ) -> list[Designation]:
        return await DesignationRepository(self.db, session).list(include_archived)

    async def get_designation(
        self, session: Session, designation_id: UUID
    ) -> Designation:
        return await DesignationRepository(self.db, session).get(designation_id)

    async def create_designation(
        self,
        session: StaffSession,
        name: str,
        description: str | None = None,
        goal_amount=None,
    ) -> Designation:
        repo = DesignationRepository(self.db, session)
        async with self.transaction():
            designation = await repo.create(name, description, goal_amount)
        self.logger.info(
            "Designation created",
            organization_id=str(designation.organization_id),
            designation_id=str(designation.id),
        )
        return designation

    async def update_designation(
        self, session: StaffSession, designation_id: UUID, changes: dict
    ) -> Designation:
        repo = DesignationRepository(self.db, session)
        designation = await repo.get(designation_id)
        async with self.transaction():
            await repo.update(designation, drop_nulls(changes, REQUIRED_FIELDS))
        return designation

    async def archive_designation(
        self, session: StaffSession, designation_id: UUID
    ) -> Designation:
        repo = DesignationRepository(self.db, session)
        designation = await repo.get(designation_id)
        async with self.transaction():
            await repo.archive(designation)
        self.logger.info(
            "Designation archived",
            organization_id=str(designation.organization_id),
            designation_id=str(designation.id),
        )
        return designation
