from typing import Iterable
from uuid import UUID

from fastapi import status
from sqlalchemy import select

from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.core.base import BaseRepository
from src.database.models import Designation

UPDATABLE_FIELDS = frozenset({"name", "description", "goal_amount"})
REQUIRED_FIELDS = frozenset({"name"})


class DesignationRepository(BaseRepository):
    async def list(self, include_archived: bool = False) -> list[Designation]:
        stmt = select(Designation).where(
            Designation.organization_id == self.organization_id
        )
        if not include_archived:
            stmt = stmt.where(Designation.is_archived.is_(False))
        with self.translate_errors("list designations"):
            result = await self.db.execute(stmt.order_by(Designation.name))
        return list(result.scalars().all())

    async def get(self, designation_id: UUID) -> Designation:
        with self.translate_errors("load designation"):
            result = await self.db.execute(
                select(Designation).where(
                    Designation.id == designation_id,
                    Designation.organization_id == self.organization_id,
                )
            )
            designation = result.scalar_one_or_none()
        if designation is None:
            raise DonorHubException(
                MessageCode.DESIGNATION_NOT_FOUND, status.HTTP_404_NOT_FOUND
            )
        return designation

    async def get_available(self, designation_id: UUID) -> Designation:
        """Owned and not archived, else 404."""
        designation = await self.get(designation_id)
        if designation.is_archived:
            raise DonorHubException(
                MessageCode.DESIGNATION_NOT_FOUND, status.HTTP_404_NOT_FOUND
            )
        return designation

    async def find_available_ids(self, designation_ids: Iterable[UUID]) -> set[UUID]:
        """Subset of ``designation_ids`` owned by this organization and not archived."""
        ids = set(designation_ids)
        if not ids:
            return set()
        with self.translate_errors("verify designations"):
            result = await self.db.execute(
                select(Designation.id).where(
                    Designation.id.in_(ids),
                    Designation.organization_id == self.organization_id,
                    Designation.is_archived.is_(False),
                )
            )
        return set(result.scalars().all())

    async def create(
        self,
        name: str,
        description: str | None = None,
        goal_amount=None,
    ) -> Designation:
        designation = Designation(
            organization_id=self.organization_id,
            name=name,
            description=description,
            goal_amount=goal_amount,
        )
        self.db.add(designation)
        with self.translate_errors("create designation"):
            await self.db.flush()
        return designation

    async def update(self, designation: Designation, changes: dict) -> Designation:
        if designation.organization_id != self.organization_id:
            raise DonorHubException(
                MessageCode.DESIGNATION_NOT_FOUND, status.HTTP_404_NOT_FOUND
            )
        for field_name, value in changes.items():
            if field_name in UPDATABLE_FIELDS:
                setattr(designation, field_name, value)
        with self.translate_errors("update designation"):
            await self.db.flush()
        return designation

    async def archive(self, designation: Designation) -> Designation:
        if designation.organization_id != self.organization_id:
            raise DonorHubException(
                MessageCode.DESIGNATION_NOT_FOUND, status.HTTP_404_NOT_FOUND
            )
        designation.is_archived = True
        with self.translate_errors("archive designation"):
            await self.db.flush()
        return designation
