"""Reconcile the designations a campaign offers with a desired set."""

from dataclasses import dataclass
from typing import Sequence
from uuid import UUID

from fastapi import status

from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.core.context import Session, StaffSession
from src.database.models import Designation
from src.modules.campaign.repository import (
    CampaignDesignationRepository,
    CampaignRepository,
)
from src.modules.designation.repository import DesignationRepository


@dataclass
class DesignationSyncResult:
    added: int
    removed: int
    total: int


class CampaignDesignationService(BaseService):
    async def list_designations(
        self, session: Session, campaign_id: UUID
    ) -> list[Designation]:
        campaign = await CampaignRepository(self.db, session).get(campaign_id)
        return await CampaignDesignationRepository(self.db, session).list_designations(
            campaign.id
        )

    async def sync_designations(
        self,
        session: StaffSession,
        campaign_id: UUID,
        desired_designation_ids: Sequence[UUID],
    ) -> DesignationSyncResult:
        campaign = await CampaignRepository(self.db, session).get(campaign_id)
        links = CampaignDesignationRepository(self.db, session)

        desired = set(desired_designation_ids)
        current = await links.list_ids(campaign.id)
        to_add = desired - current
        to_remove = current - desired

        async with self.transaction():
            available = await DesignationRepository(self.db, session).find_available_ids(
                to_add
            )
            invalid = to_add - available
            if invalid:
                raise DonorHubException(
                    MessageCode.DESIGNATION_NOT_FOUND,
                    status.HTTP_404_NOT_FOUND,
                    {"designation_ids": sorted(str(i) for i in invalid)},
                )
            await links.remove_many(campaign.id, to_remove)
            await links.add_many(campaign.id, to_add)

        self.logger.info(
            "Campaign designations synced",
            campaign_id=str(campaign.id),
            added=len(to_add),
            removed=len(to_remove),
        )
        return DesignationSyncResult(
            added=len(to_add), removed=len(to_remove), total=len(desired)
        )

    async def link_designation(
        self, session: StaffSession, campaign_id: UUID, designation_id: UUID
    ) -> Designation:
        campaign = await CampaignRepository(self.db, session).get(campaign_id)
        designation = await DesignationRepository(self.db, session).get_available(
            designation_id
        )
        async with self.transaction():
            await CampaignDesignationRepository(self.db, session).add_one(
                campaign.id, designation.id
            )
        return designation

    async def unlink_designation(
        self, session: StaffSession, campaign_id: UUID, designation_id: UUID
    ) -> None:
        campaign = await CampaignRepository(self.db, session).get(campaign_id)
        async with self.transaction():
            await CampaignDesignationRepository(self.db, session).remove_one(
                campaign.id, designation_id
            )
