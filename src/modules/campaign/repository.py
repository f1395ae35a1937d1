from typing import Iterable
from uuid import UUID

from fastapi import status
from sqlalchemy import delete, func, insert, select

from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.core.base import BaseRepository
from src.database.models import (
    Campaign,
    CampaignAvailableDesignation,
    CampaignQuestion,
    Designation,
)

CAMPAIGN_UPDATABLE_FIELDS = frozenset(
    {
        "internal_name",
        "external_name",
        "slug",
        "goal_amount",
        "icon",
        "page_config",
        "default_designation_id",
    }
)
CAMPAIGN_REQUIRED_FIELDS = frozenset({"internal_name", "slug"})
QUESTION_UPDATABLE_FIELDS = frozenset(
    {"question_text", "question_type", "options", "is_required", "display_order"}
)
QUESTION_REQUIRED_FIELDS = frozenset(
    {"question_text", "question_type", "is_required", "display_order"}
)


class CampaignRepository(BaseRepository):
    async def list(self) -> list[Campaign]:
        with self.translate_errors("list campaigns"):
            result = await self.db.execute(
                select(Campaign)
                .where(Campaign.organization_id == self.organization_id)
                .order_by(Campaign.created_at.desc())
            )
        return list(result.scalars().all())

    async def get(self, campaign_id: UUID) -> Campaign:
        with self.translate_errors("load campaign"):
            result = await self.db.execute(
                select(Campaign).where(
                    Campaign.id == campaign_id,
                    Campaign.organization_id == self.organization_id,
                )
            )
            campaign = result.scalar_one_or_none()
        if campaign is None:
            raise DonorHubException(
                MessageCode.CAMPAIGN_NOT_FOUND, status.HTTP_404_NOT_FOUND
            )
        return campaign

    async def get_active_by_slug(self, slug: str) -> Campaign:
        with self.translate_errors("load campaign"):
            result = await self.db.execute(
                select(Campaign).where(
                    Campaign.slug == slug,
                    Campaign.organization_id == self.organization_id,
                    Campaign.is_active.is_(True),
                )
            )
            campaign = result.scalar_one_or_none()
        if campaign is None:
            raise DonorHubException(
                MessageCode.CAMPAIGN_NOT_FOUND, status.HTTP_404_NOT_FOUND
            )
        return campaign

    async def slug_exists(self, slug: str, exclude_id: UUID | None = None) -> bool:
        stmt = select(func.count(Campaign.id)).where(
            Campaign.organization_id == self.organization_id,
            Campaign.slug == slug,
        )
        if exclude_id is not None:
            stmt = stmt.where(Campaign.id != exclude_id)
        with self.translate_errors("check campaign slug"):
            count = await self.db.scalar(stmt)
        return bool(count)

    async def create(self, **fields) -> Campaign:
        campaign = Campaign(organization_id=self.organization_id, **fields)
        self.db.add(campaign)
        with self.translate_errors("create campaign", MessageCode.SLUG_TAKEN):
            await self.db.flush()
        return campaign

    async def update(self, campaign: Campaign, changes: dict) -> Campaign:
        if campaign.organization_id != self.organization_id:
            raise DonorHubException(
                MessageCode.CAMPAIGN_NOT_FOUND, status.HTTP_404_NOT_FOUND
            )
        for field_name, value in changes.items():
            if field_name in CAMPAIGN_UPDATABLE_FIELDS:
                setattr(campaign, field_name, value)
        with self.translate_errors("update campaign", MessageCode.SLUG_TAKEN):
            await self.db.flush()
        return campaign

    async def mark_active(self, campaign: Campaign) -> Campaign:
        campaign.is_active = True
        with self.translate_errors("publish campaign"):
            await self.db.flush()
        return campaign

    async def delete(self, campaign: Campaign) -> None:
        # Campaigns referenced by donations fail with 409
        with self.translate_errors("delete campaign"):
            await self.db.execute(
                delete(Campaign).where(
                    Campaign.id == campaign.id,
                    Campaign.organization_id == self.organization_id,
                )
            )


class CampaignDesignationRepository(BaseRepository):
    """Campaign to designation links, scoped through the owning campaign."""

    def _owned_campaign_ids(self):
        return select(Campaign.id).where(
            Campaign.organization_id == self.organization_id
        )

    async def list_ids(self, campaign_id: UUID) -> set[UUID]:
        with self.translate_errors("load campaign designations"):
            result = await self.db.execute(
                select(CampaignAvailableDesignation.designation_id)
                .where(
                    CampaignAvailableDesignation.campaign_id == campaign_id,
                    CampaignAvailableDesignation.campaign_id.in_(
                        self._owned_campaign_ids()
                    ),
                )
                .distinct()
            )
        return set(result.scalars().all())

    async def list_designations(self, campaign_id: UUID) -> list[Designation]:
        """Non-archived designations linked to the campaign."""
        with self.translate_errors("load campaign designations"):
            result = await self.db.execute(
                select(Designation)
                .join(
                    CampaignAvailableDesignation,
                    CampaignAvailableDesignation.designation_id == Designation.id,
                )
                .where(
                    CampaignAvailableDesignation.campaign_id == campaign_id,
                    CampaignAvailableDesignation.campaign_id.in_(
                        self._owned_campaign_ids()
                    ),
                    Designation.organization_id == self.organization_id,
                    Designation.is_archived.is_(False),
                )
                .order_by(Designation.name)
            )
        return list(result.scalars().all())

    async def add_many(self, campaign_id: UUID, designation_ids: Iterable[UUID]) -> int:
        rows = [
            {"campaign_id": campaign_id, "designation_id": designation_id}
            for designation_id in designation_ids
        ]
        if not rows:
            return 0
        with self.translate_errors(
            "link designations", MessageCode.DESIGNATION_ALREADY_LINKED
        ):
            await self.db.execute(insert(CampaignAvailableDesignation), rows)
        return len(rows)

    async def remove_many(
        self, campaign_id: UUID, designation_ids: Iterable[UUID]
    ) -> int:
        ids = set(designation_ids)
        if not ids:
            return 0
        with self.translate_errors("unlink designations"):
            result = await self.db.execute(
                delete(CampaignAvailableDesignation)
                .where(
                    CampaignAvailableDesignation.campaign_id == campaign_id,
                    CampaignAvailableDesignation.campaign_id.in_(
                        self._owned_campaign_ids()
                    ),
                    CampaignAvailableDesignation.designation_id.in_(ids),
                )
                .execution_options(synchronize_session=False)
            )
        return result.rowcount or 0

    async def add_one(self, campaign_id: UUID, designation_id: UUID) -> None:
        await self.add_many(campaign_id, [designation_id])

    async def remove_one(self, campaign_id: UUID, designation_id: UUID) -> None:
        removed = await self.remove_many(campaign_id, [designation_id])
        if not removed:
            raise DonorHubException(
                MessageCode.DESIGNATION_NOT_FOUND,
                status.HTTP_404_NOT_FOUND,
                {"description": "Designation is not linked to this campaign"},
            )


class CampaignQuestionRepository(BaseRepository):
    """Custom questions, scoped through the owning campaign."""

    def _owned_campaign_ids(self):
        return select(Campaign.id).where(
            Campaign.organization_id == self.organization_id
        )

    async def list(self, campaign_id: UUID) -> list[CampaignQuestion]:
        with self.translate_errors("list questions"):
            result = await self.db.execute(
                select(CampaignQuestion)
                .where(
                    CampaignQuestion.campaign_id == campaign_id,
                    CampaignQuestion.campaign_id.in_(self._owned_campaign_ids()),
                )
                .order_by(CampaignQuestion.display_order, CampaignQuestion.created_at)
            )
        return list(result.scalars().all())

    async def get(self, campaign_id: UUID, question_id: UUID) -> CampaignQuestion:
        with self.translate_errors("load question"):
            result = await self.db.execute(
                select(CampaignQuestion).where(
                    CampaignQuestion.id == question_id,
                    CampaignQuestion.campaign_id == campaign_id,
                    CampaignQuestion.campaign_id.in_(self._owned_campaign_ids()),
                )
            )
            question = result.scalar_one_or_none()
        if question is None:
            raise DonorHubException(
                MessageCode.QUESTION_NOT_FOUND, status.HTTP_404_NOT_FOUND
            )
        return question

    async def create(self, campaign_id: UUID, **fields) -> CampaignQuestion:
        """Caller must have resolved ``campaign_id`` within this organization."""
        question = CampaignQuestion(campaign_id=campaign_id, **fields)
        self.db.add(question)
        with self.translate_errors("create question"):
            await self.db.flush()
        return question

    async def update(self, question: CampaignQuestion, changes: dict) -> CampaignQuestion:
        for field_name, value in changes.items():
            if field_name in QUESTION_UPDATABLE_FIELDS:
                setattr(question, field_name, value)
        with self.translate_errors("update question"):
            await self.db.flush()
        return question

    async def delete_many(self, campaign_id: UUID, question_ids: Iterable[UUID]) -> int:
        ids = set(question_ids)
        if not ids:
            return 0
        with self.translate_errors("delete questions"):
            result = await self.db.execute(
                delete(CampaignQuestion)
                .where(
                    CampaignQuestion.campaign_id == campaign_id,
                    CampaignQuestion.campaign_id.in_(self._owned_campaign_ids()),
                    CampaignQuestion.id.in_(ids),
                )
                .execution_options(synchronize_session=False)
            )
        return result.rowcount or 0
