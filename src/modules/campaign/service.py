import re
from uuid import UUID

from fastapi import status

from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.core.base import BaseService, drop_nulls
from src.core.context import Session, StaffSession
from src.database.models import Campaign
from src.modules.campaign.repository import CAMPAIGN_REQUIRED_FIELDS, CampaignRepository
from src.modules.designation.repository import DesignationRepository
from src.modules.publishing.rules import CAMPAIGN_SECTION_RULES, default_campaign_config
from src.modules.publishing.validation import extract_asset_urls, validate_page_config
from src.modules.upload.repository import ImageUploadRepository
from src.utils.settings.r2 import R2Settings


def slugify(value: str) -> str:
    slug = value.lower()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


class CampaignService(BaseService):
    def __init__(self, db, r2_settings: R2Settings | None = None):
        super().__init__(db)
        self.r2_settings = r2_settings or R2Settings()

    async def _confirm_assets(self, session: Session, page_config: dict | None) -> int:
        if not page_config:
            return 0
        urls = extract_asset_urls(page_config, self.r2_settings.R2_PUBLIC_BASE_URL)
        return await ImageUploadRepository(self.db, session).confirm_urls(urls)

    async def _check_slug(
        self, repo: CampaignRepository, slug: str, exclude_id: UUID | None = None
    ) -> str:
        if not slug:
            raise DonorHubException(
                MessageCode.INVALID_INPUT,
                status.HTTP_400_BAD_REQUEST,
                {"description": "Campaign slug cannot be empty"},
            )
        if await repo.slug_exists(slug, exclude_id):
            raise DonorHubException(
                MessageCode.SLUG_TAKEN, status.HTTP_409_CONFLICT, {"slug": slug}
            )
        return slug

    async def list_campaigns(self, session: Session) -> list[Campaign]:
        return await CampaignRepository(self.db, session).list()

    async def get_campaign(self, session: Session, campaign_id: UUID) -> Campaign:
        return await CampaignRepository(self.db, session).get(campaign_id)

    async def create_campaign(self, session: StaffSession, fields: dict) -> Campaign:
        repo = CampaignRepository(self.db, session)
        fields = dict(fields)

        slug_source = (
            fields.get("slug")
            or fields.get("external_name")
            or fields["internal_name"]
        )
        fields["slug"] = await self._check_slug(repo, slugify(slug_source))

        if fields.get("default_designation_id") is not None:
            await DesignationRepository(self.db, session).get_available(
                fields["default_designation_id"]
            )
        if fields.get("page_config") is None:
            fields["page_config"] = default_campaign_config()

        async with self.transaction():
            campaign = await repo.create(**fields)
            await self._confirm_assets(session, campaign.page_config)

        self.logger.info(
            "Campaign created",
            organization_id=str(campaign.organization_id),
            campaign_id=str(campaign.id),
            slug=campaign.slug,
        )
        return campaign

    async def update_campaign(
        self, session: StaffSession, campaign_id: UUID, changes: dict
    ) -> Campaign:
        repo = CampaignRepository(self.db, session)
        campaign = await repo.get(campaign_id)
        changes = drop_nulls(changes, CAMPAIGN_REQUIRED_FIELDS)

        if changes.get("slug") is not None:
            changes["slug"] = await self._check_slug(
                repo, slugify(changes["slug"]), exclude_id=campaign.id
            )
        if changes.get("default_designation_id") is not None:
            await DesignationRepository(self.db, session).get_available(
                changes["default_designation_id"]
            )

        async with self.transaction():
            await repo.update(campaign, changes)
            if "page_config" in changes:
                await self._confirm_assets(session, changes["page_config"])
        return campaign

    async def delete_campaign(self, session: StaffSession, campaign_id: UUID) -> None:
        repo = CampaignRepository(self.db, session)
        campaign = await repo.get(campaign_id)
        async with self.transaction():
            await repo.delete(campaign)
        self.logger.info(
            "Campaign deleted",
            organization_id=str(campaign.organization_id),
            campaign_id=str(campaign_id),
        )

    async def get_page_config(self, session: Session, campaign_id: UUID) -> dict:
        campaign = await CampaignRepository(self.db, session).get(campaign_id)
        return campaign.page_config or {}

    async def update_page_config(
        self, session: StaffSession, campaign_id: UUID, page_config: dict
    ) -> Campaign:
        """Draft save of the page builder document."""
        return await self.update_campaign(
            session, campaign_id, {"page_config": page_config}
        )

    async def publish_campaign(
        self, session: StaffSession, campaign_id: UUID, page_config: dict
    ) -> Campaign:
        repo = CampaignRepository(self.db, session)
        campaign = await repo.get(campaign_id)

        validate_page_config(page_config, CAMPAIGN_SECTION_RULES)

        async with self.transaction():
            confirmed = await self._confirm_assets(session, page_config)
            await repo.update(campaign, {"page_config": page_config})
            await repo.mark_active(campaign)

        self.logger.info(
            "Campaign published",
            organization_id=str(campaign.organization_id),
            campaign_id=str(campaign.id),
            confirmed_uploads=confirmed,
        )
        return campaign

    async def get_public_campaign(self, session: Session, slug: str) -> Campaign:
        return await CampaignRepository(self.db, session).get_active_by_slug(slug)
