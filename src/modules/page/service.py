from src.core.base import BaseService
from src.core.context import Session, StaffSession
from src.database.models import OrganizationPage, PageType
from src.modules.organization.completeness import CompletenessService
from src.modules.page.repository import OrganizationPageRepository
from src.modules.publishing.rules import WEBSITE_SECTION_RULES, default_page_config
from src.modules.publishing.validation import extract_asset_urls, validate_page_config
from src.modules.upload.repository import ImageUploadRepository
from src.utils.settings.r2 import R2Settings


class OrganizationPageService(BaseService):
    def __init__(self, db, r2_settings: R2Settings | None = None):
        super().__init__(db)
        self.r2_settings = r2_settings or R2Settings()

    async def list_pages(self, session: Session) -> list[OrganizationPage]:
        return await OrganizationPageRepository(self.db, session).list()

    async def get_page(self, session: Session, page_type: PageType) -> OrganizationPage:
        return await OrganizationPageRepository(self.db, session).get_by_type(page_type)

    async def list_published_pages(self, session: Session) -> list[OrganizationPage]:
        return await OrganizationPageRepository(self.db, session).list(
            published_only=True
        )

    async def get_published_page(
        self, session: Session, page_type: PageType
    ) -> OrganizationPage:
        return await OrganizationPageRepository(self.db, session).get_by_type(
            page_type, published_only=True
        )

    async def create_default_pages(self, session: Session) -> list[OrganizationPage]:
        """Unpublished starter pages; runs inside the caller's transaction."""
        repo = OrganizationPageRepository(self.db, session)
        return [
            await repo.create(page_type, default_page_config(page_type))
            for page_type in PageType
        ]

    async def update_page(
        self,
        session: StaffSession,
        page_type: PageType,
        content_config: dict | None = None,
        is_published: bool | None = None,
    ) -> OrganizationPage:
        """Save page content; setting ``is_published`` runs the publish checks."""
        if is_published:
            return await self.publish_page(session, page_type, content_config)

        repo = OrganizationPageRepository(self.db, session)
        page = await repo.get_by_type(page_type)
        was_published = page.is_published

        async with self.transaction():
            if content_config is not None:
                await ImageUploadRepository(self.db, session).confirm_urls(
                    extract_asset_urls(
                        content_config, self.r2_settings.R2_PUBLIC_BASE_URL
                    )
                )
            await repo.update(page, content_config, is_published)

        if page.is_published != was_published:
            await CompletenessService(self.db).recompute(session)
        return page

    async def publish_page(
        self,
        session: StaffSession,
        page_type: PageType,
        content_config: dict | None = None,
    ) -> OrganizationPage:
        repo = OrganizationPageRepository(self.db, session)
        page = await repo.get_by_type(page_type)
        config = content_config if content_config is not None else page.content_config

        validate_page_config(config, WEBSITE_SECTION_RULES)

        was_published = page.is_published
        async with self.transaction():
            await ImageUploadRepository(self.db, session).confirm_urls(
                extract_asset_urls(config, self.r2_settings.R2_PUBLIC_BASE_URL)
            )
            await repo.update(page, content_config=config, is_published=True)

        self.logger.info(
            "Page published",
            organization_id=str(page.organization_id),
            page_type=page_type.value,
        )
        if not was_published:
            await CompletenessService(self.db).recompute(session)
        return page
