from fastapi import status
from sqlalchemy import select

from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.core.base import BaseRepository
from src.database.models import OrganizationPage, PageType


class OrganizationPageRepository(BaseRepository):
    async def list(self, published_only: bool = False) -> list[OrganizationPage]:
        stmt = select(OrganizationPage).where(
            OrganizationPage.organization_id == self.organization_id
        )
        if published_only:
            stmt = stmt.where(OrganizationPage.is_published.is_(True))
        with self.translate_errors("list pages"):
            result = await self.db.execute(stmt.order_by(OrganizationPage.page_type))
        return list(result.scalars().all())

    async def find_by_type(self, page_type: PageType) -> OrganizationPage | None:
        with self.translate_errors("load page"):
            result = await self.db.execute(
                select(OrganizationPage).where(
                    OrganizationPage.organization_id == self.organization_id,
                    OrganizationPage.page_type == page_type,
                )
            )
        return result.scalar_one_or_none()

    async def get_by_type(
        self, page_type: PageType, published_only: bool = False
    ) -> OrganizationPage:
        page = await self.find_by_type(page_type)
        if page is None or (published_only and not page.is_published):
            raise DonorHubException(MessageCode.PAGE_NOT_FOUND, status.HTTP_404_NOT_FOUND)
        return page

    async def create(
        self, page_type: PageType, content_config: dict | None = None
    ) -> OrganizationPage:
        page = OrganizationPage(
            organization_id=self.organization_id,
            page_type=page_type,
            content_config=content_config,
            is_published=False,
        )
        self.db.add(page)
        with self.translate_errors("create page"):
            await self.db.flush()
        return page

    async def update(
        self,
        page: OrganizationPage,
        content_config: dict | None = None,
        is_published: bool | None = None,
    ) -> OrganizationPage:
        if page.organization_id != self.organization_id:
            raise DonorHubException(MessageCode.PAGE_NOT_FOUND, status.HTTP_404_NOT_FOUND)
        if content_config is not None:
            page.content_config = content_config
        if is_published is not None:
            page.is_published = is_published
        with self.translate_errors("update page"):
            await self.db.flush()
        return page
