from uuid import UUID

from sqlalchemy import update

from src.core.base import BaseRepository
from src.database.models import ImageUpload, UploadStatus


class ImageUploadRepository(BaseRepository):
    async def create_pending(
        self,
        key: str,
        url: str,
        content_type: str,
        staff_account_id: UUID | None = None,
    ) -> ImageUpload:
        upload = ImageUpload(
            organization_id=self.organization_id,
            staff_account_id=staff_account_id,
            key=key,
            url=url,
            content_type=content_type,
            status=UploadStatus.PENDING,
        )
        self.db.add(upload)
        with self.translate_errors("record upload"):
            await self.db.flush()
        return upload

    async def confirm_urls(self, urls: list[str]) -> int:
        """Mark this organization's uploads for ``urls`` as kept."""
        if not urls:
            return 0
        with self.translate_errors("confirm uploads"):
            result = await self.db.execute(
                update(ImageUpload)
                .where(
                    ImageUpload.organization_id == self.organization_id,
                    ImageUpload.url.in_(urls),
                    ImageUpload.status == UploadStatus.PENDING,
                )
                .values(status=UploadStatus.CONFIRMED)
                .execution_options(synchronize_session=False)
            )
        return result.rowcount or 0
