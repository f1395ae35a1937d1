from dataclasses import dataclass

from botocore.exceptions import BotoCoreError, ClientError
from fastapi import status

from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.core.context import StaffSession
from src.modules.upload.repository import ImageUploadRepository
from src.utils.r2_client import R2Client


@dataclass
class SignedUpload:
    upload_url: str
    public_url: str
    key: str
    expires_in: int


class UploadService(BaseService):
    def __init__(self, db, r2_client: R2Client | None = None):
        super().__init__(db)
        self.r2_client = r2_client or R2Client()

    async def create_upload_url(
        self,
        session: StaffSession,
        content_type: str,
        filename: str | None = None,
    ) -> SignedUpload:
        settings = self.r2_client.settings
        if content_type not in settings.UPLOAD_ALLOWED_CONTENT_TYPES:
            raise DonorHubException(
                MessageCode.INVALID_FILE_TYPE,
                status.HTTP_400_BAD_REQUEST,
                {"allowed_content_types": settings.UPLOAD_ALLOWED_CONTENT_TYPES},
            )

        repo = ImageUploadRepository(self.db, session)
        key = self.r2_client.generate_key(repo.organization_id, content_type)
        try:
            upload_url = await self.r2_client.generate_upload_url(key, content_type)
        except (BotoCoreError, ClientError) as e:
            raise DonorHubException(
                MessageCode.EXTERNAL_SERVICE_ERROR,
                status.HTTP_502_BAD_GATEWAY,
                {"description": "Failed to create upload URL"},
            ) from e

        public_url = self.r2_client.public_url(key)
        async with self.transaction():
            await repo.create_pending(
                key=key,
                url=public_url,
                content_type=content_type,
                staff_account_id=session.staff_account_id,
            )
        self.logger.info(
            "Upload URL issued",
            organization_id=str(session.organization_id),
            key=key,
            filename=filename,
        )

        return SignedUpload(
            upload_url=upload_url,
            public_url=public_url,
            key=key,
            expires_in=settings.UPLOAD_URL_EXPIRY_SECONDS,
        )
