from uuid import UUID, uuid4

import aioboto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from src.utils.logger import get_logger
from src.utils.settings.r2 import R2Settings

logger = get_logger(__name__)

CONTENT_TYPE_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
    "image/svg+xml": ".svg",
}


class R2Client:
    """Client for issuing upload URLs against Cloudflare R2 (S3-compatible storage)."""

    def __init__(self, settings: R2Settings | None = None):
        self.settings = settings or R2Settings()
        self._session: aioboto3.Session | None = None

    def _get_session(self) -> aioboto3.Session:
        """Get or create aioboto3 session."""
        if self._session is None:
            self._session = aioboto3.Session(
                aws_access_key_id=self.settings.R2_ACCESS_KEY,
                aws_secret_access_key=self.settings.R2_SECRET_KEY.get_secret_value(),
            )
        return self._session

    def generate_key(self, organization_id: UUID, content_type: str) -> str:
        """Object key for a new organization asset, named by its content type."""
        extension = CONTENT_TYPE_EXTENSIONS.get(content_type, ".bin")
        return f"organizations/{organization_id}/{uuid4()}{extension}"

    def public_url(self, key: str) -> str:
        return f"{self.settings.R2_PUBLIC_BASE_URL.rstrip('/')}/{key}"

    async def generate_upload_url(
        self, key: str, content_type: str, expiry_seconds: int | None = None
    ) -> str:
        """Presigned PUT URL for a browser upload.

        Uses Signature Version 4 (SigV4) as required by Cloudflare R2.
        """
        expires_in = expiry_seconds or self.settings.UPLOAD_URL_EXPIRY_SECONDS
        try:
            session = self._get_session()
            config = Config(signature_version="s3v4")
            async with session.client(
                "s3",
                endpoint_url=self.settings.R2_ENDPOINT or None,
                config=config,
            ) as s3_client:
                return await s3_client.generate_presigned_url(
                    "put_object",
                    Params={
                        "Bucket": self.settings.R2_BUCKET,
                        "Key": key,
                        "ContentType": content_type,
                    },
                    ExpiresIn=expires_in,
                )
        except (BotoCoreError, ClientError) as e:
            logger.error("Failed to generate upload URL", key=key, error=str(e))
            raise
