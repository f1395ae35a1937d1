from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import SecretStr


class R2Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    R2_ENDPOINT: str = ""
    R2_ACCESS_KEY: str = ""
    R2_SECRET_KEY: SecretStr = SecretStr("")
    R2_BUCKET: str = "donorhub-assets"
    # Public origin the bucket is served from; page configs reference assets by it
    R2_PUBLIC_BASE_URL: str = "https://assets.donorhub.local"

    UPLOAD_URL_EXPIRY_SECONDS: int = 300
    UPLOAD_ALLOWED_CONTENT_TYPES: list[str] = [
        "image/jpeg",
        "image/png",
        "image/gif",
        "image/webp",
        "image/svg+xml",
    ]
