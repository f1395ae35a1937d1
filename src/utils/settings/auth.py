from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    JWT_SECRET: SecretStr = SecretStr("dev-jwt-secret-change-me")
    JWT_EXPIRES_MINUTES: int = 60 * 24

    STAFF_COOKIE_NAME: str = "staff_token"
    DONOR_COOKIE_NAME: str = "donor_token"
    COOKIE_SECURE: bool = False

    # Length of the temporary password issued to invited staff
    TEMPORARY_PASSWORD_BYTES: int = 12
