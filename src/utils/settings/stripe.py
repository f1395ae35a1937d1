"""Stripe settings configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import SecretStr


class StripeSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    STRIPE_WEBHOOK_SECRET: str = "whsec_test_webhook_secret"
    STRIPE_SECRET_KEY: SecretStr = SecretStr("sk_test_stripe_secret_key")

    STRIPE_CONNECT_REFRESH_URL: str = "http://localhost:3000/settings/payments"
    STRIPE_CONNECT_RETURN_URL: str = "http://localhost:3000/settings/payments/done"

    # When false, any stored account id counts as verified
    STRIPE_VERIFY_ACCOUNTS: bool = False
