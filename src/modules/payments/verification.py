import stripe  # type: ignore
from stripe import StripeError  # type: ignore

from src.utils.logger import get_logger
from src.utils.settings.stripe import StripeSettings

logger = get_logger(__name__)


class PaymentAccountVerifier:
    """Decides whether an organization can take payments.

    With ``STRIPE_VERIFY_ACCOUNTS`` off, a stored account id is enough.
    """

    def __init__(self, settings: StripeSettings | None = None):
        self.settings = settings or StripeSettings()

    def is_verified(self, account_id: str | None) -> bool:
        if not account_id:
            return False
        if not self.settings.STRIPE_VERIFY_ACCOUNTS:
            return True
        try:
            account = stripe.Account.retrieve(
                account_id, api_key=self.settings.STRIPE_SECRET_KEY.get_secret_value()
            )
        except StripeError as e:
            logger.warning(
                "Could not verify Stripe account", account_id=account_id, error=str(e)
            )
            return False
        return bool(account.get("charges_enabled") and account.get("payouts_enabled"))
