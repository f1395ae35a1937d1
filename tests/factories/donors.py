"""Factories for donors, donations and uploads."""

from decimal import Decimal

import factory
from src.database.models import (
    DonationAnswer,
    Donation,
    DonationStatus,
    DonorAccount,
    ImageUpload,
    UploadStatus,
)
from .base import AsyncSQLAlchemyModelFactory, UUIDFactory


class DonorAccountFactory(AsyncSQLAlchemyModelFactory[DonorAccount]):
    """Factory for DonorAccount; pass ``organization_id``.

    Defaults to a guest account (no password).
    """

    class Meta:
        model = DonorAccount

    id = UUIDFactory()
    first_name = factory.Faker("first_name")
    last_name = factory.Faker("last_name")
    email = factory.Sequence(lambda n: f"donor-{n}@example.com")
    password_hash = None


class DonationFactory(AsyncSQLAlchemyModelFactory[Donation]):
    """Pass ``organization_id``, ``campaign_id``, ``donor_account_id`` and
    ``designation_id``."""

    class Meta:
        model = Donation

    id = UUIDFactory()
    amount = Decimal("50.00")
    stripe_charge_id = factory.Sequence(lambda n: f"ch_test_{n}")
    status = DonationStatus.COMPLETED


class DonationAnswerFactory(AsyncSQLAlchemyModelFactory[DonationAnswer]):
    """Pass ``donation_id`` and ``question_id``."""

    class Meta:
        model = DonationAnswer

    id = UUIDFactory()
    answer_value = factory.Faker("word")


class ImageUploadFactory(AsyncSQLAlchemyModelFactory[ImageUpload]):
    """Factory for ImageUpload; pass ``organization_id``."""

    class Meta:
        model = ImageUpload

    id = UUIDFactory()
    key = factory.Sequence(lambda n: f"organizations/test/{n}.png")
    url = factory.LazyAttribute(lambda o: f"https://assets.donorhub.local/{o.key}")
    content_type = "image/png"
    status = UploadStatus.PENDING
