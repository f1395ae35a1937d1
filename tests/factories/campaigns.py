"""Factories for designations, campaigns and campaign questions."""

from decimal import Decimal

import factory
from src.database.models import (
    Campaign,
    CampaignAvailableDesignation,
    CampaignQuestion,
    Designation,
    QuestionType,
)
from src.modules.publishing.rules import default_campaign_config
from .base import AsyncSQLAlchemyModelFactory, UUIDFactory


class DesignationFactory(AsyncSQLAlchemyModelFactory[Designation]):
    """Factory for Designation; pass ``organization_id``."""

    class Meta:
        model = Designation

    id = UUIDFactory()
    name = factory.Sequence(lambda n: f"Fund {n}")
    description = factory.Faker("sentence")
    goal_amount = Decimal("1000.00")
    is_archived = False


class CampaignFactory(AsyncSQLAlchemyModelFactory[Campaign]):
    """Factory for Campaign; pass ``organization_id``."""

    class Meta:
        model = Campaign

    id = UUIDFactory()
    internal_name = factory.Sequence(lambda n: f"Campaign {n}")
    external_name = factory.LazyAttribute(lambda o: o.internal_name)
    slug = factory.Sequence(lambda n: f"campaign-{n}")
    goal_amount = Decimal("5000.00")
    page_config = factory.LazyFunction(default_campaign_config)
    is_active = False


class CampaignDesignationFactory(
    AsyncSQLAlchemyModelFactory[CampaignAvailableDesignation]
):
    """Link row; pass ``campaign_id`` and ``designation_id``."""

    class Meta:
        model = CampaignAvailableDesignation

    id = UUIDFactory()


class CampaignQuestionFactory(AsyncSQLAlchemyModelFactory[CampaignQuestion]):
    """Factory for CampaignQuestion; pass ``campaign_id``."""

    class Meta:
        model = CampaignQuestion

    id = UUIDFactory()
    question_text = factory.Faker("sentence")
    question_type = QuestionType.TEXT
    options = None
    is_required = False
    display_order = factory.Sequence(lambda n: n)
