"""Test factories for DonorHub API models."""

from .base import AsyncSQLAlchemyModelFactory
from .organizations import OrganizationFactory, OrganizationPageFactory
from .staff import (
    DEFAULT_PASSWORD,
    StaffAccountFactory,
    StaffRoleFactory,
)
from .campaigns import (
    CampaignDesignationFactory,
    CampaignFactory,
    CampaignQuestionFactory,
    DesignationFactory,
)
from .donors import (
    DonationAnswerFactory,
    DonationFactory,
    DonorAccountFactory,
    ImageUploadFactory,
)

__all__ = [
    "AsyncSQLAlchemyModelFactory",
    "DEFAULT_PASSWORD",
    "OrganizationFactory",
    "OrganizationPageFactory",
    "StaffAccountFactory",
    "StaffRoleFactory",
    "DesignationFactory",
    "CampaignFactory",
    "CampaignDesignationFactory",
    "CampaignQuestionFactory",
    "DonorAccountFactory",
    "DonationFactory",
    "DonationAnswerFactory",
    "ImageUploadFactory",
]
