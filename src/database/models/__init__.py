"""Database models for the DonorHub API."""

from .base import Base, JSONType
from .campaigns import (
    CHOICE_QUESTION_TYPES,
    Campaign,
    CampaignAvailableDesignation,
    CampaignQuestion,
    QuestionType,
)
from .designations import Designation
from .donations import Donation, DonationAnswer, DonationStatus
from .donors import DonorAccount
from .organizations import Organization
from .pages import OrganizationPage, PageType
from .staff import StaffAccount, StaffRole, StaffRoleName
from .uploads import ImageUpload, UploadStatus

# Export all models and enums
__all__ = [
    # Base
    "Base",
    "JSONType",
    # Enums
    "DonationStatus",
    "PageType",
    "QuestionType",
    "StaffRoleName",
    "UploadStatus",
    "CHOICE_QUESTION_TYPES",
    # Models
    "Campaign",
    "CampaignAvailableDesignation",
    "CampaignQuestion",
    "Designation",
    "Donation",
    "DonationAnswer",
    "DonorAccount",
    "ImageUpload",
    "Organization",
    "OrganizationPage",
    "StaffAccount",
    "StaffRole",
]
