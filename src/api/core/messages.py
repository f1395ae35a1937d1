"""Centralized message codes and default messages for API responses."""

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel


class MessageCode(str, Enum):
    """Centralized message codes for API responses."""

    # Success codes
    SUCCESS = "SUCCESS"
    CREATED = "CREATED"
    DELETED = "DELETED"

    # Authentication & Authorization
    AUTH_REQUIRED = "AUTH_REQUIRED"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    INVALID_TOKEN = "INVALID_TOKEN"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    AUTH_INSUFFICIENT_ROLE_PERMISSIONS = "AUTH_INSUFFICIENT_ROLE_PERMISSIONS"
    AUTH_WRONG_SESSION_KIND = "AUTH_WRONG_SESSION_KIND"
    SIGNED_UP = "SIGNED_UP"
    LOGGED_IN = "LOGGED_IN"
    LOGGED_OUT = "LOGGED_OUT"

    # Tenancy
    TENANT_CONTEXT_MISSING = "TENANT_CONTEXT_MISSING"

    # Organization management
    ORGANIZATION_UPDATED = "ORGANIZATION_UPDATED"
    ORGANIZATION_DELETED = "ORGANIZATION_DELETED"
    ORGANIZATION_NOT_FOUND = "ORGANIZATION_NOT_FOUND"
    SUBDOMAIN_TAKEN = "SUBDOMAIN_TAKEN"
    SITE_PUBLISHED = "SITE_PUBLISHED"
    SITE_INCOMPLETE = "SITE_INCOMPLETE"

    # Staff management
    STAFF_NOT_FOUND = "STAFF_NOT_FOUND"
    STAFF_INVITED = "STAFF_INVITED"
    STAFF_ALREADY_MEMBER = "STAFF_ALREADY_MEMBER"
    STAFF_REMOVED = "STAFF_REMOVED"
    EMAIL_TAKEN = "EMAIL_TAKEN"
    ROLE_CHANGED = "ROLE_CHANGED"
    CANNOT_CHANGE_OWN_ROLE = "CANNOT_CHANGE_OWN_ROLE"
    CANNOT_REMOVE_YOURSELF = "CANNOT_REMOVE_YOURSELF"
    LAST_ADMIN = "LAST_ADMIN"

    # Campaigns
    CAMPAIGN_CREATED = "CAMPAIGN_CREATED"
    CAMPAIGN_UPDATED = "CAMPAIGN_UPDATED"
    CAMPAIGN_DELETED = "CAMPAIGN_DELETED"
    CAMPAIGN_NOT_FOUND = "CAMPAIGN_NOT_FOUND"
    CAMPAIGN_PUBLISHED = "CAMPAIGN_PUBLISHED"
    SLUG_TAKEN = "SLUG_TAKEN"
    PUBLISH_VALIDATION_FAILED = "PUBLISH_VALIDATION_FAILED"

    # Designations
    DESIGNATION_CREATED = "DESIGNATION_CREATED"
    DESIGNATION_UPDATED = "DESIGNATION_UPDATED"
    DESIGNATION_ARCHIVED = "DESIGNATION_ARCHIVED"
    DESIGNATION_NOT_FOUND = "DESIGNATION_NOT_FOUND"
    DESIGNATION_ALREADY_LINKED = "DESIGNATION_ALREADY_LINKED"
    DESIGNATIONS_SYNCED = "DESIGNATIONS_SYNCED"

    # Questions
    QUESTION_CREATED = "QUESTION_CREATED"
    QUESTION_UPDATED = "QUESTION_UPDATED"
    QUESTION_DELETED = "QUESTION_DELETED"
    QUESTION_NOT_FOUND = "QUESTION_NOT_FOUND"
    QUESTIONS_SYNCED = "QUESTIONS_SYNCED"

    # Organization pages
    PAGE_UPDATED = "PAGE_UPDATED"
    PAGE_PUBLISHED = "PAGE_PUBLISHED"
    PAGE_NOT_FOUND = "PAGE_NOT_FOUND"

    # Donors & donations
    DONOR_NOT_FOUND = "DONOR_NOT_FOUND"
    DONATION_NOT_FOUND = "DONATION_NOT_FOUND"
    DONATION_CREATED = "DONATION_CREATED"
    DONOR_ACCOUNT_EXISTS = "DONOR_ACCOUNT_EXISTS"

    # Uploads & payments
    UPLOAD_URL_CREATED = "UPLOAD_URL_CREATED"
    STRIPE_ACCOUNT_LINK_CREATED = "STRIPE_ACCOUNT_LINK_CREATED"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_FILE_TYPE = "INVALID_FILE_TYPE"

    # Service Errors
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"

    # Generic errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    CONFLICT = "CONFLICT"
    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"


# Default messages for each message code
DEFAULT_MESSAGES = {
    # Success messages
    MessageCode.SUCCESS: "Operation completed successfully",
    MessageCode.CREATED: "Resource created successfully",
    MessageCode.DELETED: "Resource deleted successfully",
    # Authentication & Authorization
    MessageCode.AUTH_REQUIRED: "Authentication required",
    MessageCode.UNAUTHORIZED: "Authentication required",
    MessageCode.FORBIDDEN: "Access denied",
    MessageCode.INVALID_TOKEN: "Invalid authentication token",
    MessageCode.INVALID_CREDENTIALS: "Invalid email or password",
    MessageCode.AUTH_INSUFFICIENT_ROLE_PERMISSIONS: "Insufficient role permissions",
    MessageCode.AUTH_WRONG_SESSION_KIND: "This endpoint requires a different kind of session",
    MessageCode.SIGNED_UP: "Organization created successfully",
    MessageCode.LOGGED_IN: "Logged in successfully",
    MessageCode.LOGGED_OUT: "Logged out successfully",
    # Tenancy
    MessageCode.TENANT_CONTEXT_MISSING: "Organization context is missing from the session",
    # Organization management
    MessageCode.ORGANIZATION_UPDATED: "Organization updated successfully",
    MessageCode.ORGANIZATION_DELETED: "Organization deleted successfully",
    MessageCode.ORGANIZATION_NOT_FOUND: "Organization not found",
    MessageCode.SUBDOMAIN_TAKEN: "This subdomain is already taken",
    MessageCode.SITE_PUBLISHED: "Site is publicly active",
    MessageCode.SITE_INCOMPLETE: "Cannot publish site",
    # Staff management
    MessageCode.STAFF_NOT_FOUND: "Staff member not found",
    MessageCode.STAFF_INVITED: "Staff member added successfully",
    MessageCode.STAFF_ALREADY_MEMBER: "This user is already a member of your organization",
    MessageCode.STAFF_REMOVED: "Staff member removed successfully",
    MessageCode.EMAIL_TAKEN: "An account with this email already exists",
    MessageCode.ROLE_CHANGED: "Role changed successfully",
    MessageCode.CANNOT_CHANGE_OWN_ROLE: "You cannot modify your own role",
    MessageCode.CANNOT_REMOVE_YOURSELF: "You cannot remove yourself from the organization",
    MessageCode.LAST_ADMIN: "Cannot remove the last admin from the organization",
    # Campaigns
    MessageCode.CAMPAIGN_CREATED: "Campaign created successfully",
    MessageCode.CAMPAIGN_UPDATED: "Campaign updated successfully",
    MessageCode.CAMPAIGN_DELETED: "Campaign deleted successfully",
    MessageCode.CAMPAIGN_NOT_FOUND: "Campaign not found",
    MessageCode.CAMPAIGN_PUBLISHED: "Campaign published successfully",
    MessageCode.SLUG_TAKEN: "A campaign with this slug already exists",
    MessageCode.PUBLISH_VALIDATION_FAILED: "Cannot publish: content is incomplete",
    # Designations
    MessageCode.DESIGNATION_CREATED: "Designation created successfully",
    MessageCode.DESIGNATION_UPDATED: "Designation updated successfully",
    MessageCode.DESIGNATION_ARCHIVED: "Designation archived successfully",
    MessageCode.DESIGNATION_NOT_FOUND: "Designation not found",
    MessageCode.DESIGNATION_ALREADY_LINKED: "Designation is already available for this campaign",
    MessageCode.DESIGNATIONS_SYNCED: "Campaign designations updated successfully",
    # Questions
    MessageCode.QUESTION_CREATED: "Question created successfully",
    MessageCode.QUESTION_UPDATED: "Question updated successfully",
    MessageCode.QUESTION_DELETED: "Question deleted successfully",
    MessageCode.QUESTION_NOT_FOUND: "Question not found",
    MessageCode.QUESTIONS_SYNCED: "Campaign questions updated successfully",
    # Organization pages
    MessageCode.PAGE_UPDATED: "Page updated successfully",
    MessageCode.PAGE_PUBLISHED: "Page published successfully",
    MessageCode.PAGE_NOT_FOUND: "Page not found",
    # Donors & donations
    MessageCode.DONOR_NOT_FOUND: "Donor not found",
    MessageCode.DONATION_NOT_FOUND: "Donation not found",
    MessageCode.DONATION_CREATED: "Thank you! Your donation has been recorded",
    MessageCode.DONOR_ACCOUNT_EXISTS: "An account with this email already exists.",
    # Uploads & payments
    MessageCode.UPLOAD_URL_CREATED: "Upload URL created",
    MessageCode.STRIPE_ACCOUNT_LINK_CREATED: "Stripe onboarding link created",
    # Validation errors
    MessageCode.VALIDATION_ERROR: "Validation failed",
    MessageCode.INVALID_INPUT: "Invalid input provided",
    MessageCode.INVALID_FILE_TYPE: "Invalid file type",
    # Service Errors
    MessageCode.EXTERNAL_SERVICE_ERROR: "External service error",
    # Generic errors
    MessageCode.INTERNAL_ERROR: "Internal server error",
    MessageCode.CONFLICT: "Resource already exists",
    MessageCode.BAD_REQUEST: "Bad request",
    MessageCode.NOT_FOUND: "Resource not found",
}

T = TypeVar("T")


class PaginationInfo(BaseModel):
    """Common pagination information."""

    total: int
    limit: int
    offset: int
    has_more: bool


class Paginated(BaseModel, Generic[T]):
    """Generic paginated response wrapper."""

    items: list[T]
    pagination: PaginationInfo


class APIResponse(BaseModel, Generic[T]):
    """Response envelope shared by every endpoint."""

    success: bool
    message_code: MessageCode
    message: str
    data: T | None = None

    @classmethod
    def success_response(
        cls,
        message_code: MessageCode = MessageCode.SUCCESS,
        message: str | None = None,
        data: T | None = None,
    ) -> "APIResponse[T]":
        """Create a success response."""
        return cls(
            success=True,
            message_code=message_code,
            message=message or DEFAULT_MESSAGES.get(message_code, "Success"),
            data=data,
        )

    @classmethod
    def error_response(
        cls,
        message_code: MessageCode,
        message: str | None = None,
        data: T | None = None,
    ) -> "APIResponse[T]":
        """Create an error response."""
        return cls(
            success=False,
            message_code=message_code,
            message=message or DEFAULT_MESSAGES.get(message_code, "Error occurred"),
            data=data,
        )


def get_default_message(message_code: MessageCode) -> str:
    """Get default message for a message code."""
    return DEFAULT_MESSAGES.get(message_code, "Operation completed")
