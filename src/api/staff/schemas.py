"""Staff management schemas."""

from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from src.api.core.messages import APIResponse
from src.database.models import StaffRole, StaffRoleName


class StaffMemberModel(BaseModel):
    staff_account_id: UUID
    email: str
    first_name: str
    last_name: str
    role: StaffRoleName

    @classmethod
    def from_membership(cls, membership: StaffRole) -> "StaffMemberModel":
        account = membership.staff_account
        return cls(
            staff_account_id=account.id,
            email=account.email,
            first_name=account.first_name,
            last_name=account.last_name,
            role=membership.role,
        )


class StaffInviteRequest(BaseModel):
    email: EmailStr
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    role: StaffRoleName = StaffRoleName.EDITOR


class StaffInviteData(BaseModel):
    member: StaffMemberModel
    # Returned once so the admin can hand it to a brand new account
    temporary_password: str | None = None


class StaffRoleUpdateRequest(BaseModel):
    role: StaffRoleName


StaffListResponse = APIResponse[list[StaffMemberModel]]
StaffMemberResponse = APIResponse[StaffMemberModel]
StaffInviteResponse = APIResponse[StaffInviteData]
StaffRemoveResponse = APIResponse[bool]
