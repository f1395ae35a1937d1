"""Staff and donor authentication schemas."""

from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from src.api.core.messages import APIResponse
from src.api.organization.schemas import SUBDOMAIN_PATTERN, OrganizationModel
from src.api.staff.schemas import StaffMemberModel
from src.database.models import StaffRoleName


class SignupRequest(BaseModel):
    organization_name: str = Field(..., min_length=1, max_length=255)
    subdomain: str = Field(..., pattern=SUBDOMAIN_PATTERN)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)


class StaffLoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)
    subdomain: str = Field(..., min_length=1)


class StaffAuthData(BaseModel):
    token: str
    staff_account_id: UUID
    organization_id: UUID
    subdomain: str
    role: StaffRoleName


class CurrentStaffData(BaseModel):
    member: StaffMemberModel
    organization: OrganizationModel


class DonorRegisterRequest(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)


class DonorLoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class DonorProfileModel(BaseModel):
    id: UUID
    organization_id: UUID
    first_name: str
    last_name: str
    email: str

    class Config:
        from_attributes = True


StaffAuthResponse = APIResponse[StaffAuthData]
CurrentStaffResponse = APIResponse[CurrentStaffData]
DonorProfileResponse = APIResponse[DonorProfileModel]
LogoutResponse = APIResponse[bool]
