from dataclasses import dataclass

from fastapi import status

from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.core.context import PublicSession, StaffSession
from src.database.models import (
    DonorAccount,
    Organization,
    StaffAccount,
    StaffRole,
    StaffRoleName,
)
from src.modules.auth.tokens import create_donor_token, create_staff_token
from src.modules.donor.repository import DonorAccountRepository
from src.modules.organization.repository import OrganizationLookup
from src.modules.page.service import OrganizationPageService
from src.modules.staff.repository import StaffAccountLookup, StaffRoleRepository
from src.utils.hashing import HashingService


@dataclass
class StaffAuthResult:
    token: str
    staff_account: StaffAccount
    organization: Organization
    role: StaffRoleName


@dataclass
class DonorAuthResult:
    token: str
    donor: DonorAccount


def _invalid_credentials() -> DonorHubException:
    return DonorHubException(
        MessageCode.INVALID_CREDENTIALS, status.HTTP_401_UNAUTHORIZED
    )


class StaffAuthService(BaseService):
    async def signup(
        self,
        organization_name: str,
        subdomain: str,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
    ) -> StaffAuthResult:
        """Create an organization with its first admin and starter pages."""
        organizations = OrganizationLookup(self.db)
        accounts = StaffAccountLookup(self.db)

        if await organizations.find_by_subdomain(subdomain) is not None:
            raise DonorHubException(MessageCode.SUBDOMAIN_TAKEN, status.HTTP_409_CONFLICT)
        if await accounts.find_by_email(email) is not None:
            raise DonorHubException(MessageCode.EMAIL_TAKEN, status.HTTP_409_CONFLICT)

        async with self.transaction():
            organization = await organizations.create(organization_name, subdomain)
            account = await accounts.create(
                email=email,
                first_name=first_name,
                last_name=last_name,
                password_hash=HashingService.hash_password(password),
            )
            session = StaffSession(
                staff_account_id=account.id,
                organization_id=organization.id,
                role=StaffRoleName.ADMIN,
            )
            await StaffRoleRepository(self.db, session).create(
                account.id, StaffRoleName.ADMIN
            )
            await OrganizationPageService(self.db).create_default_pages(session)

        self.logger.info(
            "Organization signed up",
            organization_id=str(organization.id),
            subdomain=organization.subdomain,
        )
        return StaffAuthResult(
            token=create_staff_token(account.id, organization.id, StaffRoleName.ADMIN),
            staff_account=account,
            organization=organization,
            role=StaffRoleName.ADMIN,
        )

    async def login(self, email: str, password: str, subdomain: str) -> StaffAuthResult:
        organization = await OrganizationLookup(self.db).find_by_subdomain(subdomain)
        accounts = StaffAccountLookup(self.db)
        account = await accounts.find_by_email(email)

        if (
            organization is None
            or account is None
            or not HashingService.verify_password(password, account.password_hash)
        ):
            raise _invalid_credentials()

        membership: StaffRole | None = await accounts.find_membership(
            account.id, organization.id
        )
        if membership is None:
            raise _invalid_credentials()

        role = StaffRoleName(membership.role)
        return StaffAuthResult(
            token=create_staff_token(account.id, organization.id, role),
            staff_account=account,
            organization=organization,
            role=role,
        )


class DonorAuthService(BaseService):
    async def register_or_claim(
        self,
        session: PublicSession,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
    ) -> DonorAuthResult:
        """Register a donor, or set a password on an existing guest account."""
        repo = DonorAccountRepository(self.db, session)
        password_hash = HashingService.hash_password(password)

        async with self.transaction():
            donor = await repo.find_by_email(email)
            if donor is None:
                donor = await repo.create(first_name, last_name, email, password_hash)
            elif not donor.is_guest:
                raise DonorHubException(
                    MessageCode.DONOR_ACCOUNT_EXISTS, status.HTTP_409_CONFLICT
                )
            else:
                await repo.set_password(donor, password_hash)

        return DonorAuthResult(
            token=create_donor_token(donor.id, repo.organization_id), donor=donor
        )

    async def login(
        self, session: PublicSession, email: str, password: str
    ) -> DonorAuthResult:
        repo = DonorAccountRepository(self.db, session)
        donor = await repo.find_by_email(email)
        if donor is None or not HashingService.verify_password(
            password, donor.password_hash
        ):
            raise _invalid_credentials()
        return DonorAuthResult(
            token=create_donor_token(donor.id, repo.organization_id), donor=donor
        )
