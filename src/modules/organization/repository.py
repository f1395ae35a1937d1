from uuid import UUID

from fastapi import status
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.core.base import BaseRepository, translate_errors
from src.database.models import Organization
from src.utils.logger import get_logger

# Fields staff may change directly; is_publicly_active is derived
UPDATABLE_FIELDS = frozenset({"name", "subdomain", "stripe_account_id", "settings"})
REQUIRED_FIELDS = frozenset({"name", "subdomain"})


class OrganizationRepository(BaseRepository):
    """Access to the session's own organization row."""

    async def get(self) -> Organization:
        return await self.get_by_id(self.organization_id)

    async def get_by_id(self, organization_id: UUID) -> Organization:
        # Only the session's own organization resolves
        with self.translate_errors("load organization"):
            result = await self.db.execute(
                select(Organization).where(
                    Organization.id == organization_id,
                    Organization.id == self.organization_id,
                )
            )
            organization = result.scalar_one_or_none()
        if organization is None:
            raise DonorHubException(
                MessageCode.ORGANIZATION_NOT_FOUND, status.HTTP_404_NOT_FOUND
            )
        return organization

    async def update(self, organization: Organization, changes: dict) -> Organization:
        for field_name, value in changes.items():
            if field_name in UPDATABLE_FIELDS:
                setattr(organization, field_name, value)
        with self.translate_errors(
            "update organization", conflict_code=MessageCode.SUBDOMAIN_TAKEN
        ):
            await self.db.flush()
        return organization

    async def set_publicly_active(
        self, organization: Organization, value: bool
    ) -> Organization:
        organization.is_publicly_active = value
        with self.translate_errors("update organization status"):
            await self.db.flush()
        return organization

    async def delete(self) -> None:
        with self.translate_errors("delete organization"):
            await self.db.execute(
                delete(Organization).where(Organization.id == self.organization_id)
            )


class OrganizationLookup:
    """Unscoped lookups used to establish a tenant before a session exists."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.logger = get_logger(self.__class__.__name__)

    async def find_by_subdomain(self, subdomain: str) -> Organization | None:
        result = await self.db.execute(
            select(Organization).where(Organization.subdomain == subdomain.lower())
        )
        return result.scalar_one_or_none()

    async def find_by_stripe_account(self, account_id: str) -> Organization | None:
        result = await self.db.execute(
            select(Organization).where(Organization.stripe_account_id == account_id)
        )
        return result.scalar_one_or_none()

    async def require_by_subdomain(self, subdomain: str) -> Organization:
        organization = await self.find_by_subdomain(subdomain)
        if organization is None:
            raise DonorHubException(
                MessageCode.ORGANIZATION_NOT_FOUND, status.HTTP_404_NOT_FOUND
            )
        return organization

    async def create(self, name: str, subdomain: str) -> Organization:
        organization = Organization(name=name, subdomain=subdomain.lower())
        self.db.add(organization)
        with translate_errors(
            self.logger, "create organization", MessageCode.SUBDOMAIN_TAKEN
        ):
            await self.db.flush()
        return organization
