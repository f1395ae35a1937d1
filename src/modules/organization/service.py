from src.core.base import BaseService, drop_nulls
from src.core.context import Session, StaffSession
from src.database.models import Organization
from src.modules.organization.completeness import CompletenessService
from src.modules.organization.repository import REQUIRED_FIELDS, OrganizationRepository


class OrganizationService(BaseService):
    async def get_organization(self, session: Session) -> Organization:
        return await OrganizationRepository(self.db, session).get()

    async def update_organization(
        self, session: StaffSession, changes: dict
    ) -> Organization:
        repo = OrganizationRepository(self.db, session)
        organization = await repo.get()
        previous_account = organization.stripe_account_id
        changes = drop_nulls(changes, REQUIRED_FIELDS)
        if changes.get("subdomain"):
            changes["subdomain"] = changes["subdomain"].lower()

        async with self.transaction():
            await repo.update(organization, changes)

        if organization.stripe_account_id != previous_account:
            await CompletenessService(self.db).recompute(session)

        self.logger.info(
            "Organization updated",
            organization_id=str(organization.id),
            fields=sorted(changes),
        )
        return organization

    async def delete_organization(self, session: StaffSession) -> None:
        repo = OrganizationRepository(self.db, session)
        organization = await repo.get()
        async with self.transaction():
            await repo.delete()
        self.logger.info("Organization deleted", organization_id=str(organization.id))
