"""Session context: who is acting, and for which organization."""

from dataclasses import dataclass, field
from enum import Enum
from uuid import UUID

from src.database.models.staff import StaffRoleName


class SessionKind(str, Enum):
    STAFF = "staff"
    DONOR = "donor"
    PUBLIC = "public"


@dataclass(frozen=True)
class StaffSession:
    """Authenticated staff member acting inside one organization."""

    staff_account_id: UUID
    organization_id: UUID | None
    role: StaffRoleName
    kind: SessionKind = field(default=SessionKind.STAFF, init=False)

    def has_role(self, *roles: StaffRoleName) -> bool:
        return self.role in roles


@dataclass(frozen=True)
class DonorSession:
    """Authenticated donor on an organization's public site."""

    donor_account_id: UUID
    organization_id: UUID | None
    kind: SessionKind = field(default=SessionKind.DONOR, init=False)


@dataclass(frozen=True)
class PublicSession:
    """Anonymous visitor or trusted server-side caller.

    The organization is resolved by the caller (subdomain lookup, verified
    webhook payload) before the session is built.
    """

    organization_id: UUID | None
    kind: SessionKind = field(default=SessionKind.PUBLIC, init=False)


Session = StaffSession | DonorSession | PublicSession
