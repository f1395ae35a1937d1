"""initial_schema

Revision ID: 4c1f0d2a9b7e
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = "4c1f0d2a9b7e"
down_revision = None
branch_labels = None
depends_on = None


def _id() -> sa.Column:
    return sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True)


def _timestamps(updated: bool = True) -> list[sa.Column]:
    columns = [sa.Column("created_at", sa.DateTime(timezone=True), nullable=True)]
    if updated:
        columns.append(sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True))
    return columns


def _organization_fk() -> sa.Column:
    return sa.Column(
        "organization_id",
        postgresql.UUID(as_uuid=True),
        sa.ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "organizations",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("subdomain", sa.String(63), nullable=False),
        sa.Column("stripe_account_id", sa.String(255), nullable=True, unique=True),
        sa.Column("is_publicly_active", sa.Boolean(), nullable=False),
        sa.Column("settings", postgresql.JSONB(), nullable=True),
        *_timestamps(),
    )
    op.create_index(
        "ix_organizations_subdomain", "organizations", ["subdomain"], unique=True
    )

    op.create_table(
        "staff_accounts",
        _id(),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("first_name", sa.String(255), nullable=False),
        sa.Column("last_name", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "staff_roles",
        _id(),
        sa.Column(
            "staff_account_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("staff_accounts.id", ondelete="CASCADE"),
            nullable=False,
        ),
        _organization_fk(),
        sa.Column("role", sa.String(32), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint(
            "staff_account_id", "organization_id", name="unique_staff_org_role"
        ),
    )
    op.create_index("ix_staff_roles_organization_id", "staff_roles", ["organization_id"])

    op.create_table(
        "designations",
        _id(),
        _organization_fk(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("goal_amount", sa.Numeric(12, 2), nullable=True),
        sa.Column("is_archived", sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    op.create_index(
        "ix_designations_organization_id", "designations", ["organization_id"]
    )

    op.create_table(
        "campaigns",
        _id(),
        _organization_fk(),
        sa.Column(
            "default_designation_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("designations.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("internal_name", sa.String(255), nullable=False),
        sa.Column("external_name", sa.String(255), nullable=True),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("goal_amount", sa.Numeric(12, 2), nullable=True),
        sa.Column("icon", sa.String(255), nullable=True),
        sa.Column("page_config", postgresql.JSONB(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("organization_id", "slug", name="unique_campaign_org_slug"),
    )
    op.create_index("ix_campaigns_organization_id", "campaigns", ["organization_id"])

    op.create_table(
        "campaign_available_designations",
        _id(),
        sa.Column(
            "campaign_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("campaigns.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "designation_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("designations.id", ondelete="CASCADE"),
            nullable=False,
        ),
        *_timestamps(updated=False),
        sa.UniqueConstraint(
            "campaign_id", "designation_id", name="unique_campaign_designation"
        ),
    )
    op.create_index(
        "ix_campaign_available_designations_campaign_id",
        "campaign_available_designations",
        ["campaign_id"],
    )

    op.create_table(
        "campaign_questions",
        _id(),
        sa.Column(
            "campaign_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("campaigns.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("question_text", sa.String(500), nullable=False),
        sa.Column("question_type", sa.String(32), nullable=False),
        sa.Column("options", postgresql.JSONB(), nullable=True),
        sa.Column("is_required", sa.Boolean(), nullable=False),
        sa.Column("display_order", sa.Integer(), nullable=False),
        *_timestamps(),
    )
    op.create_index(
        "ix_campaign_questions_campaign_id", "campaign_questions", ["campaign_id"]
    )

    op.create_table(
        "organization_pages",
        _id(),
        _organization_fk(),
        sa.Column("page_type", sa.String(32), nullable=False),
        sa.Column("content_config", postgresql.JSONB(), nullable=True),
        sa.Column("is_published", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("organization_id", "page_type", name="unique_org_page_type"),
    )
    op.create_index(
        "ix_organization_pages_organization_id",
        "organization_pages",
        ["organization_id"],
    )

    op.create_table(
        "image_uploads",
        _id(),
        _organization_fk(),
        sa.Column(
            "staff_account_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("staff_accounts.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("key", sa.String(512), nullable=False, unique=True),
        sa.Column("url", sa.String(1024), nullable=False),
        sa.Column("content_type", sa.String(128), nullable=False),
        sa.Column("status", sa.String(32), nullable=False),
        *_timestamps(),
    )
    op.create_index(
        "ix_image_uploads_organization_id", "image_uploads", ["organization_id"]
    )
    op.create_index("ix_image_uploads_url", "image_uploads", ["url"])

    op.create_table(
        "donor_accounts",
        _id(),
        _organization_fk(),
        sa.Column("first_name", sa.String(255), nullable=False),
        sa.Column("last_name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint("organization_id", "email", name="unique_donor_org_email"),
    )
    op.create_index(
        "ix_donor_accounts_organization_id", "donor_accounts", ["organization_id"]
    )

    op.create_table(
        "donations",
        _id(),
        _organization_fk(),
        sa.Column(
            "campaign_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("campaigns.id"),
            nullable=False,
        ),
        sa.Column(
            "donor_account_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("donor_accounts.id"),
            nullable=False,
        ),
        sa.Column(
            "designation_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("designations.id"),
            nullable=False,
        ),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("stripe_charge_id", sa.String(255), nullable=True, unique=True),
        sa.Column("status", sa.String(32), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_donations_organization_id", "donations", ["organization_id"])
    op.create_index("ix_donations_campaign_id", "donations", ["campaign_id"])
    op.create_index("ix_donations_donor_account_id", "donations", ["donor_account_id"])

    op.create_table(
        "donation_answers",
        _id(),
        sa.Column(
            "donation_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("donations.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "question_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("campaign_questions.id"),
            nullable=False,
        ),
        sa.Column("answer_value", sa.Text(), nullable=False),
        *_timestamps(updated=False),
    )
    op.create_index(
        "ix_donation_answers_donation_id", "donation_answers", ["donation_id"]
    )


def downgrade() -> None:
    op.drop_table("donation_answers")
    op.drop_table("donations")
    op.drop_table("donor_accounts")
    op.drop_table("image_uploads")
    op.drop_table("organization_pages")
    op.drop_table("campaign_questions")
    op.drop_table("campaign_available_designations")
    op.drop_table("campaigns")
    op.drop_table("designations")
    op.drop_table("staff_roles")
    op.drop_table("staff_accounts")
    op.drop_table("organizations")
