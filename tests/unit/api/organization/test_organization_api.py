"""Organization settings, completeness and site publishing."""

import pytest
from sqlalchemy import update

from src.api.core.messages import MessageCode
from src.database.models import OrganizationPage
from tests.utils.assertions import (
    assert_error_response,
    assert_success_response,
    assert_validation_error,
)


async def publish_all_pages(db_session, organization_id):
    await db_session.execute(
        update(OrganizationPage)
        .where(OrganizationPage.organization_id == organization_id)
        .values(is_published=True)
    )
    await db_session.commit()


class TestOrganization:
    @pytest.mark.asyncio
    async def test_get(self, editor_client, test_organization):
        response = await editor_client.get("/api/crm/organization")

        data = assert_success_response(response)
        assert data["id"] == str(test_organization.id)
        assert data["is_publicly_active"] is False

    @pytest.mark.asyncio
    async def test_is_publicly_active_is_not_writable(self, editor_client):
        response = await editor_client.patch(
            "/api/crm/organization",
            json={"name": "Renamed", "is_publicly_active": True},
        )

        data = assert_success_response(response, MessageCode.ORGANIZATION_UPDATED)
        assert data["name"] == "Renamed"
        assert data["is_publicly_active"] is False

    @pytest.mark.asyncio
    async def test_null_name_and_subdomain_are_ignored(self, editor_client):
        response = await editor_client.patch(
            "/api/crm/organization",
            json={"name": None, "subdomain": None, "settings": {"theme": "dark"}},
        )

        data = assert_success_response(response, MessageCode.ORGANIZATION_UPDATED)
        assert data["name"] == "Test Organization"
        assert data["subdomain"] == "test-org"

    @pytest.mark.asyncio
    async def test_subdomain_clash(self, editor_client, other_organization):
        response = await editor_client.patch(
            "/api/crm/organization", json={"subdomain": "other-org"}
        )

        assert_error_response(response, MessageCode.SUBDOMAIN_TAKEN, 409)

    @pytest.mark.asyncio
    async def test_invalid_subdomain(self, editor_client):
        response = await editor_client.patch(
            "/api/crm/organization", json={"subdomain": "has spaces"}
        )

        assert_validation_error(response)

    @pytest.mark.asyncio
    async def test_connecting_payments_completes_site(
        self, db_session, editor_client, test_organization
    ):
        await publish_all_pages(db_session, test_organization.id)

        response = await editor_client.patch(
            "/api/crm/organization", json={"stripe_account_id": "acct_123"}
        )

        data = assert_success_response(response, MessageCode.ORGANIZATION_UPDATED)
        assert data["is_publicly_active"] is True

    @pytest.mark.asyncio
    async def test_admin_deletes_organization(self, admin_client, public_client):
        response = await admin_client.delete("/api/crm/organization")
        assert_success_response(response, MessageCode.ORGANIZATION_DELETED)

        response = await public_client.get("/api/public/test-org")
        assert_error_response(response, MessageCode.ORGANIZATION_NOT_FOUND, 404)


class TestCompleteness:
    @pytest.mark.asyncio
    async def test_status_lists_missing_requirements(self, editor_client):
        response = await editor_client.get("/api/crm/organization/completeness")

        data = assert_success_response(response)
        assert data == {
            "is_publicly_active": False,
            "payment_account_verified": False,
            "required_pages_published": False,
            "missing_requirements": [
                "Stripe account not verified",
                "Required pages not published",
            ],
        }

    @pytest.mark.asyncio
    async def test_publish_incomplete_site(self, editor_client):
        response = await editor_client.post("/api/crm/organization/publish")

        body = assert_error_response(
            response,
            MessageCode.SITE_INCOMPLETE,
            400,
            "Cannot publish site. Missing requirements: "
            "Stripe account not verified, Required pages not published",
        )
        assert body["details"]["missing_requirements"] == [
            "Stripe account not verified",
            "Required pages not published",
        ]

    @pytest.mark.asyncio
    async def test_publish_complete_site(
        self, db_session, editor_client, test_organization
    ):
        test_organization.stripe_account_id = "acct_123"
        await publish_all_pages(db_session, test_organization.id)

        response = await editor_client.post("/api/crm/organization/publish")

        data = assert_success_response(response, MessageCode.SITE_PUBLISHED)
        assert data["is_publicly_active"] is True
