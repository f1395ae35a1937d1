"""From signup to a publicly active donor site, through the HTTP API only."""

import pytest

from src.api.core.messages import MessageCode
from src.modules.publishing.rules import default_campaign_config
from tests.utils.assertions import assert_error_response, assert_success_response

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]

ABOUT_PAGE = {
    "about": {"type": "about", "enabled": True, "props": {"title": "About Us"}},
    "story": {"type": "story", "enabled": True, "props": {"title": "Since 1999"}},
    "what": {"type": "what", "enabled": True, "props": {"title": "Wells"}},
    "why": {"type": "why", "enabled": True, "props": {"title": "Water is life"}},
    "team": {"type": "team", "enabled": False, "props": {}},
}


async def test_new_organization_goes_live(public_client):
    response = await public_client.post(
        "/api/crm/auth/signup",
        json={
            "organization_name": "Clean Water Trust",
            "subdomain": "clean-water",
            "email": "founder@cleanwater.org",
            "password": "s3cure-passw0rd",
            "first_name": "Ada",
            "last_name": "Founder",
        },
    )
    assert_success_response(response, MessageCode.SIGNED_UP, 201)

    # Not live yet: nothing published, no payment account
    response = await public_client.post("/api/crm/organization/publish")
    assert_error_response(response, MessageCode.SITE_INCOMPLETE, 400)

    response = await public_client.post("/api/crm/pages/landing/publish", json={})
    assert_success_response(response, MessageCode.PAGE_PUBLISHED)
    response = await public_client.post(
        "/api/crm/pages/about/publish", json={"content_config": ABOUT_PAGE}
    )
    assert_success_response(response, MessageCode.PAGE_PUBLISHED)

    response = await public_client.get("/api/public/clean-water")
    assert assert_success_response(response)["is_publicly_active"] is False

    response = await public_client.patch(
        "/api/crm/organization", json={"stripe_account_id": "acct_cleanwater"}
    )
    assert assert_success_response(response, MessageCode.ORGANIZATION_UPDATED)[
        "is_publicly_active"
    ]

    response = await public_client.get("/api/public/clean-water")
    assert assert_success_response(response)["is_publicly_active"] is True

    response = await public_client.get("/api/crm/organization/completeness")
    assert assert_success_response(response)["missing_requirements"] == []

    # Unpublishing a required page takes the site down again
    response = await public_client.patch(
        "/api/crm/pages/about", json={"is_published": False}
    )
    assert_success_response(response, MessageCode.PAGE_UPDATED)

    response = await public_client.get("/api/public/clean-water")
    assert assert_success_response(response)["is_publicly_active"] is False


async def test_campaign_with_designations_reaches_donors(public_client):
    await public_client.post(
        "/api/crm/auth/signup",
        json={
            "organization_name": "Food Bank",
            "subdomain": "food-bank",
            "email": "lead@foodbank.org",
            "password": "s3cure-passw0rd",
            "first_name": "Lee",
            "last_name": "Lead",
        },
    )

    response = await public_client.post(
        "/api/crm/designations", json={"name": "Winter Meals"}
    )
    designation_id = assert_success_response(
        response, MessageCode.DESIGNATION_CREATED, 201
    )["id"]

    response = await public_client.post(
        "/api/crm/campaigns",
        json={
            "internal_name": "Winter 2025",
            "external_name": "Feed a Family",
            "default_designation_id": designation_id,
        },
    )
    campaign = assert_success_response(response, MessageCode.CAMPAIGN_CREATED, 201)

    response = await public_client.put(
        f"/api/crm/campaigns/{campaign['id']}/designations",
        json={"designation_ids": [designation_id]},
    )
    assert_success_response(response, MessageCode.DESIGNATIONS_SYNCED)

    response = await public_client.get("/api/public/food-bank/campaigns/feed-a-family")
    assert_error_response(response, MessageCode.CAMPAIGN_NOT_FOUND, 404)

    response = await public_client.post(
        f"/api/crm/campaigns/{campaign['id']}/publish",
        json={"page_config": default_campaign_config()},
    )
    assert_success_response(response, MessageCode.CAMPAIGN_PUBLISHED)

    response = await public_client.get("/api/public/food-bank/campaigns/feed-a-family")
    data = assert_success_response(response)
    assert data["default_designation_id"] == designation_id
    assert [d["name"] for d in data["designations"]] == ["Winter Meals"]
