"""Staff authentication endpoints and session resolution."""

import uuid

import pytest

from src.api.core.messages import MessageCode
from src.modules.auth.tokens import create_donor_token
from tests.factories import DEFAULT_PASSWORD
from tests.utils.assertions import (
    assert_error_response,
    assert_success_response,
    assert_validation_error,
)

SIGNUP = {
    "organization_name": "Clean Water Trust",
    "subdomain": "clean-water",
    "email": "founder@cleanwater.org",
    "password": "s3cure-passw0rd",
    "first_name": "Ada",
    "last_name": "Founder",
}


class TestSignup:
    @pytest.mark.asyncio
    async def test_signup_returns_admin_session_and_cookie(self, public_client):
        response = await public_client.post("/api/crm/auth/signup", json=SIGNUP)

        data = assert_success_response(response, MessageCode.SIGNED_UP, 201)
        assert data["role"] == "admin"
        assert data["subdomain"] == "clean-water"
        assert response.cookies.get("staff_token") == data["token"]

    @pytest.mark.asyncio
    async def test_cookie_authenticates_crm_requests(self, public_client):
        await public_client.post("/api/crm/auth/signup", json=SIGNUP)

        response = await public_client.get("/api/crm/organization")

        data = assert_success_response(response)
        assert data["subdomain"] == "clean-water"
        assert data["is_publicly_active"] is False

    @pytest.mark.asyncio
    async def test_duplicate_subdomain(self, public_client, test_organization):
        response = await public_client.post(
            "/api/crm/auth/signup", json={**SIGNUP, "subdomain": "test-org"}
        )

        assert_error_response(response, MessageCode.SUBDOMAIN_TAKEN, 409)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"password": "short"},
            {"email": "not-an-email"},
            {"subdomain": "-bad-"},
            {"organization_name": ""},
        ],
    )
    @pytest.mark.asyncio
    async def test_invalid_signup_body(self, public_client, overrides):
        response = await public_client.post(
            "/api/crm/auth/signup", json={**SIGNUP, **overrides}
        )

        assert_validation_error(response)


class TestLogin:
    @pytest.mark.asyncio
    async def test_login_and_logout(self, public_client, editor):
        response = await public_client.post(
            "/api/crm/auth/login",
            json={
                "email": editor.account.email,
                "password": DEFAULT_PASSWORD,
                "subdomain": "test-org",
            },
        )
        data = assert_success_response(response, MessageCode.LOGGED_IN)
        assert data["role"] == "editor"

        response = await public_client.post("/api/crm/auth/logout")
        assert_success_response(response, MessageCode.LOGGED_OUT)

        response = await public_client.get("/api/crm/organization")
        assert_error_response(response, MessageCode.AUTH_REQUIRED, 401)

    @pytest.mark.asyncio
    async def test_wrong_password(self, public_client, editor):
        response = await public_client.post(
            "/api/crm/auth/login",
            json={
                "email": editor.account.email,
                "password": "nope",
                "subdomain": "test-org",
            },
        )

        assert_error_response(response, MessageCode.INVALID_CREDENTIALS, 401)


class TestStaffSessionResolution:
    @pytest.mark.asyncio
    async def test_missing_token(self, public_client):
        response = await public_client.get("/api/crm/campaigns")

        assert_error_response(response, MessageCode.AUTH_REQUIRED, 401)

    @pytest.mark.asyncio
    async def test_malformed_authorization_header(self, public_client):
        response = await public_client.get(
            "/api/crm/campaigns", headers={"Authorization": "Token abc"}
        )

        assert_error_response(response, MessageCode.INVALID_TOKEN, 401)

    @pytest.mark.asyncio
    async def test_donor_token_is_not_a_staff_session(
        self, public_client, test_organization
    ):
        token = create_donor_token(uuid.uuid4(), test_organization.id)

        response = await public_client.get(
            "/api/crm/campaigns", headers={"Authorization": f"Bearer {token}"}
        )

        assert_error_response(response, MessageCode.AUTH_WRONG_SESSION_KIND, 403)

    @pytest.mark.asyncio
    async def test_removed_member_loses_access(
        self, admin_client, client_factory, editor
    ):
        response = await admin_client.delete(f"/api/crm/staff/{editor.account.id}")
        assert_success_response(response, MessageCode.STAFF_REMOVED)

        async with client_factory(editor) as editor_client:
            response = await editor_client.get("/api/crm/campaigns")

        assert_error_response(response, MessageCode.UNAUTHORIZED, 401)


class TestCurrentStaff:
    @pytest.mark.asyncio
    async def test_me_returns_member_and_organization(
        self, editor_client, editor, test_organization
    ):
        response = await editor_client.get("/api/crm/me")

        data = assert_success_response(response)
        assert data["member"]["staff_account_id"] == str(editor.account.id)
        assert data["member"]["email"] == editor.account.email
        assert data["member"]["role"] == "editor"
        assert data["organization"]["id"] == str(test_organization.id)
        assert data["organization"]["subdomain"] == "test-org"

    @pytest.mark.asyncio
    async def test_me_requires_staff_session(self, public_client):
        response = await public_client.get("/api/crm/me")

        assert_error_response(response, MessageCode.AUTH_REQUIRED, 401)
