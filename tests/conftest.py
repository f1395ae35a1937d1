"""Global test configuration and fixtures for DonorHub API."""

import os
from collections.abc import AsyncGenerator
from dataclasses import dataclass

import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy_utils import create_database, database_exists, drop_database

from asgi_lifespan import LifespanManager
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.core.context import PublicSession, StaffSession
from src.database.models import (
    Base,
    Organization,
    PageType,
    StaffAccount,
    StaffRoleName,
)
from src.modules.auth.tokens import create_staff_token

from tests.factories import (
    OrganizationFactory,
    OrganizationPageFactory,
    StaffAccountFactory,
    StaffRoleFactory,
)

BASE_URL = "http://test-donorhub-api"


@dataclass
class StaffMember:
    account: StaffAccount
    organization: Organization
    role: StaffRoleName

    @property
    def session(self) -> StaffSession:
        return StaffSession(
            staff_account_id=self.account.id,
            organization_id=self.organization.id,
            role=self.role,
        )

    @property
    def token(self) -> str:
        return create_staff_token(self.account.id, self.organization.id, self.role)


@pytest.fixture
def test_database_uri(tmp_path) -> str:
    """A fresh database per test.

    SQLite by default; set TEST_DATABASE_URL to a postgresql+asyncpg URL to run
    against Postgres.
    """
    return os.getenv("TEST_DATABASE_URL") or f"sqlite+aiosqlite:///{tmp_path}/test.db"


def _enable_sqlite_pragmas(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.close()


@pytest_asyncio.fixture
async def async_engine(test_database_uri):
    """Create async engine with all tables for the test database."""
    is_sqlite = test_database_uri.startswith("sqlite")
    sync_dsn = None
    if not is_sqlite:
        sync_dsn = test_database_uri.replace("+asyncpg", "+psycopg2")
        if database_exists(sync_dsn):
            drop_database(sync_dsn)
        create_database(sync_dsn)

    engine = create_async_engine(test_database_uri, echo=False, future=True)
    if is_sqlite:
        event.listen(engine.sync_engine, "connect", _enable_sqlite_pragmas)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()
    if sync_dsn is not None:
        drop_database(sync_dsn)


@pytest.fixture
def session_factory(async_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=async_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Session for arranging data and calling services directly."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def app(session_factory) -> AsyncGenerator[FastAPI, None]:
    """FastAPI application wired to the test database."""
    from src.main import app

    async with LifespanManager(app):
        app.state.session_factory = session_factory
        yield app


# Test Data Fixtures
@pytest_asyncio.fixture
async def test_organization(db_session: AsyncSession) -> Organization:
    """Organization with its two unpublished starter pages."""
    org = await OrganizationFactory.create_async(
        db_session, name="Test Organization", subdomain="test-org"
    )
    for page_type in PageType:
        await OrganizationPageFactory.create_async(
            db_session, organization_id=org.id, page_type=page_type
        )
    return org


@pytest_asyncio.fixture
async def other_organization(db_session: AsyncSession) -> Organization:
    return await OrganizationFactory.create_async(
        db_session, name="Other Organization", subdomain="other-org"
    )


@pytest.fixture
def make_staff(db_session: AsyncSession):
    """Create a staff account holding ``role`` in ``organization``."""

    async def create(
        organization: Organization, role: StaffRoleName = StaffRoleName.EDITOR, **kwargs
    ) -> StaffMember:
        account = await StaffAccountFactory.create_async(db_session, **kwargs)
        await StaffRoleFactory.create_async(
            db_session,
            staff_account_id=account.id,
            organization_id=organization.id,
            role=role,
        )
        return StaffMember(account=account, organization=organization, role=role)

    return create


@pytest_asyncio.fixture
async def admin(make_staff, test_organization: Organization) -> StaffMember:
    return await make_staff(test_organization, StaffRoleName.ADMIN)


@pytest_asyncio.fixture
async def editor(make_staff, test_organization: Organization) -> StaffMember:
    return await make_staff(test_organization, StaffRoleName.EDITOR)


@pytest.fixture
def admin_session(admin: StaffMember) -> StaffSession:
    return admin.session


@pytest.fixture
def editor_session(editor: StaffMember) -> StaffSession:
    return editor.session


@pytest.fixture
def public_session(test_organization: Organization) -> PublicSession:
    return PublicSession(organization_id=test_organization.id)


# HTTP Client Fixtures
@pytest_asyncio.fixture
async def public_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create HTTP client for testing public endpoints."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url=BASE_URL
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def admin_client(
    app: FastAPI, admin: StaffMember
) -> AsyncGenerator[AsyncClient, None]:
    """Create HTTP client with admin bearer token."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url=BASE_URL,
        headers={"Authorization": f"Bearer {admin.token}"},
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def editor_client(
    app: FastAPI, editor: StaffMember
) -> AsyncGenerator[AsyncClient, None]:
    """Create HTTP client with editor bearer token."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url=BASE_URL,
        headers={"Authorization": f"Bearer {editor.token}"},
    ) as ac:
        yield ac


@pytest.fixture
def client_factory(app: FastAPI):
    """Factory for creating HTTP clients for other staff members."""

    def create_client(member: StaffMember) -> AsyncClient:
        return AsyncClient(
            transport=ASGITransport(app=app),
            base_url=BASE_URL,
            headers={"Authorization": f"Bearer {member.token}"},
        )

    return create_client
