"""Pytest configuration and shared fixtures."""

import os
from collections.abc import AsyncGenerator, Callable
from datetime import UTC, datetime

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from app.api.dependencies import get_clock, get_resource_locks
from app.core.database import Base, get_db
from app.core.locks import ResourceLockRegistry
from app.core.permissions import UserRole
from app.main import create_app

# Import all models to ensure they're registered with Base.metadata
from app.modules.bookings.models import Booking  # noqa: F401
from app.modules.resources.models import Resource
from app.modules.tenants.models import Tenant
from app.modules.users.models import User
from tests.factories import ResourceFactory, TenantFactory, UserFactory, bearer_headers


# In-memory SQLite unless a real database is supplied
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

# Fixed "now" for API tests; bookings must start on or after it
FROZEN_NOW = datetime(2029, 6, 1, 12, 0, tzinfo=UTC)


@pytest.fixture(scope="function")
async def engine():
    """Create test database engine."""
    if TEST_DATABASE_URL.startswith("sqlite"):
        engine = create_async_engine(
            TEST_DATABASE_URL,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
            echo=False,
        )
    else:
        engine = create_async_engine(TEST_DATABASE_URL, poolclass=NullPool, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def db(engine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a transactional database session for tests.

    Each test runs in its own transaction that is rolled back
    after the test completes, ensuring test isolation. Commits made
    by the code under test do not end the outer transaction.
    """
    session_factory = async_sessionmaker(
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with engine.connect() as conn:
        await conn.begin()

        async with session_factory(bind=conn) as session:
            yield session

        await conn.rollback()


@pytest.fixture
def frozen_clock() -> Callable[[], datetime]:
    """Clock pinned to FROZEN_NOW."""
    return lambda: FROZEN_NOW


@pytest.fixture
async def app(db: AsyncSession, frozen_clock: Callable[[], datetime]):
    """Create test application instance."""
    application = create_app()

    # Override database dependency
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    # Pin the admission clock and isolate lock state per test
    locks = ResourceLockRegistry()

    application.dependency_overrides[get_db] = override_get_db
    application.dependency_overrides[get_clock] = lambda: frozen_clock
    application.dependency_overrides[get_resource_locks] = lambda: locks

    yield application

    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
def anyio_backend() -> str:
    """Specify the async backend for anyio."""
    return "asyncio"


# ============================================================
# Tenant, User and Resource Fixtures
# ============================================================


@pytest.fixture
async def tenant(db: AsyncSession) -> Tenant:
    """Create the primary test tenant."""
    tenant = TenantFactory.build()
    db.add(tenant)
    await db.flush()
    return tenant


@pytest.fixture
async def other_tenant(db: AsyncSession) -> Tenant:
    """Create a second tenant whose data must stay invisible."""
    tenant = TenantFactory.build()
    db.add(tenant)
    await db.flush()
    return tenant


@pytest.fixture
async def user(db: AsyncSession, tenant: Tenant) -> User:
    """Create a TENANT_USER in the primary tenant."""
    user = UserFactory.build(tenant_id=tenant.id)
    db.add(user)
    await db.flush()
    return user


@pytest.fixture
async def other_user(db: AsyncSession, tenant: Tenant) -> User:
    """Create a second TENANT_USER in the primary tenant."""
    user = UserFactory.build(tenant_id=tenant.id)
    db.add(user)
    await db.flush()
    return user


@pytest.fixture
async def admin(db: AsyncSession, tenant: Tenant) -> User:
    """Create a TENANT_ADMIN in the primary tenant."""
    admin = UserFactory.build(tenant_id=tenant.id, role=UserRole.TENANT_ADMIN)
    db.add(admin)
    await db.flush()
    return admin


@pytest.fixture
async def foreign_user(db: AsyncSession, other_tenant: Tenant) -> User:
    """Create a TENANT_USER in the other tenant."""
    user = UserFactory.build(tenant_id=other_tenant.id)
    db.add(user)
    await db.flush()
    return user


@pytest.fixture
async def resource(db: AsyncSession, tenant: Tenant) -> Resource:
    """Create a bookable resource in the primary tenant."""
    resource = ResourceFactory.build(tenant_id=tenant.id)
    db.add(resource)
    await db.flush()
    return resource


@pytest.fixture
async def foreign_resource(db: AsyncSession, other_tenant: Tenant) -> Resource:
    """Create a resource in the other tenant."""
    resource = ResourceFactory.build(tenant_id=other_tenant.id)
    db.add(resource)
    await db.flush()
    return resource


# ============================================================
# Authentication Fixtures
# ============================================================


@pytest.fixture
def auth_headers(user: User) -> dict[str, str]:
    """Authorization headers for the test user."""
    return bearer_headers(user)


@pytest.fixture
def admin_headers(admin: User) -> dict[str, str]:
    """Authorization headers for the tenant admin."""
    return bearer_headers(admin)


@pytest.fixture
async def authenticated_client(
    app, auth_headers: dict[str, str]
) -> AsyncGenerator[AsyncClient, None]:
    """Provide an async HTTP client authenticated as the test user."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers=auth_headers,
    ) as client:
        yield client


@pytest.fixture
async def admin_client(
    app, admin_headers: dict[str, str]
) -> AsyncGenerator[AsyncClient, None]:
    """Provide an async HTTP client authenticated as the tenant admin."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers=admin_headers,
    ) as client:
        yield client
