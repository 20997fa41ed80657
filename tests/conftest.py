"""
Test Configuration and Fixtures
Provides shared test setup for all test cases
"""
import os

# Settings are read at import time, so the test environment must be in place first
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["DEBUG"] = "false"
os.environ["SMTP_HOST"] = ""
os.environ["CONTACT_NOTIFICATION_EMAILS"] = "ops@homlet.test, support@homlet.test"

import pytest
import pytest_asyncio
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import patch, AsyncMock
from httpx import AsyncClient, ASGITransport
from sqlalchemy import select
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool
from app.main import app
from app.database.connection import Base
from app.models.user import User
from app.models.property import Property
from app.models.agent_unlock import AgentUnlock
from app.services import user_service
from app.services.client import contact_request_service, rating_service, dashboard_service
from app.utils.dependencies import get_current_user

# Test database URL (use in-memory SQLite for testing)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Create test engine
test_engine = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = async_sessionmaker(
    test_engine, class_=AsyncSession, expire_on_commit=False
)

# Service modules that open their own sessions
SESSION_MODULES = [
    user_service,
    contact_request_service,
    rating_service,
    dashboard_service,
]


@pytest_asyncio.fixture(scope="function")
async def db_session():
    """Create a fresh database session for each test"""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with TestSessionLocal() as session:
        yield session

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture(scope="function")
async def patched_sessions(db_session):
    """Route every service's AsyncSessionLocal to the test session"""
    class TestSessionContext:
        def __init__(self, session):
            self.session = session
        async def __aenter__(self):
            return self.session
        async def __aexit__(self, *args):
            pass

    def make_test_session_local(session):
        return lambda: TestSessionContext(session)

    patches = [
        patch.object(module, 'AsyncSessionLocal', make_test_session_local(db_session))
        for module in SESSION_MODULES
    ]

    for p in patches:
        p.start()

    try:
        yield db_session
    finally:
        for p in patches:
            p.stop()


@pytest_asyncio.fixture(scope="function")
async def client(patched_sessions):
    """Create test HTTP client"""
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def mock_send_email():
    """Replace the SMTP sender used by operator notifications"""
    with patch(
        "app.services.email_service.notification_service.send_email",
        new_callable=AsyncMock,
        return_value=True,
    ) as mocked:
        yield mocked


@pytest.fixture(scope="function")
def make_user(db_session):
    """Factory creating a committed user, returned as a plain dict"""
    async def _make_user(role: str = "client", full_name: str = None, phone: str = "+2348031234567") -> dict:
        user = User(
            id=str(uuid.uuid4()),
            email=f"{role}_{uuid.uuid4().hex[:10]}@example.com",
            full_name=full_name or f"Test {role.title()}",
            phone=phone,
            role=role,
            is_active=True,
        )
        db_session.add(user)
        await db_session.commit()
        return {
            "id": user.id,
            "email": user.email,
            "full_name": user.full_name,
            "phone": user.phone,
            "role": user.role,
            "is_active": True,
            "rating": 0.0,
            "total_ratings": 0,
        }
    return _make_user


@pytest.fixture(scope="function")
def make_property(db_session):
    """Factory creating a committed property, returned as a plain dict"""
    async def _make_property(
        agent_id: str,
        title: str = "3 Bedroom Flat",
        state: str = "Lagos",
        area: str = "Lekki",
        price: int = 2500000,
        property_type: str = "apartment",
        status: str = "active",
        created_at: datetime = None,
    ) -> dict:
        prop = Property(
            id=str(uuid.uuid4()),
            agent_id=agent_id,
            title=title,
            state=state,
            area=area,
            price=Decimal(price),
            property_type=property_type,
            status=status,
            created_at=created_at or datetime.now(timezone.utc),
        )
        db_session.add(prop)
        await db_session.commit()
        return {"id": prop.id, "title": title, "agent_id": agent_id}
    return _make_property


@pytest.fixture(scope="function")
def unlock_agent(db_session):
    async def _unlock_agent(client_id: str, agent_id: str) -> None:
        db_session.add(AgentUnlock(client_id=client_id, agent_id=agent_id))
        await db_session.commit()
    return _unlock_agent


@pytest_asyncio.fixture(scope="function")
async def client_user(make_user):
    return await make_user(role="client", full_name="Ada Obi")


@pytest_asyncio.fixture(scope="function")
async def agent_user(make_user):
    return await make_user(role="agent", full_name="Tunde Bello", phone="+2348097654321")


@pytest_asyncio.fixture(scope="function")
async def listing(make_property, agent_user):
    return await make_property(agent_id=agent_user["id"])


@pytest_asyncio.fixture(scope="function")
async def authenticated_client(client: AsyncClient, client_user):
    """HTTP client whose session resolves to a client user"""
    app.dependency_overrides[get_current_user] = lambda: client_user
    return client, client_user


@pytest.fixture(scope="function")
def fetch_user(db_session):
    """Load a user bypassing the identity map cache"""
    async def _fetch_user(user_id: str) -> User:
        stmt = select(User).where(User.id == user_id).execution_options(populate_existing=True)
        result = await db_session.execute(stmt)
        return result.scalar_one()
    return _fetch_user
