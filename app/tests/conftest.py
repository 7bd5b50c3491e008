"""
Pytest configuration and fixtures for testing
"""
import os
import pytest
from typing import AsyncGenerator
from datetime import datetime, UTC, timedelta
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import NullPool
from infrastructure.postgres_connection import Base, get_db_session
from models.account import Account
from models.friendship import Friendship, FriendshipStatus


# File-based SQLite to avoid in-memory connection issues
TEST_DATABASE_PATH = "./test_intros.db"
TEST_DATABASE_URL = f"sqlite+aiosqlite:///{TEST_DATABASE_PATH}"


def _remove_test_database():
    if os.path.exists(TEST_DATABASE_PATH):
        os.remove(TEST_DATABASE_PATH)


@pytest.fixture(scope="function")
async def db_engine():
    """Create a test database engine"""
    _remove_test_database()

    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=NullPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()
    _remove_test_database()


@pytest.fixture(scope="function")
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session"""
    session_factory = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with session_factory() as session:
        yield session
        await session.rollback()


async def _create_account(session: AsyncSession, **fields) -> Account:
    defaults = {
        "hashed_password": "hashed_password",
        "is_active": True,
        "is_superuser": False,
        "is_verified": True,
    }
    defaults.update(fields)
    account = Account(**defaults)
    session.add(account)
    await session.commit()
    await session.refresh(account)
    return account


@pytest.fixture
async def account_ada(db_session: AsyncSession) -> Account:
    """Founder account"""
    return await _create_account(
        db_session,
        email="ada@example.com",
        name="Ada Lovelace",
        position="Founder",
        location="London",
        expertise=["fundraising", "analytics"],
        hobbies=["chess"],
    )


@pytest.fixture
async def account_grace(db_session: AsyncSession) -> Account:
    """Investor account"""
    return await _create_account(
        db_session,
        email="grace@example.com",
        name="Grace Hopper",
        position="Partner",
        location="New York",
    )


@pytest.fixture
async def account_linus(db_session: AsyncSession) -> Account:
    """Engineer account"""
    return await _create_account(
        db_session,
        email="linus@example.org",
        name="Linus Torvalds",
        position="Engineer",
    )


@pytest.fixture
async def inactive_account(db_session: AsyncSession) -> Account:
    """Deactivated account"""
    return await _create_account(
        db_session,
        email="gone@example.com",
        name="Gone Away",
        is_active=False,
        is_verified=False,
    )


async def _create_edge(
    session: AsyncSession,
    requester: Account,
    target: Account,
    status: FriendshipStatus,
    created_at: datetime
) -> Friendship:
    edge = Friendship(
        requester_id=requester.id,
        target_id=target.id,
        status=status,
        created_at=created_at
    )
    session.add(edge)
    await session.commit()
    await session.refresh(edge)
    return edge


@pytest.fixture
async def pending_request(
    db_session: AsyncSession,
    account_ada: Account,
    account_grace: Account
) -> Friendship:
    """Pending request from Ada to Grace"""
    return await _create_edge(
        db_session, account_ada, account_grace, FriendshipStatus.PENDING, datetime.now(UTC)
    )


@pytest.fixture
async def accepted_friendship(
    db_session: AsyncSession,
    account_ada: Account,
    account_linus: Account
) -> tuple[Friendship, Friendship]:
    """Mutual friendship between Ada and Linus (both directions accepted)"""
    created_at = datetime.now(UTC) - timedelta(days=1)
    forward = await _create_edge(
        db_session, account_ada, account_linus, FriendshipStatus.ACCEPTED, created_at
    )
    backward = await _create_edge(
        db_session, account_linus, account_ada, FriendshipStatus.ACCEPTED, created_at
    )
    return forward, backward


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the app, sharing the test database session"""
    from main import app

    async def override_get_db_session():
        yield db_session

    app.dependency_overrides[get_db_session] = override_get_db_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client

    app.dependency_overrides.clear()


@pytest.fixture
def login_as():
    """Authenticate every request of the test client as the given account"""
    from main import app
    from api.routes.auth import current_active_user

    def _login(account: Account):
        app.dependency_overrides[current_active_user] = lambda: account

    return _login
