import os
from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone

import fakeredis
import fakeredis.aioredis
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

# Set test env vars before importing app modules
os.environ["REDIS_URL"] = "memory://"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"

# Shared FakeServer holds state; each call creates a fresh client
# bound to the current event loop (avoids pytest-asyncio loop mismatch).
_fake_server = fakeredis.FakeServer()

# Test database URL (use SQLite for tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///./test.db"

engine = create_async_engine(TEST_DATABASE_URL, echo=False)
TestingSessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

FIXED_NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


def _make_fake_redis():
    """Create a fakeredis instance bound to the shared server."""
    return fakeredis.aioredis.FakeRedis(server=_fake_server, decode_responses=True)


@pytest.fixture(autouse=True)
async def setup_database():
    from vitrine.core.limiter import limiter
    from vitrine.db.base import Base
    from vitrine.models.site_visit import SiteVisit  # noqa: F401

    # Disable rate limiting in tests — limits are tested explicitly where needed
    limiter.enabled = False

    # Clear fakeredis for each test
    r = _make_fake_redis()
    await r.flushall()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def fake_redis():
    """Provide a fakeredis instance for direct use in tests."""
    return _make_fake_redis()


@pytest.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    async with TestingSessionLocal() as session:
        yield session


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    from vitrine.core.redis import get_redis_dep
    from vitrine.db.session import get_db
    from vitrine.main import app

    async def override_get_db():
        yield db_session

    async def override_get_redis_dep():
        return _make_fake_redis()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_redis_dep] = override_get_redis_dep

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def now() -> datetime:
    """Fixed reference instant for clock-injected services."""
    return FIXED_NOW


@pytest.fixture
def make_event():
    """Factory for synthetic visit events, timestamped relative to FIXED_NOW."""
    from vitrine.analytics.events import VisitEvent

    def _make(
        path: str = "/",
        *,
        days_ago: float = 0,
        at: datetime | None = None,
        duration: int | None = None,
        device: str | None = None,
    ) -> VisitEvent:
        return VisitEvent(
            path=path,
            timestamp=at or FIXED_NOW - timedelta(days=days_ago),
            session_duration=duration,
            device_type=device,
        )

    return _make
