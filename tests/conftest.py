"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from meeting_summarizer.api.dependencies import (
    get_distribution_service,
    get_remote_summarizer,
)
from meeting_summarizer.domain.delivery import DeliveryResult
from meeting_summarizer.infrastructure.database import get_session
from meeting_summarizer.infrastructure.models import Base
from meeting_summarizer.main import app
from meeting_summarizer.services.distribution import DistributionService

# Test database URL (use SQLite for tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class FakeMailer:
    """Records sends; recipients in ``failing`` are reported as undelivered."""

    def __init__(self, failing: set[str] | None = None) -> None:
        self.failing = failing or set()
        self.sent: list[tuple[str, str, str]] = []

    async def send_all(
        self, recipients: list[str], subject: str, summary: str
    ) -> list[DeliveryResult]:
        results = []
        for recipient in recipients:
            self.sent.append((recipient, subject, summary))
            if recipient in self.failing:
                results.append(DeliveryResult(recipient, False, "550 mailbox unavailable"))
            else:
                results.append(DeliveryResult(recipient, True))
        return results


@pytest.fixture
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
async def test_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def mailer() -> FakeMailer:
    return FakeMailer()


@pytest.fixture
async def client(session_factory, mailer) -> AsyncGenerator[AsyncClient, None]:
    """Async test client on the SQLite database, local-only summarization."""

    async def _get_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session
            await session.commit()

    app.dependency_overrides[get_session] = _get_session
    app.dependency_overrides[get_remote_summarizer] = lambda: None
    app.dependency_overrides[get_distribution_service] = lambda: DistributionService(
        mailer=mailer, default_subject="Meeting Summary Shared with You"
    )

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
