"""Pytest configuration.

This configuration ensures:
1. Settings load from test environment variables (set before any src import)
2. Async tests are marked automatically
3. Integration and API tests get an isolated SQLite database
4. The event bus singleton is rebuilt per test so captured events never leak
"""

import inspect
import os
import tempfile
from datetime import UTC, datetime, timedelta
from pathlib import Path
from unittest.mock import AsyncMock, Mock

# Must run before src.core.config is imported anywhere
_TEST_DB_PATH = Path(tempfile.gettempdir()) / f"credential_lifecycle_test_{os.getpid()}.db"

os.environ["ENVIRONMENT"] = "testing"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret-key-that-is-at-least-32-characters-long"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["DB_CREATE_TABLES"] = "true"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from src.domain.entities.account import Account  # noqa: E402
from src.domain.enums import AccountStatus, UserRole  # noqa: E402
from src.domain.protocols.token_repository import TokenRecordData  # noqa: E402


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "api: HTTP tests through TestClient")
    config.addinivalue_line("markers", "smoke: End-to-end smoke tests")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


# =============================================================================
# Test helpers
# =============================================================================


def hash_of(raw: str) -> str:
    """Deterministic fake digest used with fake_hasher()."""
    return f"hashed:{raw}"


def fake_hasher() -> Mock:
    """Secret hasher double: hash(x) == "hashed:x", verify compares digests."""
    hasher = Mock()
    hasher.hash.side_effect = hash_of
    hasher.verify.side_effect = lambda raw, digest: digest == hash_of(raw)
    return hasher


def make_account(
    *,
    username: str = "bob",
    email: str = "bob@example.com",
    password: str = "Password123",
    status: AccountStatus = AccountStatus.UNVERIFIED,
    role: UserRole = UserRole.USER,
) -> Account:
    """Build an Account whose password_hash matches fake_hasher()."""
    return Account(
        id=uuid7(),
        username=username,
        email=email,
        password_hash=hash_of(password),
        is_verified=status == AccountStatus.ACTIVE,
        status=status,
        role=role,
    )


def make_token_record(
    *,
    account_id=None,
    raw_secret: str = "raw-secret",
    expires_in: timedelta = timedelta(minutes=15),
    consumed: bool = False,
    created_at: datetime | None = None,
) -> TokenRecordData:
    """Build a TokenRecordData whose token_hash matches fake_hasher()."""
    now = created_at or datetime.now(UTC)
    return TokenRecordData(
        id=uuid7(),
        account_id=account_id or uuid7(),
        token_hash=hash_of(raw_secret),
        expires_at=now + expires_in,
        consumed=consumed,
        consumed_at=now if consumed else None,
        created_at=now,
    )


# =============================================================================
# Unit test fixtures
# =============================================================================


@pytest.fixture
def mock_logger():
    """Logger double (LoggerProtocol methods are synchronous)."""
    return Mock()


@pytest.fixture
def mock_event_bus():
    """Event bus double; publish is awaited."""
    return AsyncMock()


@pytest.fixture
def mock_transaction():
    """Unit of work double (commit/rollback)."""
    return AsyncMock()


# =============================================================================
# Database fixtures
# =============================================================================


@pytest_asyncio.fixture
async def database(tmp_path):
    """Fresh SQLite database with all tables, one per test."""
    from src.infrastructure.persistence.database import Database

    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await db.create_all()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def db_session(database):
    """Session on the per-test database."""
    async with database.get_session() as session:
        yield session


# =============================================================================
# API fixtures
# =============================================================================


@pytest.fixture
def captured_events():
    """Collect every domain event published during the test.

    Rebuilds the event bus singleton so the capture handler is attached to
    the bus the handlers will use.
    """
    from src.core.container import get_event_bus
    from src.domain.events import (
        AuthTokensRefreshed,
        EmailVerificationResent,
        EmailVerified,
        PasswordResetCompleted,
        PasswordResetRequested,
        UserLoggedIn,
        UserLoggedOut,
        UserRegistered,
    )

    events: list = []

    async def capture(event) -> None:
        events.append(event)

    get_event_bus.cache_clear()
    bus = get_event_bus()
    for event_type in (
        UserRegistered,
        EmailVerificationResent,
        PasswordResetRequested,
        UserLoggedIn,
        EmailVerified,
        PasswordResetCompleted,
        AuthTokensRefreshed,
        UserLoggedOut,
    ):
        bus.subscribe(event_type, capture)

    yield events

    get_event_bus.cache_clear()


@pytest.fixture
def client(captured_events):
    """TestClient against the real app and a fresh SQLite file.

    Entering the client runs the lifespan, which creates the tables.
    """
    from fastapi.testclient import TestClient

    from src.main import app

    _TEST_DB_PATH.unlink(missing_ok=True)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    _TEST_DB_PATH.unlink(missing_ok=True)
