"""Integration tests for the token pool repositories (SQLite).

Tests cover:
- save() stores an unconsumed record
- find_unconsumed() skips consumed records and other pools
- find_latest_for_account()
- consume() succeeds exactly once
- consume_all_for_account() only touches live records of one account
- find_active_by_id() with and without the row lock
"""

from datetime import UTC, datetime, timedelta

import pytest
import pytest_asyncio
from uuid_extensions import uuid7

from src.infrastructure.persistence.repositories import (
    AccountRepository,
    EmailVerificationTokenRepository,
    PasswordResetTokenRepository,
    RefreshTokenRepository,
)
from tests.conftest import make_account


@pytest_asyncio.fixture
async def account(db_session):
    account = make_account()
    await AccountRepository(session=db_session).save(account)
    return account


def _expiry() -> datetime:
    return datetime.now(UTC) + timedelta(minutes=15)


@pytest.mark.integration
class TestSave:
    async def test_save_returns_unconsumed_record(self, db_session, account):
        repo = EmailVerificationTokenRepository(session=db_session)
        expires_at = _expiry()

        record = await repo.save(account.id, "digest", expires_at)

        assert record.account_id == account.id
        assert record.token_hash == "digest"
        assert record.consumed is False
        assert record.consumed_at is None
        assert record.expires_at == expires_at
        assert not record.is_expired()


@pytest.mark.integration
class TestFind:
    async def test_find_unconsumed(self, db_session, account):
        repo = PasswordResetTokenRepository(session=db_session)
        live = await repo.save(account.id, "live", _expiry())
        used = await repo.save(account.id, "used", _expiry())
        await repo.consume(used.id)

        records = await repo.find_unconsumed()

        assert [record.id for record in records] == [live.id]

    async def test_pools_are_isolated(self, db_session, account):
        verification = EmailVerificationTokenRepository(session=db_session)
        reset = PasswordResetTokenRepository(session=db_session)
        await verification.save(account.id, "digest", _expiry())

        assert await reset.find_unconsumed() == []

    async def test_find_latest_for_account(self, db_session, account):
        repo = EmailVerificationTokenRepository(session=db_session)
        await repo.save(account.id, "first", _expiry())
        second = await repo.save(account.id, "second", _expiry())

        latest = await repo.find_latest_for_account(account.id)

        assert latest.id == second.id

    async def test_find_latest_none(self, db_session, account):
        repo = EmailVerificationTokenRepository(session=db_session)

        assert await repo.find_latest_for_account(account.id) is None

    @pytest.mark.parametrize("for_update", [False, True])
    async def test_find_active_by_id(self, db_session, account, for_update):
        repo = RefreshTokenRepository(session=db_session)
        record = await repo.save(account.id, "digest", _expiry())

        found = await repo.find_active_by_id(record.id, for_update=for_update)

        assert found.id == record.id

    async def test_find_active_by_id_skips_revoked(self, db_session, account):
        repo = RefreshTokenRepository(session=db_session)
        record = await repo.save(account.id, "digest", _expiry())
        await repo.consume(record.id)

        assert await repo.find_active_by_id(record.id) is None
        assert await repo.find_active_by_id(uuid7()) is None


@pytest.mark.integration
class TestConsume:
    async def test_consume_once(self, db_session, account):
        repo = EmailVerificationTokenRepository(session=db_session)
        record = await repo.save(account.id, "digest", _expiry())

        assert await repo.consume(record.id) is True
        assert await repo.consume(record.id) is False

        latest = await repo.find_latest_for_account(account.id)
        assert latest.consumed is True
        assert latest.consumed_at is not None

    async def test_consume_unknown(self, db_session):
        repo = PasswordResetTokenRepository(session=db_session)

        assert await repo.consume(uuid7()) is False

    async def test_consume_all_for_account(self, db_session, account):
        other = make_account(username="alice", email="alice@example.com")
        await AccountRepository(session=db_session).save(other)
        repo = RefreshTokenRepository(session=db_session)
        await repo.save(account.id, "a", _expiry())
        await repo.save(account.id, "b", _expiry())
        already = await repo.save(account.id, "c", _expiry())
        await repo.consume(already.id)
        others = await repo.save(other.id, "d", _expiry())

        revoked = await repo.consume_all_for_account(account.id)

        assert revoked == 2
        assert await repo.find_active_by_id(others.id) is not None
