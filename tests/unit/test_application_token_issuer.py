"""Unit tests for TokenIssuer and TokenLifetimes.

Tests cover:
- Lifetimes per purpose (15 min / 30 min / 30 days)
- Only the hash is persisted; the raw secret is returned once
- Each purpose goes to its own pool
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from src.application.services.token_issuer import TokenIssuer, TokenLifetimes
from src.core.config import get_settings
from src.domain.enums import TokenPurpose
from tests.conftest import fake_hasher, hash_of, make_token_record


def _repositories():
    repos = {}
    for purpose in TokenPurpose:
        repo = AsyncMock()
        repo.save.side_effect = lambda account_id, token_hash, expires_at: (
            make_token_record(account_id=account_id)
        )
        repos[purpose] = repo
    return repos


@pytest.mark.unit
class TestTokenLifetimes:
    """Lifetime policy."""

    def test_defaults(self):
        lifetimes = TokenLifetimes()

        assert lifetimes.for_purpose(TokenPurpose.VERIFICATION) == timedelta(minutes=15)
        assert lifetimes.for_purpose(TokenPurpose.RESET) == timedelta(minutes=30)
        assert lifetimes.for_purpose(TokenPurpose.REFRESH) == timedelta(days=30)

    def test_from_settings(self):
        settings = get_settings()

        lifetimes = TokenLifetimes.from_settings(settings)

        assert lifetimes.verification == timedelta(
            minutes=settings.verification_token_expire_minutes
        )
        assert lifetimes.reset == timedelta(minutes=settings.reset_token_expire_minutes)
        assert lifetimes.refresh == timedelta(days=settings.refresh_token_expire_days)


@pytest.mark.unit
class TestTokenIssuer:
    """Tests for TokenIssuer.issue()."""

    @pytest.mark.parametrize(
        ("purpose", "ttl"),
        [
            (TokenPurpose.VERIFICATION, timedelta(minutes=15)),
            (TokenPurpose.RESET, timedelta(minutes=30)),
            (TokenPurpose.REFRESH, timedelta(days=30)),
        ],
    )
    async def test_issue_sets_expiry_from_purpose(self, purpose, ttl):
        repos = _repositories()
        issuer = TokenIssuer(
            repositories=repos, hasher=fake_hasher(), lifetimes=TokenLifetimes()
        )

        with freeze_time("2025-03-01 10:00:00"):
            await issuer.issue(uuid7(), purpose)

        kwargs = repos[purpose].save.call_args.kwargs
        assert kwargs["expires_at"] == datetime(2025, 3, 1, 10, 0, tzinfo=UTC) + ttl

    async def test_issue_persists_only_the_hash(self):
        repos = _repositories()
        issuer = TokenIssuer(
            repositories=repos, hasher=fake_hasher(), lifetimes=TokenLifetimes()
        )

        issued = await issuer.issue(uuid7(), TokenPurpose.VERIFICATION)

        kwargs = repos[TokenPurpose.VERIFICATION].save.call_args.kwargs
        assert kwargs["token_hash"] == hash_of(issued.raw_secret)
        assert issued.raw_secret not in kwargs.values()

    async def test_issue_uses_only_the_purpose_pool(self):
        repos = _repositories()
        issuer = TokenIssuer(
            repositories=repos, hasher=fake_hasher(), lifetimes=TokenLifetimes()
        )

        await issuer.issue(uuid7(), TokenPurpose.RESET)

        repos[TokenPurpose.RESET].save.assert_awaited_once()
        repos[TokenPurpose.VERIFICATION].save.assert_not_called()
        repos[TokenPurpose.REFRESH].save.assert_not_called()

    async def test_secrets_are_unique_and_urlsafe(self):
        issuer = TokenIssuer(
            repositories=_repositories(),
            hasher=fake_hasher(),
            lifetimes=TokenLifetimes(),
        )
        account_id = uuid7()

        first = await issuer.issue(account_id, TokenPurpose.VERIFICATION)
        second = await issuer.issue(account_id, TokenPurpose.VERIFICATION)

        assert first.raw_secret != second.raw_secret
        assert len(first.raw_secret) >= 43
        assert all(c.isalnum() or c in "-_" for c in first.raw_secret)

    async def test_repr_masks_secret(self):
        issuer = TokenIssuer(
            repositories=_repositories(),
            hasher=fake_hasher(),
            lifetimes=TokenLifetimes(),
        )

        issued = await issuer.issue(uuid7(), TokenPurpose.RESET)

        assert issued.raw_secret not in repr(issued)
