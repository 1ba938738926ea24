"""Unit tests for the Account entity.

Tests cover:
- Default state of a new account
- verify(): UNVERIFIED -> ACTIVE, blocked accounts rejected
- block(): overrides every other state
- change_password(): replaces hash, touches updated_at
"""

from datetime import UTC, datetime

import pytest
from freezegun import freeze_time

from src.domain.enums import AccountStatus, UserRole
from tests.conftest import make_account


@pytest.mark.unit
class TestAccountDefaults:
    """New accounts start unverified with the USER role."""

    def test_new_account_is_unverified_user(self):
        account = make_account()

        assert account.status == AccountStatus.UNVERIFIED
        assert account.is_verified is False
        assert account.role == UserRole.USER
        assert account.is_blocked() is False

    def test_timestamps_are_timezone_aware(self):
        account = make_account()

        assert account.created_at.tzinfo is not None
        assert account.updated_at.tzinfo is not None


@pytest.mark.unit
class TestAccountVerify:
    """Tests for Account.verify()."""

    def test_verify_activates_account(self):
        account = make_account()

        account.verify()

        assert account.is_verified is True
        assert account.status == AccountStatus.ACTIVE
        assert not account.is_blocked()

    def test_verify_is_idempotent(self):
        account = make_account(status=AccountStatus.ACTIVE)

        account.verify()

        assert account.status == AccountStatus.ACTIVE
        assert account.is_verified is True

    def test_verify_blocked_account_raises(self):
        account = make_account(status=AccountStatus.BLOCKED)

        with pytest.raises(ValueError, match="Blocked"):
            account.verify()

        assert account.status == AccountStatus.BLOCKED
        assert account.is_verified is False


@pytest.mark.unit
class TestAccountBlock:
    """Tests for Account.block()."""

    def test_block_overrides_active(self):
        account = make_account(status=AccountStatus.ACTIVE)

        account.block()

        assert account.is_blocked()
        assert account.status == AccountStatus.BLOCKED
        assert account.is_verified is True

    def test_block_unverified_account(self):
        account = make_account()

        account.block()

        assert account.status == AccountStatus.BLOCKED


@pytest.mark.unit
class TestAccountChangePassword:
    """Tests for Account.change_password()."""

    def test_change_password_replaces_hash_and_touches(self):
        with freeze_time("2025-01-01 12:00:00"):
            account = make_account()

        with freeze_time("2025-01-02 12:00:00"):
            account.change_password("new-hash")

        assert account.password_hash == "new-hash"
        assert account.updated_at == datetime(2025, 1, 2, 12, 0, tzinfo=UTC)
        assert account.created_at == datetime(2025, 1, 1, 12, 0, tzinfo=UTC)
