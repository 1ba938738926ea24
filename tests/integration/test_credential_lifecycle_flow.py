"""Integration tests: command handlers over real repositories.

Handlers come from the container factories, bound to a per-test SQLite
session. Raw secrets are read from the published events, the way the
notification collaborator would receive them.

Tests cover:
- Verification token is single use
- Expired verification token is rejected and stays unconsumed
- Refresh rotation revokes the presented record
- A validly signed refresh JWT with the wrong secret is rejected
- Password reset revokes every refresh token of the account
- Logout revokes the refresh record
"""

from datetime import UTC, datetime, timedelta

import jwt
import pytest
from sqlalchemy import update

from src.application.commands.auth_commands import (
    LoginAccount,
    LogoutAccount,
    RefreshTokens,
    RegisterAccount,
    RequestPasswordReset,
    ResetPassword,
    VerifyEmail,
)
from src.core.config import settings
from src.core.container import (
    get_login_account_handler,
    get_logout_account_handler,
    get_refresh_tokens_handler,
    get_register_account_handler,
    get_request_password_reset_handler,
    get_reset_password_handler,
    get_verify_email_handler,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.events import PasswordResetRequested, UserRegistered
from src.infrastructure.persistence.models import EmailVerificationToken


def _last(events: list, event_type: type):
    return [event for event in events if isinstance(event, event_type)][-1]


async def _register(db_session, captured_events) -> str:
    handler = await get_register_account_handler(session=db_session)
    result = await handler.handle(
        RegisterAccount(username="bob", email="bob@example.com", password="Password123")
    )
    assert isinstance(result, Success)
    return _last(captured_events, UserRegistered).verification_token


async def _register_and_verify(db_session, captured_events) -> None:
    token = await _register(db_session, captured_events)
    handler = await get_verify_email_handler(session=db_session)
    assert isinstance(await handler.handle(VerifyEmail(token=token)), Success)


async def _login(db_session, password: str = "Password123"):
    handler = await get_login_account_handler(session=db_session)
    return await handler.handle(LoginAccount(email="bob@example.com", password=password))


@pytest.mark.integration
class TestVerification:
    async def test_token_is_single_use(self, db_session, captured_events):
        token = await _register(db_session, captured_events)
        handler = await get_verify_email_handler(session=db_session)

        first = await handler.handle(VerifyEmail(token=token))
        second = await handler.handle(VerifyEmail(token=token))

        assert isinstance(first, Success)
        assert isinstance(second, Failure)
        assert second.error.code == ErrorCode.TOKEN_INVALID

    async def test_expired_token_rejected(self, db_session, captured_events):
        token = await _register(db_session, captured_events)
        await db_session.execute(
            update(EmailVerificationToken).values(
                expires_at=datetime.now(UTC) - timedelta(seconds=1)
            )
        )
        await db_session.commit()
        handler = await get_verify_email_handler(session=db_session)

        result = await handler.handle(VerifyEmail(token=token))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_EXPIRED

    async def test_login_requires_verification(self, db_session, captured_events):
        await _register(db_session, captured_events)

        result = await _login(db_session)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EMAIL_NOT_VERIFIED


@pytest.mark.integration
class TestRefreshRotation:
    async def test_presented_record_is_revoked(self, db_session, captured_events):
        await _register_and_verify(db_session, captured_events)
        login = await _login(db_session)
        handler = await get_refresh_tokens_handler(session=db_session)

        rotated = await handler.handle(RefreshTokens(refresh_token=login.value.refresh_token))
        replay = await handler.handle(RefreshTokens(refresh_token=login.value.refresh_token))
        again = await handler.handle(RefreshTokens(refresh_token=rotated.value.refresh_token))

        assert isinstance(rotated, Success)
        assert rotated.value.refresh_token != login.value.refresh_token
        assert isinstance(replay, Failure)
        assert replay.error.code == ErrorCode.TOKEN_INVALID
        assert isinstance(again, Success)

    async def test_signed_token_with_wrong_secret_rejected(
        self, db_session, captured_events
    ):
        await _register_and_verify(db_session, captured_events)
        login = await _login(db_session)
        claims = jwt.decode(
            login.value.refresh_token,
            settings.secret_key,
            algorithms=[settings.algorithm],
        )
        claims["secret"] = "guessed-secret"
        forged = jwt.encode(claims, settings.secret_key, algorithm=settings.algorithm)
        handler = await get_refresh_tokens_handler(session=db_session)

        rejected = await handler.handle(RefreshTokens(refresh_token=forged))
        genuine = await handler.handle(RefreshTokens(refresh_token=login.value.refresh_token))

        assert isinstance(rejected, Failure)
        assert rejected.error.code == ErrorCode.TOKEN_INVALID
        assert isinstance(genuine, Success)

    async def test_logout_revokes(self, db_session, captured_events):
        await _register_and_verify(db_session, captured_events)
        login = await _login(db_session)
        logout = await get_logout_account_handler(session=db_session)
        refresh = await get_refresh_tokens_handler(session=db_session)

        result = await logout.handle(LogoutAccount(refresh_token=login.value.refresh_token))
        after = await refresh.handle(RefreshTokens(refresh_token=login.value.refresh_token))

        assert isinstance(result, Success)
        assert isinstance(after, Failure)


@pytest.mark.integration
class TestPasswordReset:
    async def test_reset_revokes_all_refresh_tokens(self, db_session, captured_events):
        await _register_and_verify(db_session, captured_events)
        first = await _login(db_session)
        second = await _login(db_session)

        request = await get_request_password_reset_handler(session=db_session)
        await request.handle(RequestPasswordReset(email="bob@example.com"))
        reset_token = _last(captured_events, PasswordResetRequested).reset_token
        reset = await get_reset_password_handler(session=db_session)
        result = await reset.handle(
            ResetPassword(token=reset_token, new_password="NewPassword456")
        )

        assert isinstance(result, Success)
        refresh = await get_refresh_tokens_handler(session=db_session)
        for login in (first, second):
            rejected = await refresh.handle(
                RefreshTokens(refresh_token=login.value.refresh_token)
            )
            assert isinstance(rejected, Failure)

        old = await _login(db_session)
        new = await _login(db_session, password="NewPassword456")
        assert isinstance(old, Failure)
        assert old.error.code == ErrorCode.INVALID_CREDENTIALS
        assert isinstance(new, Success)

    async def test_reset_token_single_use(self, db_session, captured_events):
        await _register_and_verify(db_session, captured_events)
        request = await get_request_password_reset_handler(session=db_session)
        await request.handle(RequestPasswordReset(email="bob@example.com"))
        reset_token = _last(captured_events, PasswordResetRequested).reset_token
        reset = await get_reset_password_handler(session=db_session)

        await reset.handle(ResetPassword(token=reset_token, new_password="NewPassword456"))
        second = await reset.handle(
            ResetPassword(token=reset_token, new_password="OtherPassword789")
        )

        assert isinstance(second, Failure)
        assert second.error.code == ErrorCode.TOKEN_INVALID
