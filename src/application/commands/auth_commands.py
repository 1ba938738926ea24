"""Credential lifecycle commands (CQRS write operations).

Commands represent intent to change system state. All commands are immutable
(frozen=True) and keyword-only (kw_only=True). Field types reuse the
Annotated types from src.domain.types; request schemas validate them before
a command is built.

Pattern:
- Commands are data containers (no logic)
- Handlers execute the flow and return Result types
"""

from dataclasses import dataclass

from src.domain.types import Email, Password, RawToken, Username


@dataclass(frozen=True, kw_only=True)
class RegisterAccount:
    """Register a new account, or re-send verification for a stale one.

    Attributes:
        username: Unique username.
        email: Email address (normalized lowercase).
        password: Plaintext password, hashed by the handler.

    Example:
        >>> command = RegisterAccount(
        ...     username="bob",
        ...     email="bob@x.io",
        ...     password="Password123",
        ... )
        >>> result = await handler.handle(command)
    """

    username: Username
    email: Email
    password: Password


@dataclass(frozen=True, kw_only=True)
class LoginAccount:
    """Authenticate with email and password and obtain tokens."""

    email: Email
    password: str


@dataclass(frozen=True, kw_only=True)
class VerifyEmail:
    """Verify an email address with the emailed verification secret.

    Attributes:
        token: Raw verification secret.
    """

    token: RawToken


@dataclass(frozen=True, kw_only=True)
class ResendVerification:
    """Issue a fresh verification token for an unverified account."""

    email: Email


@dataclass(frozen=True, kw_only=True)
class RequestPasswordReset:
    """Start forgot-password.

    The outcome is never visible to the caller: every branch reports the
    same success.
    """

    email: Email


@dataclass(frozen=True, kw_only=True)
class ResetPassword:
    """Set a new password with an emailed reset secret.

    Attributes:
        token: Raw reset secret.
        new_password: Plaintext replacement password.
    """

    token: RawToken
    new_password: Password


@dataclass(frozen=True, kw_only=True)
class RefreshTokens:
    """Rotate a refresh token and obtain a new access token.

    Attributes:
        refresh_token: Signed refresh JWT from login or a previous refresh.
    """

    refresh_token: RawToken


@dataclass(frozen=True, kw_only=True)
class LogoutAccount:
    """Revoke the refresh token of the current session (idempotent)."""

    refresh_token: RawToken
