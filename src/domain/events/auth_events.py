"""Credential lifecycle domain events.

Outbound events carry the raw secret the notification collaborator needs to
build an email link. They are the only place a raw secret leaves the
application layer.

Handlers:
- NotificationEventHandler: UserRegistered, EmailVerificationResent,
  PasswordResetRequested
- LoggingEventHandler: ALL events
"""

from dataclasses import dataclass
from typing import ClassVar
from uuid import UUID

from src.domain.events.base_event import DomainEvent


# ═══════════════════════════════════════════════════════════════
# Outbound notification events
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class UserRegistered(DomainEvent):
    """Account registered, or re-registered with an expired verification token.

    Attributes:
        account_id: Account the token was issued for.
        email: Destination address.
        verification_token: Raw verification secret.
    """

    event_type: ClassVar[str] = "USER_REGISTERED"

    account_id: UUID
    email: str
    verification_token: str


@dataclass(frozen=True, kw_only=True)
class EmailVerificationResent(DomainEvent):
    """A fresh verification token was issued on request.

    Attributes:
        account_id: Account the token was issued for.
        email: Destination address.
        verification_token: Raw verification secret.
    """

    event_type: ClassVar[str] = "EMAIL_VERIFICATION_RESEND"

    account_id: UUID
    email: str
    verification_token: str


@dataclass(frozen=True, kw_only=True)
class PasswordResetRequested(DomainEvent):
    """A password reset token was issued.

    Attributes:
        account_id: Account the token was issued for.
        email: Destination address.
        reset_token: Raw reset secret.
    """

    event_type: ClassVar[str] = "PASSWORD_RESET_REQUESTED"

    account_id: UUID
    email: str
    reset_token: str


@dataclass(frozen=True, kw_only=True)
class UserLoggedIn(DomainEvent):
    """Account logged in successfully."""

    event_type: ClassVar[str] = "USER_LOGIN"

    account_id: UUID
    email: str


# ═══════════════════════════════════════════════════════════════
# Internal events (logging only)
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class EmailVerified(DomainEvent):
    """Account email verified and account activated."""

    event_type: ClassVar[str] = "EMAIL_VERIFIED"

    account_id: UUID
    email: str


@dataclass(frozen=True, kw_only=True)
class PasswordResetCompleted(DomainEvent):
    """Password replaced through a reset token.

    Attributes:
        account_id: Account whose password changed.
        revoked_refresh_tokens: Number of refresh tokens revoked with it.
    """

    event_type: ClassVar[str] = "PASSWORD_RESET_COMPLETED"

    account_id: UUID
    revoked_refresh_tokens: int


@dataclass(frozen=True, kw_only=True)
class AuthTokensRefreshed(DomainEvent):
    """Refresh token rotated and a new access token issued."""

    event_type: ClassVar[str] = "AUTH_TOKENS_REFRESHED"

    account_id: UUID
    old_token_id: UUID
    new_token_id: UUID


@dataclass(frozen=True, kw_only=True)
class UserLoggedOut(DomainEvent):
    """Refresh token presented at logout.

    Attributes:
        account_id: Account named in the refresh token.
        revoked: False when the token was already revoked or unknown.
    """

    event_type: ClassVar[str] = "USER_LOGOUT"

    account_id: UUID
    revoked: bool
