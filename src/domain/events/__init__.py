"""Domain events module.

Usage:
    >>> from src.domain.events import UserRegistered
    >>>
    >>> event = UserRegistered(
    ...     account_id=account.id,
    ...     email=account.email,
    ...     verification_token=issued.raw_secret,
    ... )
    >>> await event_bus.publish(event)
"""

from src.domain.events.auth_events import (
    AuthTokensRefreshed,
    EmailVerificationResent,
    EmailVerified,
    PasswordResetCompleted,
    PasswordResetRequested,
    UserLoggedIn,
    UserLoggedOut,
    UserRegistered,
)
from src.domain.events.base_event import DomainEvent

__all__ = [
    "AuthTokensRefreshed",
    "DomainEvent",
    "EmailVerificationResent",
    "EmailVerified",
    "PasswordResetCompleted",
    "PasswordResetRequested",
    "UserLoggedIn",
    "UserLoggedOut",
    "UserRegistered",
]
