"""Base domain event class.

Domain events record "things that happened" in the credential lifecycle and
are always named in past tense (UserRegistered, EmailVerified). They are
published on the event bus only after the owning transaction has committed.

Usage:
    >>> @dataclass(frozen=True, kw_only=True)
    >>> class UserRegistered(DomainEvent):
    ...     event_type: ClassVar[str] = "USER_REGISTERED"
    ...     account_id: UUID
    ...     email: str
    >>>
    >>> event = UserRegistered(account_id=uuid7(), email="bob@x.io")
    >>> event.event_type
    'USER_REGISTERED'
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import ClassVar
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming
        3. Be frozen dataclasses with kw_only=True
        4. Declare a stable ``event_type`` wire name

    Attributes:
        event_id: Unique identifier for this event instance (UUID v4).
        occurred_at: When the event occurred (UTC).
    """

    event_type: ClassVar[str] = "DOMAIN_EVENT"
    """Stable event name used by subscribers and in log context."""

    event_id: UUID = field(default_factory=uuid4)
    """Unique identifier for this event instance."""

    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    """Timestamp when the event occurred (UTC)."""
