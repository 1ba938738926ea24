"""Account lifecycle status.

State machine:
    UNVERIFIED --(verify email)--> ACTIVE
    any        --(moderation)----> BLOCKED

BLOCKED is terminal for every lifecycle flow and is checked before any
other account check. ACTIVE always implies the account is verified.
"""

from enum import Enum


class AccountStatus(str, Enum):
    """Account lifecycle status.

    String enum so values serialize directly into the database column and
    into log context.
    """

    UNVERIFIED = "UNVERIFIED"
    ACTIVE = "ACTIVE"
    BLOCKED = "BLOCKED"

    @classmethod
    def values(cls) -> list[str]:
        """Get all status values as strings."""
        return [status.value for status in cls]
