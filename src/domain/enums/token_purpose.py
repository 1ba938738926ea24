"""Token purposes.

Each purpose has its own token pool (table) and its own lifetime policy.
A validator only ever searches the pool of the purpose it was asked for.
"""

from enum import Enum


class TokenPurpose(str, Enum):
    """Purpose of a stored token record."""

    VERIFICATION = "verification"
    """Email verification (single use, 15 minutes)."""

    RESET = "reset"
    """Password reset (single use, 30 minutes)."""

    REFRESH = "refresh"
    """Refresh token (rotated on every use, 30 days)."""
