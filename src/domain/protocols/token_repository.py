"""TokenRepository protocol (port) for the three token stores.

Verification, reset and refresh tokens share one record shape and one
lifecycle, so a single protocol covers all three pools. Each implementation
is bound to exactly one TokenPurpose.

Token Lifecycle:
    1. Issued with a bcrypt hash of the raw secret (consumed = False)
    2. Validated by hash comparison
    3. Consumed exactly once (consumed False -> True, never reverts)

Records are never physically deleted.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from src.domain.enums import TokenPurpose


@dataclass(frozen=True)
class TokenRecordData:
    """Data transfer object for a stored token record.

    Used by protocol methods to return token data without exposing
    infrastructure model classes to the application layer.

    Attributes:
        id: Record identifier (refresh JWTs reference it as token_id).
        account_id: Owning account.
        token_hash: Bcrypt hash of the raw secret.
        expires_at: Expiration timestamp (UTC).
        consumed: Used (verification/reset) or revoked (refresh).
        consumed_at: When the record was consumed.
        created_at: Issue timestamp.
    """

    id: UUID
    account_id: UUID
    token_hash: str
    expires_at: datetime
    consumed: bool
    consumed_at: datetime | None
    created_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check whether the record expired before ``now`` (default: current time)."""
        return self.expires_at < (now or datetime.now(UTC))


class TokenRepository(Protocol):
    """Protocol for token record persistence.

    Implementations:
        - EmailVerificationTokenRepository
        - PasswordResetTokenRepository
        - RefreshTokenRepository
        (src/infrastructure/persistence/repositories/token_repository.py)
    """

    purpose: TokenPurpose

    async def save(
        self,
        account_id: UUID,
        token_hash: str,
        expires_at: datetime,
    ) -> TokenRecordData:
        """Create a new unconsumed token record.

        Args:
            account_id: Owning account.
            token_hash: Bcrypt hash of the raw secret (never plaintext).
            expires_at: Expiration timestamp.

        Returns:
            Created TokenRecordData.
        """
        ...

    async def find_unconsumed(self) -> list[TokenRecordData]:
        """Return every record of this pool that has not been consumed.

        Expired records are included; the caller decides on expiry.
        """
        ...

    async def find_latest_for_account(self, account_id: UUID) -> TokenRecordData | None:
        """Return the most recently issued record for an account, if any."""
        ...

    async def find_active_by_id(
        self,
        token_id: UUID,
        *,
        for_update: bool = False,
    ) -> TokenRecordData | None:
        """Find an unconsumed record by ID.

        Args:
            token_id: Record identifier.
            for_update: Lock the row until the transaction ends.

        Returns:
            TokenRecordData if found and not consumed, None otherwise.
        """
        ...

    async def consume(self, token_id: UUID) -> bool:
        """Flip the consumed flag if it is still false.

        Conditional update: of several concurrent callers only one sees True.

        Returns:
            True if this call consumed the record, False if it was already
            consumed or does not exist.
        """
        ...

    async def consume_all_for_account(self, account_id: UUID) -> int:
        """Consume every live record of an account.

        Returns:
            Number of records consumed.
        """
        ...
