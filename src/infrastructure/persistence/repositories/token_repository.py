"""Token repositories - SQLAlchemy implementations of TokenRepository.

One repository per token pool. All three share the same queries and differ
only in the model they map and the name of the consumed flag
(``used`` for verification/reset, ``revoked`` for refresh).

Consumption is a conditional UPDATE (``WHERE consumed = false``); the
affected row count tells the caller whether it won.
"""

from datetime import UTC, datetime
from typing import Any, ClassVar
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.protocols.token_repository import TokenRecordData
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.email_verification_token import (
    EmailVerificationToken,
)
from src.infrastructure.persistence.models.password_reset_token import (
    PasswordResetToken,
)
from src.infrastructure.persistence.models.refresh_token import RefreshToken


class SQLAlchemyTokenRepository:
    """Shared implementation for the token pools.

    Subclasses set:
        model: SQLAlchemy model class.
        consumed_field: Name of the boolean consumed column.
        consumed_at_field: Name of the consumed timestamp column.
    """

    model: ClassVar[Any]
    consumed_field: ClassVar[str]
    consumed_at_field: ClassVar[str]

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    @property
    def _consumed(self) -> Any:
        return getattr(self.model, self.consumed_field)

    async def save(
        self,
        account_id: UUID,
        token_hash: str,
        expires_at: datetime,
    ) -> TokenRecordData:
        """Create a new unconsumed token record."""
        record = self.model(
            account_id=account_id,
            token_hash=token_hash,
            expires_at=expires_at,
            **{self.consumed_field: False},
        )
        self.session.add(record)
        await self.session.flush()
        return self._to_data(record)

    async def find_unconsumed(self) -> list[TokenRecordData]:
        """Return every not-yet-consumed record of this pool, newest first."""
        stmt = (
            select(self.model)
            .where(self._consumed.is_(False))
            .order_by(self.model.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_data(record) for record in result.scalars().all()]

    async def find_latest_for_account(self, account_id: UUID) -> TokenRecordData | None:
        """Return the most recently issued record for an account."""
        stmt = (
            select(self.model)
            .where(self.model.account_id == account_id)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        record = result.scalar_one_or_none()
        return self._to_data(record) if record else None

    async def find_active_by_id(
        self,
        token_id: UUID,
        *,
        for_update: bool = False,
    ) -> TokenRecordData | None:
        """Find an unconsumed record by ID, optionally locking the row.

        SELECT ... FOR UPDATE on PostgreSQL; SQLite ignores the lock clause.
        """
        stmt = select(self.model).where(
            self.model.id == token_id,
            self._consumed.is_(False),
        )
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        record = result.scalar_one_or_none()
        return self._to_data(record) if record else None

    async def consume(self, token_id: UUID) -> bool:
        """Flip the consumed flag if it is still false.

        Returns:
            True if this call consumed the record.
        """
        stmt = (
            update(self.model)
            .where(self.model.id == token_id, self._consumed.is_(False))
            .values(
                {
                    self.consumed_field: True,
                    self.consumed_at_field: datetime.now(UTC),
                }
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def consume_all_for_account(self, account_id: UUID) -> int:
        """Consume every live record of an account.

        Returns:
            Number of records consumed.
        """
        stmt = (
            update(self.model)
            .where(self.model.account_id == account_id, self._consumed.is_(False))
            .values(
                {
                    self.consumed_field: True,
                    self.consumed_at_field: datetime.now(UTC),
                }
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    def _to_data(self, record: Any) -> TokenRecordData:
        """Convert database model to TokenRecordData."""
        consumed_at = getattr(record, self.consumed_at_field)
        return TokenRecordData(
            id=record.id,
            account_id=record.account_id,
            token_hash=record.token_hash,
            expires_at=ensure_utc(record.expires_at),
            consumed=getattr(record, self.consumed_field),
            consumed_at=ensure_utc(consumed_at) if consumed_at else None,
            created_at=ensure_utc(record.created_at),
        )


class EmailVerificationTokenRepository(SQLAlchemyTokenRepository):
    """Email verification token pool."""

    model = EmailVerificationToken
    consumed_field = "used"
    consumed_at_field = "used_at"


class PasswordResetTokenRepository(SQLAlchemyTokenRepository):
    """Password reset token pool."""

    model = PasswordResetToken
    consumed_field = "used"
    consumed_at_field = "used_at"


class RefreshTokenRepository(SQLAlchemyTokenRepository):
    """Refresh token pool. Consuming a refresh record means revoking it."""

    model = RefreshToken
    consumed_field = "revoked"
    consumed_at_field = "revoked_at"

