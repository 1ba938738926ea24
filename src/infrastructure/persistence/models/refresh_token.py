"""Refresh token database model.

Security:
    - token_hash: Bcrypt hash of a random secret bound to the record
    - expires_at: 30 days from creation by default
    - revoked: Set on rotation, logout, password reset or expiry detection
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class RefreshToken(BaseModel):
    """Refresh token record referenced by refresh JWTs (token_id claim).

    Token Lifecycle:
        1. Created on login
        2. Revoked and replaced on every refresh (rotation)
        3. Revoked on logout or password reset
        4. Revoked when presented after expiry

    Indexes:
        - idx_refresh_tokens_account_live: (account_id, revoked) for bulk
          revocation of an account's live tokens
    """

    __tablename__ = "refresh_tokens"

    account_id: Mapped[UUID] = mapped_column(
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Account that owns this refresh token",
    )

    token_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed refresh secret (NEVER plaintext)",
    )

    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        comment="Expiration timestamp",
    )

    revoked: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="True once rotated, logged out or otherwise revoked",
    )

    revoked_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
        comment="When the token was revoked",
    )

    __table_args__ = (
        Index(
            "idx_refresh_tokens_account_live",
            "account_id",
            "revoked",
            postgresql_where="revoked = false",
        ),
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"<RefreshToken("
            f"id={self.id}, "
            f"account_id={self.account_id}, "
            f"expires_at={self.expires_at}, "
            f"revoked={self.revoked}"
            f")>"
        )
