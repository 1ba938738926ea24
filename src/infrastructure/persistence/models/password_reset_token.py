"""Password reset token database model.

Security:
    - token_hash: Bcrypt hash of the emailed secret (NEVER plaintext)
    - expires_at: 30 minutes from creation by default
    - used: One-time use
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class PasswordResetToken(BaseModel):
    """Password reset token issued by forgot-password."""

    __tablename__ = "password_reset_tokens"

    account_id: Mapped[UUID] = mapped_column(
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Account whose password may be reset",
    )

    token_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hash of the reset secret",
    )

    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Expiration timestamp",
    )

    used: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="True once the password has been reset with this token",
    )

    used_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
        comment="When the token was used",
    )

    __table_args__ = (
        Index(
            "idx_password_reset_tokens_live",
            "used",
            "expires_at",
            postgresql_where="used = false",
        ),
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<PasswordResetToken(id={self.id}, account_id={self.account_id}, used={self.used})>"
