"""Email verification token database model.

Security:
    - token_hash: Bcrypt hash of the emailed secret (NEVER plaintext)
    - expires_at: 15 minutes from creation by default
    - used: One-time use, flips to True exactly once
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class EmailVerificationToken(BaseModel):
    """Email verification token.

    Token Lifecycle:
        1. Issued on registration or resend
        2. Emailed to the account holder
        3. Marked used when the email is verified
        4. Left in place after expiry (never deleted)
    """

    __tablename__ = "email_verification_tokens"

    account_id: Mapped[UUID] = mapped_column(
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Account that requested verification",
    )

    token_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hash of the verification secret",
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
        comment="True once the token has verified the email",
    )

    used_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
        comment="When the token was used",
    )

    __table_args__ = (
        Index(
            "idx_email_verification_tokens_live",
            "used",
            "expires_at",
            postgresql_where="used = false",
        ),
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"<EmailVerificationToken("
            f"id={self.id}, "
            f"account_id={self.account_id}, "
            f"used={self.used}"
            f")>"
        )
