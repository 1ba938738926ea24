"""Account database model.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
    - email stored lowercase and unique; lookups are case-insensitive
"""

from sqlalchemy import Boolean, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.enums import AccountStatus, UserRole
from src.infrastructure.persistence.base import BaseMutableModel


class Account(BaseMutableModel):
    """Account model for credentials and lifecycle state.

    Fields:
        id: UUIDv7 primary key (from BaseMutableModel)
        created_at / updated_at: Timestamps (from BaseMutableModel)
        username: Unique username
        email: Unique email address (lowercase)
        password_hash: Bcrypt hashed password
        is_verified: Email verification flag
        status: UNVERIFIED, ACTIVE or BLOCKED
        role: USER or ADMIN

    Relationships:
        Token tables reference accounts(id) ON DELETE CASCADE.
    """

    __tablename__ = "accounts"

    username: Mapped[str] = mapped_column(
        String(30),
        unique=True,
        nullable=False,
        comment="Unique username",
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="Unique email address (lowercase)",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password (NEVER plaintext)",
    )

    is_verified: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="Email verification status (blocks login if False)",
    )

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=AccountStatus.UNVERIFIED.value,
        comment="Lifecycle status: UNVERIFIED, ACTIVE, BLOCKED",
    )

    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=UserRole.USER.value,
        comment="Coarse-grained role: USER, ADMIN",
    )

    __table_args__ = (Index("idx_accounts_status", "status"),)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"<Account("
            f"id={self.id}, "
            f"username={self.username}, "
            f"status={self.status}"
            f")>"
        )
