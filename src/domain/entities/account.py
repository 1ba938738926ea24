"""Account domain entity.

Pure business logic, no framework dependencies.

Lifecycle:
    UNVERIFIED --verify()--> ACTIVE
    any        --block()---> BLOCKED

Invariant:
    status == ACTIVE implies is_verified. BLOCKED overrides every other
    check and stops every lifecycle flow.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from src.domain.enums import AccountStatus, UserRole


@dataclass
class Account:
    """Account domain entity with credential lifecycle rules.

    Represents an identity that can register, verify its email, log in and
    reset its password. The password is only ever held as a bcrypt hash.

    Business Rules:
        - New accounts start UNVERIFIED with role USER
        - Email verification moves the account to ACTIVE
        - Login requires a verified, non-blocked account
        - A blocked account cannot be unblocked by any lifecycle flow

    Attributes:
        id: Unique account identifier (UUIDv7).
        username: Unique username (3-30 characters).
        email: Unique email, stored lowercase.
        password_hash: Bcrypt hash of the password (never plaintext).
        is_verified: Email verification flag.
        status: Lifecycle status.
        role: Coarse-grained role carried in access tokens.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.

    Example:
        >>> account = Account(
        ...     id=uuid7(),
        ...     username="bob",
        ...     email="bob@x.io",
        ...     password_hash="$2b$12$...",
        ... )
        >>> account.status
        <AccountStatus.UNVERIFIED: 'UNVERIFIED'>
        >>> account.verify()
        >>> account.is_verified
        True
    """

    id: UUID
    username: str
    email: str
    password_hash: str
    is_verified: bool = False
    status: AccountStatus = AccountStatus.UNVERIFIED
    role: UserRole = UserRole.USER
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_blocked(self) -> bool:
        """Check if the account has been blocked by moderation."""
        return self.status == AccountStatus.BLOCKED

    def verify(self) -> None:
        """Mark the email as verified and activate the account.

        Side Effects:
            - Sets is_verified to True
            - Sets status to ACTIVE
            - Touches updated_at

        Raises:
            ValueError: If the account is blocked.

        Example:
            >>> account.verify()
            >>> account.is_verified, account.status
            (True, <AccountStatus.ACTIVE: 'ACTIVE'>)
        """
        if self.is_blocked():
            raise ValueError("Blocked accounts cannot be verified")
        self.is_verified = True
        self.status = AccountStatus.ACTIVE
        self._touch()

    def block(self) -> None:
        """Block the account (external moderation action).

        Blocking is terminal for every lifecycle flow. Verification state is
        left untouched.
        """
        self.status = AccountStatus.BLOCKED
        self._touch()

    def change_password(self, password_hash: str) -> None:
        """Replace the stored password hash.

        Args:
            password_hash: Bcrypt hash of the new password.
        """
        self.password_hash = password_hash
        self._touch()

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)
