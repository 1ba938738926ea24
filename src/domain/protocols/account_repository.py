"""AccountRepository protocol for account persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.account import Account


class AccountRepository(Protocol):
    """Account repository protocol (port).

    Implementations flush but never commit; the calling handler owns the
    transaction.

    Methods:
        find_by_id: Retrieve account by ID
        find_by_email: Retrieve account by email (case-insensitive)
        find_by_username: Retrieve account by username
        save: Create new account
        update: Persist changes to an existing account
    """

    async def find_by_id(self, account_id: UUID) -> Account | None:
        """Find account by ID.

        Args:
            account_id: Account's unique identifier.

        Returns:
            Account if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> Account | None:
        """Find account by email address.

        Email comparison is case-insensitive.

        Args:
            email: Email address.

        Returns:
            Account if found, None otherwise.
        """
        ...

    async def find_by_username(self, username: str) -> Account | None:
        """Find account by exact username."""
        ...

    async def save(self, account: Account) -> None:
        """Create a new account.

        Args:
            account: Account entity to persist.
        """
        ...

    async def update(self, account: Account) -> None:
        """Update an existing account.

        Args:
            account: Account entity with modified fields.

        Raises:
            NoResultFound: If the account doesn't exist.
        """
        ...
