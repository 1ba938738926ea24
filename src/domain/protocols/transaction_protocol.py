"""Unit-of-work protocol.

Repositories only flush. A command handler ends its unit of work with a
single commit (or rollback) and publishes events afterwards.
AsyncSession satisfies this protocol structurally.
"""

from typing import Protocol


class TransactionProtocol(Protocol):
    """Transaction boundary owned by a command handler."""

    async def commit(self) -> None:
        """Commit all pending changes."""
        ...

    async def rollback(self) -> None:
        """Discard all pending changes."""
        ...
