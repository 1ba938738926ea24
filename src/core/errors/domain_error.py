"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for every flow-level failure. Errors flow
through the system as data (inside Failure), not as raised exceptions.

Architecture:
- Does NOT inherit from Exception (returned in Result, never raised)
- Uses dataclass inheritance (NOT Protocol/ABC)
- `message` is the client-facing text; keep secrets and internals out of it

Usage:
    from src.core.errors import DomainError
    from src.core.enums import ErrorCode

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message, safe to show to clients.
        details: Optional context for debugging and logs.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
