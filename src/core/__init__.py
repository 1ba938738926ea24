"""Core shared kernel.

Foundational pieces used by every layer:
- Result types for railway-oriented programming
- DomainError hierarchy and machine-readable error codes
- Settings

The core package has NO dependencies on other application layers.
"""

from src.core.enums import ErrorCode
from src.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.core.result import Failure, Result, Success

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
]
