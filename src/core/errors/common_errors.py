"""Common error classes used across all layers.

Error Types:
- ValidationError: Input validation failures
- NotFoundError: Account not found (never used for credential checks)
- ConflictError: Duplicate email/username
- AuthenticationError: Bad credentials, invalid or expired tokens
- AuthorizationError: Account state forbids the operation (blocked, unverified)

Usage:
    from src.core.errors import AuthenticationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=AuthenticationError(
        code=ErrorCode.TOKEN_EXPIRED,
        message="Reset token has expired. Please request a new one.",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Account).
        resource_id: Lookup key that matched nothing (email, id).
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate email or username).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has the conflict.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (invalid credentials, invalid or expired token)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Account state forbids the operation (blocked, unverified, already verified).

    Attributes:
        account_status: Status of the account at the time of the check.
    """

    account_status: str | None = None
