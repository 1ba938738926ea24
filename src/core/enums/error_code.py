"""Domain-level error codes (machine-readable).

Used with Result types for railway-oriented programming. Every code maps to
exactly one HTTP status in the presentation layer (see ErrorResponseBuilder).

Categories:
- Validation errors (VALIDATION_FAILED)
- Resource errors (NOT_FOUND)
- Conflict errors (ALREADY_EXISTS)
- Authentication errors (INVALID_CREDENTIALS, TOKEN_*)
- Account state errors (ACCOUNT_BLOCKED, EMAIL_NOT_VERIFIED, EMAIL_ALREADY_VERIFIED)
- Internal errors (INTERNAL)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"

    # Resource errors (account lookups only, never credential checks)
    NOT_FOUND = "not_found"

    # Conflict errors
    ALREADY_EXISTS = "already_exists"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    TOKEN_INVALID = "token_invalid"
    TOKEN_EXPIRED = "token_expired"

    # Account state errors
    ACCOUNT_BLOCKED = "account_blocked"
    EMAIL_NOT_VERIFIED = "email_not_verified"
    EMAIL_ALREADY_VERIFIED = "email_already_verified"

    # Catch-all
    INTERNAL = "internal"
