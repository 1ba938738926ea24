"""Validators package exports."""

from src.domain.validators.functions import (
    BCRYPT_MAX_BYTES,
    validate_email,
    validate_password,
    validate_token_format,
    validate_username,
)

__all__ = [
    "BCRYPT_MAX_BYTES",
    "validate_email",
    "validate_password",
    "validate_token_format",
    "validate_username",
]
