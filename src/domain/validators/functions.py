"""Centralized validation functions.

Validation logic is defined once and reused through the Annotated types in
src/domain/types.py. Validators are pure functions that raise ValueError on
validation failure.
"""

import re

from email_validator import EmailNotValidError
from email_validator import validate_email as _check_email

# bcrypt only reads the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72

_USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9._-]+$")


def validate_email(v: str) -> str:
    """Validate email format and normalize to lowercase.

    Args:
        v: Email address to validate.

    Returns:
        Normalized email (lowercase).

    Raises:
        ValueError: If email format is invalid.

    Example:
        >>> validate_email("Bob@X.io")
        'bob@x.io'
    """
    try:
        validated = _check_email(v.strip(), check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"Invalid email format: {e}") from e
    return validated.normalized.lower()


def validate_username(v: str) -> str:
    """Validate username characters.

    Length (3-30) is enforced by the Field constraints on the Username type.

    Raises:
        ValueError: If the username contains anything but letters, digits,
            dots, underscores or hyphens.
    """
    if not _USERNAME_PATTERN.match(v):
        raise ValueError(
            "Username may only contain letters, digits, dots, underscores and hyphens"
        )
    return v


def validate_password(v: str) -> str:
    """Validate password length in bytes.

    Args:
        v: Password to validate.

    Returns:
        Password unchanged (validation only).

    Raises:
        ValueError: If the UTF-8 encoding exceeds bcrypt's 72-byte input.

    Example:
        >>> validate_password("Password123")
        'Password123'
    """
    if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise ValueError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes")
    return v


def validate_token_format(v: str) -> str:
    """Validate a raw token secret or JWT is non-blank and single-line.

    Raises:
        ValueError: If the token is empty or contains whitespace.
    """
    if not v or not v.strip():
        raise ValueError("Token cannot be empty")
    if any(c.isspace() for c in v):
        raise ValueError("Token must not contain whitespace")
    return v
