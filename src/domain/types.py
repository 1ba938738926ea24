"""Annotated types with centralized validation.

Define validation once, use everywhere (commands and request schemas).

Usage:
    from src.domain.types import Email, Password, Username

    class RegisterRequest(BaseModel):
        username: Username
        email: Email
        password: Password
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from src.domain.validators import (
    validate_email,
    validate_password,
    validate_token_format,
    validate_username,
)

Email = Annotated[
    str,
    Field(
        min_length=3,
        max_length=255,
        description="Email address",
        examples=["bob@example.com"],
    ),
    AfterValidator(validate_email),
]
"""Email address, validated and normalized to lowercase.

Examples:
    >>> class Req(BaseModel):
    ...     email: Email
    >>> Req(email="Bob@Example.COM").email
    'bob@example.com'
"""

Username = Annotated[
    str,
    Field(
        min_length=3,
        max_length=30,
        description="Unique username",
        examples=["bob"],
    ),
    AfterValidator(validate_username),
]
"""Username: 3-30 characters, letters, digits, dots, underscores, hyphens."""

Password = Annotated[
    str,
    Field(
        min_length=8,
        max_length=72,
        description="Account password",
        examples=["Password123"],
    ),
    AfterValidator(validate_password),
]
"""Password: 8-72 characters and at most 72 UTF-8 bytes (bcrypt input limit)."""

RawToken = Annotated[
    str,
    Field(
        min_length=1,
        max_length=2048,
        description="Raw token secret or signed refresh token",
    ),
    AfterValidator(validate_token_format),
]
"""Opaque token string as received from a client (emailed secret or JWT)."""
