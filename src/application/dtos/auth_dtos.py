"""Credential lifecycle DTOs (Data Transfer Objects).

Result dataclasses passed between application services, handlers and the
presentation layer.

DTOs:
    - AuthTokens: Result of login and refresh
    - IssuedToken: Stored record plus the raw secret, returned once at issue
    - ValidatedToken: Matching record plus its owning account
"""

from dataclasses import dataclass

from src.domain.entities.account import Account
from src.domain.protocols.token_repository import TokenRecordData


@dataclass(frozen=True, kw_only=True)
class AuthTokens:
    """Tokens returned to the client.

    Attributes:
        access_token: JWT access token (short-lived).
        refresh_token: Signed refresh JWT referencing a stored record.
        message: Client-facing success message.
        token_type: Token type (always "bearer").
        expires_in: Access token lifetime in seconds.
    """

    access_token: str
    refresh_token: str
    message: str
    token_type: str = "bearer"
    expires_in: int = 900


@dataclass(frozen=True, kw_only=True)
class IssuedToken:
    """Freshly issued token.

    The raw secret exists only here and in the outbound event built from it.
    It is never persisted or logged.
    """

    record: TokenRecordData
    raw_secret: str

    def __repr__(self) -> str:
        return f"IssuedToken(record_id={self.record.id}, raw_secret='***')"


@dataclass(frozen=True, kw_only=True)
class ValidatedToken:
    """Token record that matched a presented secret, with its account."""

    record: TokenRecordData
    account: Account
