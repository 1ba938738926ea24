"""Application DTOs."""

from src.application.dtos.auth_dtos import AuthTokens, IssuedToken, ValidatedToken

__all__ = [
    "AuthTokens",
    "IssuedToken",
    "ValidatedToken",
]
