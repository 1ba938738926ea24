"""Application services shared by command handlers."""

from src.application.services.token_issuer import TokenIssuer, TokenLifetimes
from src.application.services.token_validator import TokenValidator

__all__ = [
    "TokenIssuer",
    "TokenLifetimes",
    "TokenValidator",
]
