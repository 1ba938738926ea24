"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.account import Account

__all__ = [
    "Account",
]
