"""Coarse-grained account roles.

The role travels in the access token `role` claim so downstream services
(behind the gateway) can make authorization decisions without calling back.

Usage:
    from src.domain.enums import UserRole

    if account.role == UserRole.ADMIN:
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """Account roles.

    New accounts are always created as USER. ADMIN is assigned out of band.
    """

    USER = "USER"
    ADMIN = "ADMIN"

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: List of role values ['USER', 'ADMIN'].
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid role.
        """
        return value in cls.values()
