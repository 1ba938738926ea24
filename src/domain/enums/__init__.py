"""Domain enums for business logic.

Available Enums:
    - AccountStatus: Account lifecycle status (UNVERIFIED, ACTIVE, BLOCKED)
    - UserRole: Coarse-grained role carried in access tokens
    - TokenPurpose: Which token pool a record belongs to
"""

from src.domain.enums.account_status import AccountStatus
from src.domain.enums.token_purpose import TokenPurpose
from src.domain.enums.user_role import UserRole

__all__ = [
    "AccountStatus",
    "TokenPurpose",
    "UserRole",
]
