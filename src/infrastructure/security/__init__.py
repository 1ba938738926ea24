"""Security adapters: bcrypt secret hashing and JWT signing."""

from src.infrastructure.security.bcrypt_secret_hasher import BcryptSecretHasher
from src.infrastructure.security.jwt_service import JWTService

__all__ = [
    "BcryptSecretHasher",
    "JWTService",
]
