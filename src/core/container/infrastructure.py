"""Infrastructure factories.

Process-wide singletons (cached with lru_cache) for the database, the
bcrypt hasher, the JWT service and the logger, plus the per-request
session dependency.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.secret_hasher_protocol import SecretHasherProtocol
    from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol


# ============================================================================
# Persistence
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Engine owner shared by every request."""
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """One session per request.

    Command handlers commit it themselves. Whatever they leave uncommitted
    is discarded on close.

    Usage:
        @router.post("/users")
        async def create_user(session: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with get_database().get_session() as session:
        yield session


# ============================================================================
# Security
# ============================================================================


@lru_cache()
def get_secret_hasher() -> "SecretHasherProtocol":
    """bcrypt hasher for passwords and opaque token secrets (BCRYPT_ROUNDS)."""
    from src.infrastructure.security import BcryptSecretHasher

    return BcryptSecretHasher(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """JWT signer for access and refresh tokens."""
    from src.infrastructure.security import JWTService

    return JWTService(
        secret_key=settings.secret_key,
        access_expiration_minutes=settings.access_token_expire_minutes,
        refresh_expiration_days=settings.refresh_token_expire_days,
        algorithm=settings.algorithm,
    )


# ============================================================================
# Logging
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """structlog console logger; JSON output outside development."""
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )
