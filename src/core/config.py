"""
Service configuration loaded from the environment.

One flat pydantic-settings model. Token lifetimes, the bcrypt cost and the
JWT secret are all configuration so tests and deployments can tune them
without code changes.

Usage:
    from src.core.config import settings

    lifetime = settings.reset_token_expire_minutes
    if settings.is_production:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment


class Settings(BaseSettings):
    """
    Credential lifecycle settings.

    Values come from environment variables (or a local .env file). Secrets
    and the database URL have no defaults and must be provided.
    """

    # Runtime
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Deployment environment: development, testing, ci or production",
    )
    debug: bool = Field(
        default=False,
        description="FastAPI debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum structlog level",
    )
    app_name: str = Field(
        default="Credential Lifecycle Service",
        description="Service name shown in OpenAPI and on GET /",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Service version shown in OpenAPI and on GET /",
    )

    # Persistence
    database_url: str = Field(
        description="Async SQLAlchemy URL (postgresql+asyncpg://... or sqlite+aiosqlite://...)",
    )
    db_echo: bool = Field(
        default=False,
        description="Echo every SQL statement",
    )
    db_create_tables: bool = Field(
        default=False,
        description="Run metadata.create_all() at startup",
    )

    # Signing and hashing
    secret_key: str = Field(
        description="HMAC key for access and refresh JWTs (32+ characters)",
    )
    algorithm: str = Field(
        default="HS256",
        description="JWT algorithm",
    )
    bcrypt_rounds: int = Field(
        default=12,
        description="bcrypt cost for passwords and token secrets",
    )

    # Token lifetimes
    access_token_expire_minutes: int = Field(
        default=15,
        description="Access JWT lifetime (minutes)",
    )
    refresh_token_expire_days: int = Field(
        default=30,
        description="Refresh record and refresh JWT lifetime (days)",
    )
    verification_token_expire_minutes: int = Field(
        default=15,
        description="Verification secret lifetime (minutes)",
    )
    reset_token_expire_minutes: int = Field(
        default=30,
        description="Password reset secret lifetime (minutes)",
    )

    # HTTP surface
    api_base_url: str = Field(
        default="http://localhost:8000",
        description="Prefix of RFC 9457 problem type URIs",
    )
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="Mount point of the v1 routers",
    )
    verification_url_base: str = Field(
        default="http://localhost:3000",
        description="Frontend origin used in emailed verification and reset links",
    )
    cors_origins: str = Field(
        default="*",
        description="Comma-separated allowed origins",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """Reject signing keys shorter than 256 bits.

        Raises:
            ValueError: If the key has fewer than 32 characters.
        """
        if len(v) < 32:
            raise ValueError("secret_key must be at least 32 characters")
        return v

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """bcrypt only accepts log2 costs from 4 to 31."""
        if v < 4 or v > 31:
            raise ValueError("bcrypt_rounds must be between 4 and 31")
        return v

    @field_validator(
        "access_token_expire_minutes",
        "refresh_token_expire_days",
        "verification_token_expire_minutes",
        "reset_token_expire_minutes",
    )
    @classmethod
    def validate_positive_lifetime(cls, v: int) -> int:
        """Token lifetimes must be positive."""
        if v <= 0:
            raise ValueError("token lifetimes must be positive")
        return v

    @field_validator("api_base_url", "verification_url_base")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Links are built as f"{base}/path", so the base never ends in "/"."""
        return v.rstrip("/")

    @property
    def cors_origin_list(self) -> list[str]:
        """cors_origins split on commas, blanks dropped."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def is_development(self) -> bool:
        return self.environment is Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        return self.environment is Environment.TESTING

    @property
    def is_ci(self) -> bool:
        return self.environment is Environment.CI

    @property
    def is_production(self) -> bool:
        return self.environment is Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """Settings are read from the environment once per process."""
    return Settings()  # type: ignore[call-arg]  # populated from env


settings = get_settings()
