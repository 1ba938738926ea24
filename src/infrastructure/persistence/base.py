"""Base model and mixins for all database entities.

This module provides:
- BaseModel: Base class for ALL models (provides id, created_at)
- TimestampMixin: Adds updated_at for mutable rows
- BaseMutableModel: Base for mutable models (accounts)
- ensure_utc: Normalizes datetimes read back from the database

Domain entities do NOT inherit from these classes; repositories map between
the two.

Architecture:
    BaseModel (id, created_at)
        ├── BaseMutableModel (+ updated_at)
        │   └── AccountModel
        └── token models (immutable apart from the consumed flag)
            ├── EmailVerificationTokenModel
            ├── PasswordResetTokenModel
            └── RefreshTokenModel
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes.

    SQLite drops timezone information on round trip; PostgreSQL returns
    aware values, which pass through unchanged.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides:
        - id: UUIDv7 primary key (time-ordered)
        - created_at: Creation timestamp (UTC, set by the application so
          ordering keeps sub-second precision on every backend)
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary (for debugging/logging)."""
        return {
            "id": str(self.id),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class TimestampMixin:
    """Mixin for mutable models that track updates."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
    )

    def to_dict(self) -> dict[str, Any]:
        """Extend BaseModel.to_dict() with updated_at."""
        data: dict[str, Any] = super().to_dict()  # type: ignore[misc]
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable database models.

    Provides id, created_at and updated_at with the mixin order fixed here.
    """

    __abstract__ = True
