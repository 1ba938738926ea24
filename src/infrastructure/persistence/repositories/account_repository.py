"""AccountRepository - SQLAlchemy implementation of AccountRepository protocol.

Adapter for hexagonal architecture.
Maps between the domain Account entity and the database Account model.
"""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.account import Account
from src.domain.enums import AccountStatus, UserRole
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.account import Account as AccountModel


class AccountRepository:
    """SQLAlchemy implementation of AccountRepository protocol.

    Writes are flushed, never committed; the command handler owns the
    transaction.

    Example:
        >>> repo = AccountRepository(session)
        >>> account = await repo.find_by_email("bob@x.io")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, account_id: UUID) -> Account | None:
        """Find account by ID."""
        stmt = select(AccountModel).where(AccountModel.id == account_id)
        result = await self.session.execute(stmt)
        account_model = result.scalar_one_or_none()

        if account_model is None:
            return None

        return self._to_domain(account_model)

    async def find_by_email(self, email: str) -> Account | None:
        """Find account by email address (case-insensitive).

        Uses lower() equality rather than ILIKE so "_" and "%" in addresses
        are not treated as wildcards.
        """
        stmt = select(AccountModel).where(
            func.lower(AccountModel.email) == email.lower()
        )
        result = await self.session.execute(stmt)
        account_model = result.scalar_one_or_none()

        if account_model is None:
            return None

        return self._to_domain(account_model)

    async def find_by_username(self, username: str) -> Account | None:
        """Find account by exact username."""
        stmt = select(AccountModel).where(AccountModel.username == username)
        result = await self.session.execute(stmt)
        account_model = result.scalar_one_or_none()

        if account_model is None:
            return None

        return self._to_domain(account_model)

    async def save(self, account: Account) -> None:
        """Add a new account to the unit of work.

        Raises:
            IntegrityError: If username or email already exists.
        """
        self.session.add(self._to_model(account))
        await self.session.flush()

    async def update(self, account: Account) -> None:
        """Copy mutable fields of the entity onto the stored row.

        Raises:
            NoResultFound: If the account doesn't exist.
        """
        stmt = select(AccountModel).where(AccountModel.id == account.id)
        result = await self.session.execute(stmt)
        account_model = result.scalar_one()

        account_model.email = account.email
        account_model.password_hash = account.password_hash
        account_model.is_verified = account.is_verified
        account_model.status = account.status.value
        account_model.role = account.role.value
        account_model.updated_at = account.updated_at

        await self.session.flush()

    def _to_domain(self, account_model: AccountModel) -> Account:
        """Convert database model to domain entity."""
        return Account(
            id=account_model.id,
            username=account_model.username,
            email=account_model.email,
            password_hash=account_model.password_hash,
            is_verified=account_model.is_verified,
            status=AccountStatus(account_model.status),
            role=UserRole(account_model.role),
            created_at=ensure_utc(account_model.created_at),
            updated_at=ensure_utc(account_model.updated_at),
        )

    def _to_model(self, account: Account) -> AccountModel:
        """Convert domain entity to database model."""
        return AccountModel(
            id=account.id,
            username=account.username,
            email=account.email,
            password_hash=account.password_hash,
            is_verified=account.is_verified,
            status=account.status.value,
            role=account.role.value,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )
