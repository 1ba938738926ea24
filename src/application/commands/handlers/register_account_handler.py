"""Registration handler.

Flow:
1. Look up the account by email
2. No account:
   a. Reject a taken username
   b. Hash password, create UNVERIFIED account (role USER)
   c. Issue verification token
   d. Commit, emit UserRegistered, return registered message
3. Account exists:
   - BLOCKED -> ALREADY_EXISTS (contact support)
   - verified -> ALREADY_EXISTS (try logging in)
   - unverified, latest token live -> ALREADY_EXISTS (check your email)
   - unverified, latest token missing/expired -> issue a new token, commit,
     emit UserRegistered, return the same registered message

Architecture:
- Application layer imports from domain/core (entities, protocols, events),
  plus IntegrityError: the unique constraint has the last word on duplicates
- Repositories flush; this handler commits once and publishes afterwards
- A concurrent registration that wins the unique constraint first surfaces
  as IntegrityError; the loser rolls back and answers like a sequential
  duplicate
"""

from sqlalchemy.exc import IntegrityError
from uuid_extensions import uuid7

from src.application.commands.auth_commands import RegisterAccount
from src.application.dtos.auth_dtos import IssuedToken
from src.application.services.token_issuer import TokenIssuer
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account
from src.domain.enums import TokenPurpose
from src.domain.events.auth_events import UserRegistered
from src.domain.protocols import (
    AccountRepository,
    EventBusProtocol,
    LoggerProtocol,
    SecretHasherProtocol,
    TokenRepository,
    TransactionProtocol,
)


class RegistrationMessages:
    """Client-facing registration messages."""

    REGISTERED = "User registered successfully, Please verify your email."
    EMAIL_BLOCKED = "Email already exists, please contact support"
    EMAIL_PENDING = "Email already exists. Please check your email for verification."
    EMAIL_VERIFIED = "Email already exists, try logging in"
    USERNAME_TAKEN = "Username already exists"


class RegisterAccountHandler:
    """Handler for RegisterAccount command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        verification_token_repo: TokenRepository,
        token_issuer: TokenIssuer,
        hasher: SecretHasherProtocol,
        transaction: TransactionProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            account_repo: Account persistence.
            verification_token_repo: Verification token pool (latest-token lookup).
            token_issuer: Issues verification tokens.
            hasher: Password hashing.
            transaction: Unit of work (request-scoped session).
            event_bus: Publishes UserRegistered after commit.
            logger: Structured logger.
        """
        self._account_repo = account_repo
        self._verification_token_repo = verification_token_repo
        self._token_issuer = token_issuer
        self._hasher = hasher
        self._transaction = transaction
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: RegisterAccount) -> Result[str, DomainError]:
        """Handle registration.

        Returns:
            Success(message) on registration or re-issue.
            Failure(ConflictError) when the email or username is taken.
        """
        # Step 1: Look up existing account
        existing = await self._account_repo.find_by_email(cmd.email)
        if existing is not None:
            return await self._handle_existing(existing)

        # Step 2a: Username uniqueness
        if await self._account_repo.find_by_username(cmd.username) is not None:
            self._logger.info("registration_rejected", reason="username_taken")
            return Failure(error=_conflict(RegistrationMessages.USERNAME_TAKEN, "username"))

        # Step 2b: Create account
        account = Account(
            id=uuid7(),
            username=cmd.username,
            email=cmd.email,
            password_hash=self._hasher.hash(cmd.password),
        )

        # Step 2c: Persist account and token in one commit
        try:
            await self._account_repo.save(account)
            issued = await self._issue_and_commit(account)
        except IntegrityError:
            await self._transaction.rollback()
            return await self._handle_lost_race(cmd)

        # Step 2d: Notify
        await self._notify(account, issued)
        self._logger.info("account_registered", account_id=str(account.id))
        return Success(value=RegistrationMessages.REGISTERED)

    async def _handle_existing(self, account: Account) -> Result[str, DomainError]:
        # BLOCKED is checked before any other account state
        if account.is_blocked():
            self._logger.warning(
                "registration_rejected",
                account_id=str(account.id),
                reason="account_blocked",
            )
            return Failure(error=_conflict(RegistrationMessages.EMAIL_BLOCKED, "email"))

        if account.is_verified:
            return Failure(error=_conflict(RegistrationMessages.EMAIL_VERIFIED, "email"))

        latest = await self._verification_token_repo.find_latest_for_account(account.id)
        if latest is not None and not latest.consumed and not latest.is_expired():
            return Failure(error=_conflict(RegistrationMessages.EMAIL_PENDING, "email"))

        # Stale or missing token: behave like resend
        issued = await self._issue_and_commit(account)
        await self._notify(account, issued)
        self._logger.info(
            "verification_reissued_on_register",
            account_id=str(account.id),
        )
        return Success(value=RegistrationMessages.REGISTERED)

    async def _handle_lost_race(self, cmd: RegisterAccount) -> Result[str, DomainError]:
        self._logger.info("registration_rejected", reason="concurrent_duplicate")
        existing = await self._account_repo.find_by_email(cmd.email)
        if existing is not None:
            return await self._handle_existing(existing)
        return Failure(error=_conflict(RegistrationMessages.USERNAME_TAKEN, "username"))

    async def _issue_and_commit(self, account: Account) -> IssuedToken:
        issued = await self._token_issuer.issue(account.id, TokenPurpose.VERIFICATION)
        await self._transaction.commit()
        return issued

    async def _notify(self, account: Account, issued: IssuedToken) -> None:
        await self._event_bus.publish(
            UserRegistered(
                account_id=account.id,
                email=account.email,
                verification_token=issued.raw_secret,
            )
        )


def _conflict(message: str, field: str) -> ConflictError:
    return ConflictError(
        code=ErrorCode.ALREADY_EXISTS,
        message=message,
        resource_type="Account",
        conflicting_field=field,
    )
