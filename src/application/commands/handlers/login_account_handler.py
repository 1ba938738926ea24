"""Login handler.

Flow:
1. Find account by email (unknown -> INVALID_CREDENTIALS)
2. BLOCKED -> ACCOUNT_BLOCKED
3. Verify password (mismatch -> INVALID_CREDENTIALS)
4. Unverified -> EMAIL_NOT_VERIFIED
5. Sign access JWT, issue refresh record, sign refresh JWT carrying its id
   and raw secret
6. Commit, emit UserLoggedIn, return tokens

Unknown email and wrong password share one message so login cannot be used
to probe which emails are registered. The unknown-email branch also runs one
hash verification against a placeholder digest so both branches cost the
same bcrypt work.
"""

from functools import lru_cache

from src.application.commands.auth_commands import LoginAccount
from src.application.dtos.auth_dtos import AuthTokens
from src.application.services.token_issuer import TokenIssuer
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, AuthorizationError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.enums import TokenPurpose
from src.domain.events.auth_events import UserLoggedIn
from src.domain.protocols import (
    AccountRepository,
    EventBusProtocol,
    LoggerProtocol,
    SecretHasherProtocol,
    TokenGenerationProtocol,
    TransactionProtocol,
)

_PLACEHOLDER_SECRET = "no-such-account"


class LoginMessages:
    """Client-facing login messages."""

    SUCCESS = "Login successful"
    INVALID_CREDENTIALS = "Invalid email or password"
    ACCOUNT_BLOCKED = "Your account has been blocked. Please contact support."
    EMAIL_NOT_VERIFIED = (
        "Please verify your email before logging in. "
        "Check your inbox for verification link."
    )


class LoginAccountHandler:
    """Handler for LoginAccount command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        token_issuer: TokenIssuer,
        hasher: SecretHasherProtocol,
        token_service: TokenGenerationProtocol,
        transaction: TransactionProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
        access_token_expire_minutes: int = 15,
    ) -> None:
        self._account_repo = account_repo
        self._token_issuer = token_issuer
        self._hasher = hasher
        self._token_service = token_service
        self._transaction = transaction
        self._event_bus = event_bus
        self._logger = logger
        self._expires_in = access_token_expire_minutes * 60

    async def handle(self, cmd: LoginAccount) -> Result[AuthTokens, DomainError]:
        """Handle login.

        Returns:
            Success(AuthTokens) or Failure with INVALID_CREDENTIALS,
            ACCOUNT_BLOCKED or EMAIL_NOT_VERIFIED.
        """
        # Step 1: Find account
        account = await self._account_repo.find_by_email(cmd.email)
        if account is None:
            self._hasher.verify(cmd.password, _placeholder_digest(self._hasher))
            self._logger.info("login_failed", reason="unknown_email")
            return Failure(error=_invalid_credentials())

        # Step 2: Blocked overrides everything else
        if account.is_blocked():
            self._logger.warning(
                "login_failed",
                account_id=str(account.id),
                reason="account_blocked",
            )
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.ACCOUNT_BLOCKED,
                    message=LoginMessages.ACCOUNT_BLOCKED,
                    account_status=account.status.value,
                )
            )

        # Step 3: Password
        if not self._hasher.verify(cmd.password, account.password_hash):
            self._logger.info(
                "login_failed",
                account_id=str(account.id),
                reason="invalid_password",
            )
            return Failure(error=_invalid_credentials())

        # Step 4: Email verification
        if not account.is_verified:
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.EMAIL_NOT_VERIFIED,
                    message=LoginMessages.EMAIL_NOT_VERIFIED,
                    account_status=account.status.value,
                )
            )

        # Step 5: Tokens
        access_token = self._token_service.generate_access_token(
            account_id=account.id,
            email=account.email,
            username=account.username,
            role=account.role.value,
        )
        issued = await self._token_issuer.issue(account.id, TokenPurpose.REFRESH)
        refresh_token = self._token_service.generate_refresh_token(
            account_id=account.id,
            token_id=issued.record.id,
            secret=issued.raw_secret,
        )

        # Step 6: Commit, then notify
        await self._transaction.commit()
        self._logger.info(
            "login_succeeded",
            account_id=str(account.id),
            refresh_token_id=str(issued.record.id),
        )
        await self._event_bus.publish(
            UserLoggedIn(account_id=account.id, email=account.email)
        )

        return Success(
            value=AuthTokens(
                access_token=access_token,
                refresh_token=refresh_token,
                message=LoginMessages.SUCCESS,
                expires_in=self._expires_in,
            )
        )


@lru_cache(maxsize=4)
def _placeholder_digest(hasher: SecretHasherProtocol) -> str:
    """Digest at the hasher's configured cost, computed once per hasher."""
    return hasher.hash(_PLACEHOLDER_SECRET)


def _invalid_credentials() -> AuthenticationError:
    return AuthenticationError(
        code=ErrorCode.INVALID_CREDENTIALS,
        message=LoginMessages.INVALID_CREDENTIALS,
    )
