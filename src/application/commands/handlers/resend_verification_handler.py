"""Resend verification handler.

Flow:
1. Find account (unknown -> NOT_FOUND)
2. BLOCKED -> ACCOUNT_BLOCKED
3. Verified -> EMAIL_ALREADY_VERIFIED
4. Always issue a new token; an existing live one is only logged
5. Commit, emit EmailVerificationResent
"""

from src.application.commands.auth_commands import ResendVerification
from src.application.services.token_issuer import TokenIssuer
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.enums import TokenPurpose
from src.domain.events.auth_events import EmailVerificationResent
from src.domain.protocols import (
    AccountRepository,
    EventBusProtocol,
    LoggerProtocol,
    TokenRepository,
    TransactionProtocol,
)


class ResendMessages:
    """Client-facing resend-verification messages."""

    SENT = "Verification email has been sent. Please check your inbox."
    NOT_FOUND = "No account found with this email"
    ACCOUNT_BLOCKED = "Your account has been blocked. Please contact support."
    ALREADY_VERIFIED = "Email is already verified. Please login."


class ResendVerificationHandler:
    """Handler for ResendVerification command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        verification_token_repo: TokenRepository,
        token_issuer: TokenIssuer,
        transaction: TransactionProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._verification_token_repo = verification_token_repo
        self._token_issuer = token_issuer
        self._transaction = transaction
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: ResendVerification) -> Result[str, DomainError]:
        """Handle resend-verification."""
        account = await self._account_repo.find_by_email(cmd.email)
        if account is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.NOT_FOUND,
                    message=ResendMessages.NOT_FOUND,
                    resource_type="Account",
                    resource_id=cmd.email,
                )
            )

        if account.is_blocked():
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.ACCOUNT_BLOCKED,
                    message=ResendMessages.ACCOUNT_BLOCKED,
                    account_status=account.status.value,
                )
            )

        if account.is_verified:
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.EMAIL_ALREADY_VERIFIED,
                    message=ResendMessages.ALREADY_VERIFIED,
                    account_status=account.status.value,
                )
            )

        latest = await self._verification_token_repo.find_latest_for_account(account.id)
        if latest is not None and not latest.consumed and not latest.is_expired():
            self._logger.info(
                "verification_token_still_live",
                account_id=str(account.id),
                token_id=str(latest.id),
            )

        issued = await self._token_issuer.issue(account.id, TokenPurpose.VERIFICATION)
        await self._transaction.commit()
        self._logger.info(
            "verification_resent",
            account_id=str(account.id),
            token_id=str(issued.record.id),
        )
        await self._event_bus.publish(
            EmailVerificationResent(
                account_id=account.id,
                email=account.email,
                verification_token=issued.raw_secret,
            )
        )
        return Success(value=ResendMessages.SENT)
