"""Forgot-password handler.

The caller always gets the same success message, whether the account exists,
is missing or is blocked. Only the log records which branch ran.

Flow:
1. Find account
2. Missing or BLOCKED -> log, return generic success
3. Issue reset token, commit, emit PasswordResetRequested
4. Return generic success
"""

from src.application.commands.auth_commands import RequestPasswordReset
from src.application.services.token_issuer import TokenIssuer
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.enums import TokenPurpose
from src.domain.events.auth_events import PasswordResetRequested
from src.domain.protocols import (
    AccountRepository,
    EventBusProtocol,
    LoggerProtocol,
    TransactionProtocol,
)


class PasswordResetRequestMessages:
    """Client-facing forgot-password message (never varies)."""

    REQUESTED = (
        "If an account exists with this email, "
        "you will receive password reset instructions."
    )


class RequestPasswordResetHandler:
    """Handler for RequestPasswordReset command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        token_issuer: TokenIssuer,
        transaction: TransactionProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._token_issuer = token_issuer
        self._transaction = transaction
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: RequestPasswordReset) -> Result[str, DomainError]:
        """Handle forgot-password.

        Returns:
            Success(generic message) on every branch.
        """
        account = await self._account_repo.find_by_email(cmd.email)
        if account is None:
            self._logger.info("password_reset_skipped", reason="unknown_email")
            return Success(value=PasswordResetRequestMessages.REQUESTED)

        if account.is_blocked():
            self._logger.warning(
                "password_reset_skipped",
                account_id=str(account.id),
                reason="account_blocked",
            )
            return Success(value=PasswordResetRequestMessages.REQUESTED)

        issued = await self._token_issuer.issue(account.id, TokenPurpose.RESET)
        await self._transaction.commit()
        self._logger.info(
            "password_reset_token_issued",
            account_id=str(account.id),
            token_id=str(issued.record.id),
        )
        await self._event_bus.publish(
            PasswordResetRequested(
                account_id=account.id,
                email=account.email,
                reset_token=issued.raw_secret,
            )
        )
        return Success(value=PasswordResetRequestMessages.REQUESTED)
