"""Reset password handler.

Flow:
1. Validator resolves the secret in the reset pool across all accounts
   (TOKEN_INVALID, TOKEN_EXPIRED, ACCOUNT_BLOCKED)
2. Consume the record (losing a race -> TOKEN_INVALID)
3. Hash and store the new password
4. Revoke every live refresh token of the account
5. Commit, emit PasswordResetCompleted
"""

from dataclasses import replace

from src.application.commands.auth_commands import ResetPassword
from src.application.services.token_validator import TokenValidator
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.enums import TokenPurpose
from src.domain.events.auth_events import PasswordResetCompleted
from src.domain.protocols import (
    AccountRepository,
    EventBusProtocol,
    LoggerProtocol,
    SecretHasherProtocol,
    TokenRepository,
    TransactionProtocol,
)


class PasswordResetMessages:
    """Client-facing reset-password messages."""

    RESET = (
        "Password has been reset successfully. "
        "You can now login with your new password."
    )
    TOKEN_INVALID = "Invalid or already used reset token"
    TOKEN_EXPIRED = "Reset token has expired. Please request a new one."


_FAILURE_MESSAGES = {
    ErrorCode.TOKEN_INVALID: PasswordResetMessages.TOKEN_INVALID,
    ErrorCode.TOKEN_EXPIRED: PasswordResetMessages.TOKEN_EXPIRED,
}


class ResetPasswordHandler:
    """Handler for ResetPassword command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        reset_token_repo: TokenRepository,
        refresh_token_repo: TokenRepository,
        token_validator: TokenValidator,
        hasher: SecretHasherProtocol,
        transaction: TransactionProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._reset_token_repo = reset_token_repo
        self._refresh_token_repo = refresh_token_repo
        self._token_validator = token_validator
        self._hasher = hasher
        self._transaction = transaction
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: ResetPassword) -> Result[str, DomainError]:
        """Handle reset-password."""
        # Step 1: Resolve token
        result = await self._token_validator.validate(cmd.token, TokenPurpose.RESET)
        if isinstance(result, Failure):
            error = result.error
            self._logger.info("password_reset_failed", reason=error.code.value)
            return Failure(
                error=replace(error, message=_FAILURE_MESSAGES.get(error.code, error.message))
            )

        validated = result.value
        account = validated.account

        # Step 2: Consume (single winner)
        if not await self._reset_token_repo.consume(validated.record.id):
            await self._transaction.rollback()
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message=PasswordResetMessages.TOKEN_INVALID,
                )
            )

        # Step 3: New password
        account.change_password(self._hasher.hash(cmd.new_password))
        await self._account_repo.update(account)

        # Step 4: End existing sessions
        revoked = await self._refresh_token_repo.consume_all_for_account(account.id)

        # Step 5: Commit, then notify
        await self._transaction.commit()
        self._logger.info(
            "password_reset",
            account_id=str(account.id),
            revoked_refresh_tokens=revoked,
        )
        await self._event_bus.publish(
            PasswordResetCompleted(account_id=account.id, revoked_refresh_tokens=revoked)
        )
        return Success(value=PasswordResetMessages.RESET)
