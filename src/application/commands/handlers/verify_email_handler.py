"""Email verification handler.

Flow:
1. Validator resolves the secret in the verification pool
   (TOKEN_INVALID, TOKEN_EXPIRED, ACCOUNT_BLOCKED)
2. Already verified -> idempotent success, nothing changes
3. Consume the record (conditional update; losing a race -> TOKEN_INVALID)
4. Mark account verified and ACTIVE
5. Commit, emit EmailVerified
"""

from dataclasses import replace

from src.application.commands.auth_commands import VerifyEmail
from src.application.services.token_validator import TokenValidator
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.enums import TokenPurpose
from src.domain.events.auth_events import EmailVerified
from src.domain.protocols import (
    AccountRepository,
    EventBusProtocol,
    LoggerProtocol,
    TokenRepository,
    TransactionProtocol,
)


class VerificationMessages:
    """Client-facing email verification messages."""

    VERIFIED = "Email verified successfully! You can now login."
    ALREADY_VERIFIED = "Email is already verified. You can login now."
    TOKEN_INVALID = "Invalid or already used verification token"
    TOKEN_EXPIRED = "Verification token has expired. Please request a new one."


_FAILURE_MESSAGES = {
    ErrorCode.TOKEN_INVALID: VerificationMessages.TOKEN_INVALID,
    ErrorCode.TOKEN_EXPIRED: VerificationMessages.TOKEN_EXPIRED,
}


class VerifyEmailHandler:
    """Handler for VerifyEmail command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        verification_token_repo: TokenRepository,
        token_validator: TokenValidator,
        transaction: TransactionProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._verification_token_repo = verification_token_repo
        self._token_validator = token_validator
        self._transaction = transaction
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: VerifyEmail) -> Result[str, DomainError]:
        """Handle email verification.

        Returns:
            Success(message), including the idempotent already-verified case.
        """
        # Step 1: Resolve token
        result = await self._token_validator.validate(cmd.token, TokenPurpose.VERIFICATION)
        if isinstance(result, Failure):
            error = result.error
            self._logger.info("email_verification_failed", reason=error.code.value)
            return Failure(
                error=replace(error, message=_FAILURE_MESSAGES.get(error.code, error.message))
            )

        validated = result.value
        account = validated.account

        # Step 2: Idempotent success
        if account.is_verified:
            return Success(value=VerificationMessages.ALREADY_VERIFIED)

        # Step 3: Consume (single winner)
        if not await self._verification_token_repo.consume(validated.record.id):
            await self._transaction.rollback()
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message=VerificationMessages.TOKEN_INVALID,
                )
            )

        # Step 4: Activate
        account.verify()
        await self._account_repo.update(account)

        # Step 5: Commit, then notify
        await self._transaction.commit()
        self._logger.info("email_verified", account_id=str(account.id))
        await self._event_bus.publish(
            EmailVerified(account_id=account.id, email=account.email)
        )
        return Success(value=VerificationMessages.VERIFIED)
