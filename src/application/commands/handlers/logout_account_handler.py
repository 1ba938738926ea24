"""Logout handler.

Flow:
1. Verify the refresh JWT (forged or malformed -> TOKEN_INVALID)
2. Revoke the referenced record if still live
3. Commit, emit UserLoggedOut

Idempotent: unknown, expired or already revoked tokens still succeed.
"""

from uuid import UUID

from src.application.commands.auth_commands import LogoutAccount
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.events.auth_events import UserLoggedOut
from src.domain.protocols import (
    EventBusProtocol,
    LoggerProtocol,
    TokenGenerationProtocol,
    TokenRepository,
    TransactionProtocol,
)


class LogoutMessages:
    """Client-facing logout messages."""

    LOGGED_OUT = "Logged out successfully"
    INVALID = "Invalid refresh token"


class LogoutAccountHandler:
    """Handler for LogoutAccount command."""

    def __init__(
        self,
        refresh_token_repo: TokenRepository,
        token_service: TokenGenerationProtocol,
        transaction: TransactionProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._refresh_token_repo = refresh_token_repo
        self._token_service = token_service
        self._transaction = transaction
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: LogoutAccount) -> Result[str, DomainError]:
        """Handle logout."""
        claims_result = self._token_service.decode_refresh_token(cmd.refresh_token)
        # An expired JWT outlived its record; there is nothing left to revoke
        if isinstance(claims_result, Failure) and claims_result.error != "expired":
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message=LogoutMessages.INVALID,
                )
            )
        if isinstance(claims_result, Failure):
            self._logger.info("logout_with_expired_token")
            return Success(value=LogoutMessages.LOGGED_OUT)

        claims = claims_result.value
        try:
            token_id = UUID(claims["token_id"])
            account_id = UUID(claims["sub"])
        except (KeyError, ValueError):
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message=LogoutMessages.INVALID,
                )
            )

        revoked = await self._refresh_token_repo.consume(token_id)
        await self._transaction.commit()

        self._logger.info(
            "logout",
            account_id=str(account_id),
            token_id=str(token_id),
            revoked=revoked,
        )
        await self._event_bus.publish(
            UserLoggedOut(account_id=account_id, revoked=revoked)
        )
        return Success(value=LogoutMessages.LOGGED_OUT)
