"""Refresh token handler (rotation).

Flow:
1. Verify the refresh JWT (signature, expiry, type == "refresh")
2. Extract token_id, account id and secret
3. Validator locks and resolves the live record
   - secret does not match the record hash -> TOKEN_INVALID
   - missing or revoked -> TOKEN_INVALID
   - expired -> revoke it, commit, TOKEN_EXPIRED
   - owner missing or mismatched -> TOKEN_INVALID
   - owner BLOCKED -> ACCOUNT_BLOCKED
4. Revoke the presented record (conditional update; losing a race ->
   TOKEN_INVALID)
5. Issue a new record, sign new refresh and access JWTs
6. Commit, emit AuthTokensRefreshed

Any unexpected exception is logged and reported as TOKEN_INVALID.
"""

from uuid import UUID

from src.application.commands.auth_commands import RefreshTokens
from src.application.dtos.auth_dtos import AuthTokens
from src.application.services.token_issuer import TokenIssuer
from src.application.services.token_validator import TokenValidator
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, AuthorizationError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.enums import TokenPurpose
from src.domain.events.auth_events import AuthTokensRefreshed
from src.domain.protocols import (
    EventBusProtocol,
    LoggerProtocol,
    TokenGenerationProtocol,
    TokenRepository,
    TransactionProtocol,
)


class RefreshMessages:
    """Client-facing refresh messages."""

    REFRESHED = "Tokens refreshed successfully"
    JWT_INVALID = "Invalid or expired refresh token"
    NOT_FOUND_OR_REVOKED = "Refresh token not found or revoked"
    EXPIRED = "Refresh token has expired"
    INVALID = "Invalid refresh token"
    ACCOUNT_BLOCKED = "Your account has been blocked. Please contact support."


class RefreshTokensHandler:
    """Handler for RefreshTokens command."""

    def __init__(
        self,
        refresh_token_repo: TokenRepository,
        token_issuer: TokenIssuer,
        token_validator: TokenValidator,
        token_service: TokenGenerationProtocol,
        transaction: TransactionProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
        access_token_expire_minutes: int = 15,
    ) -> None:
        self._refresh_token_repo = refresh_token_repo
        self._token_issuer = token_issuer
        self._token_validator = token_validator
        self._token_service = token_service
        self._transaction = transaction
        self._event_bus = event_bus
        self._logger = logger
        self._expires_in = access_token_expire_minutes * 60

    async def handle(self, cmd: RefreshTokens) -> Result[AuthTokens, DomainError]:
        """Handle refresh.

        Returns:
            Success(AuthTokens) or Failure with TOKEN_INVALID, TOKEN_EXPIRED
            or ACCOUNT_BLOCKED.
        """
        try:
            return await self._rotate(cmd)
        except Exception as e:
            await self._transaction.rollback()
            self._logger.error("refresh_failed", error=e)
            return Failure(error=_invalid(RefreshMessages.INVALID))

    async def _rotate(self, cmd: RefreshTokens) -> Result[AuthTokens, DomainError]:
        # Step 1: Verify JWT
        claims_result = self._token_service.decode_refresh_token(cmd.refresh_token)
        if isinstance(claims_result, Failure):
            self._logger.info("refresh_rejected", reason=claims_result.error)
            return Failure(error=_invalid(RefreshMessages.JWT_INVALID))

        # Step 2: Claims
        claims = claims_result.value
        try:
            token_id = UUID(claims["token_id"])
            account_id = UUID(claims["sub"])
            secret = str(claims["secret"])
        except (KeyError, ValueError):
            self._logger.info("refresh_rejected", reason="malformed_claims")
            return Failure(error=_invalid(RefreshMessages.INVALID))

        # Step 3: Resolve record and check its hash against the secret claim
        result = await self._token_validator.validate_refresh(
            token_id, account_id, secret
        )
        if isinstance(result, Failure):
            return await self._reject(result.error, token_id)

        validated = result.value
        account = validated.account

        # Step 4: Revoke presented token (single winner)
        if not await self._refresh_token_repo.consume(token_id):
            await self._transaction.rollback()
            self._logger.warning(
                "refresh_race_lost",
                account_id=str(account.id),
                token_id=str(token_id),
            )
            return Failure(error=_invalid(RefreshMessages.NOT_FOUND_OR_REVOKED))

        # Step 5: New tokens
        issued = await self._token_issuer.issue(account.id, TokenPurpose.REFRESH)
        refresh_token = self._token_service.generate_refresh_token(
            account_id=account.id,
            token_id=issued.record.id,
            secret=issued.raw_secret,
        )
        access_token = self._token_service.generate_access_token(
            account_id=account.id,
            email=account.email,
            username=account.username,
            role=account.role.value,
        )

        # Step 6: Commit, then notify
        await self._transaction.commit()
        self._logger.info(
            "tokens_refreshed",
            account_id=str(account.id),
            old_token_id=str(token_id),
            new_token_id=str(issued.record.id),
        )
        await self._event_bus.publish(
            AuthTokensRefreshed(
                account_id=account.id,
                old_token_id=token_id,
                new_token_id=issued.record.id,
            )
        )

        return Success(
            value=AuthTokens(
                access_token=access_token,
                refresh_token=refresh_token,
                message=RefreshMessages.REFRESHED,
                expires_in=self._expires_in,
            )
        )

    async def _reject(
        self,
        error: DomainError,
        token_id: UUID,
    ) -> Result[AuthTokens, DomainError]:
        self._logger.info(
            "refresh_rejected",
            reason=error.code.value,
            token_id=str(token_id),
        )
        match error.code:
            case ErrorCode.TOKEN_EXPIRED:
                # Expired records are revoked so they drop out of live queries
                await self._refresh_token_repo.consume(token_id)
                await self._transaction.commit()
                return Failure(
                    error=AuthenticationError(
                        code=ErrorCode.TOKEN_EXPIRED,
                        message=RefreshMessages.EXPIRED,
                    )
                )
            case ErrorCode.ACCOUNT_BLOCKED:
                await self._transaction.rollback()
                return Failure(
                    error=AuthorizationError(
                        code=ErrorCode.ACCOUNT_BLOCKED,
                        message=RefreshMessages.ACCOUNT_BLOCKED,
                    )
                )
            case _:
                await self._transaction.rollback()
                # details are set only when a live record failed the owner check
                message = (
                    RefreshMessages.NOT_FOUND_OR_REVOKED
                    if error.details is None
                    else RefreshMessages.INVALID
                )
                return Failure(error=_invalid(message))


def _invalid(message: str) -> AuthenticationError:
    return AuthenticationError(code=ErrorCode.TOKEN_INVALID, message=message)
