"""Token Validator application service.

Resolves a presented secret to its stored record and owning account.

Failure taxonomy (codes; handlers replace messages with flow wording):
    - TOKEN_INVALID: no unconsumed record matches, the owner is gone, or a
      refresh secret does not match its record
    - TOKEN_EXPIRED: the matching record expired
    - ACCOUNT_BLOCKED: the owning account is blocked

Single-use secrets are found by scanning every unconsumed record of the
purpose and comparing bcrypt hashes; the first match wins. The cost grows
with the number of live records, which short lifetimes keep small.
"""

from collections.abc import Mapping
from datetime import UTC, datetime
from uuid import UUID

from src.application.dtos.auth_dtos import ValidatedToken
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, AuthorizationError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.enums import TokenPurpose
from src.domain.protocols.account_repository import AccountRepository
from src.domain.protocols.secret_hasher_protocol import SecretHasherProtocol
from src.domain.protocols.token_repository import TokenRecordData, TokenRepository


class TokenValidationError:
    """Default messages; handlers override them per flow."""

    TOKEN_INVALID = "Invalid or already used token"
    TOKEN_EXPIRED = "Token has expired"
    ACCOUNT_BLOCKED = "Your account has been blocked. Please contact support."


class TokenValidator:
    """Validates presented token secrets."""

    def __init__(
        self,
        repositories: Mapping[TokenPurpose, TokenRepository],
        account_repo: AccountRepository,
        hasher: SecretHasherProtocol,
    ) -> None:
        self._repositories = repositories
        self._account_repo = account_repo
        self._hasher = hasher

    async def validate(
        self,
        raw_secret: str,
        purpose: TokenPurpose,
    ) -> Result[ValidatedToken, DomainError]:
        """Resolve a raw single-use secret.

        Args:
            raw_secret: Secret as presented by the client.
            purpose: Pool to search. Other pools are never consulted.

        Returns:
            Success(ValidatedToken) or Failure with TOKEN_INVALID,
            TOKEN_EXPIRED or ACCOUNT_BLOCKED.
        """
        record = await self._find_match(raw_secret, purpose)
        if record is None:
            return Failure(error=_invalid())

        return await self._check_record(record)

    async def validate_refresh(
        self,
        token_id: UUID,
        account_id: UUID,
        raw_secret: str,
    ) -> Result[ValidatedToken, DomainError]:
        """Resolve a refresh record named by a verified refresh JWT.

        The JWT signature proves the token was signed here; the record's hash
        proves the secret was issued for that record. Both must hold. The
        row stays locked (SELECT ... FOR UPDATE) until the calling
        transaction ends.

        Args:
            token_id: token_id claim.
            account_id: sub claim; must own the record.
            raw_secret: secret claim; must match the record's hash.
        """
        record = await self._repositories[TokenPurpose.REFRESH].find_active_by_id(
            token_id, for_update=True
        )
        if record is None:
            return Failure(error=_invalid())
        if record.account_id != account_id:
            return Failure(error=_invalid(token_id=str(record.id)))
        if not self._hasher.verify(raw_secret, record.token_hash):
            return Failure(error=_invalid(token_id=str(record.id)))

        return await self._check_record(record)

    async def _find_match(
        self,
        raw_secret: str,
        purpose: TokenPurpose,
    ) -> TokenRecordData | None:
        for record in await self._repositories[purpose].find_unconsumed():
            if self._hasher.verify(raw_secret, record.token_hash):
                return record
        return None

    async def _check_record(
        self,
        record: TokenRecordData,
    ) -> Result[ValidatedToken, DomainError]:
        if record.is_expired(datetime.now(UTC)):
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_EXPIRED,
                    message=TokenValidationError.TOKEN_EXPIRED,
                    details={"token_id": str(record.id)},
                )
            )

        account = await self._account_repo.find_by_id(record.account_id)
        if account is None:
            return Failure(error=_invalid(token_id=str(record.id)))

        if account.is_blocked():
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.ACCOUNT_BLOCKED,
                    message=TokenValidationError.ACCOUNT_BLOCKED,
                    account_status=account.status.value,
                )
            )

        return Success(value=ValidatedToken(record=record, account=account))


def _invalid(**details: str) -> AuthenticationError:
    return AuthenticationError(
        code=ErrorCode.TOKEN_INVALID,
        message=TokenValidationError.TOKEN_INVALID,
        details=details or None,
    )
