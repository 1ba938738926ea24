"""Token generation protocol for domain layer.

Signs and checks the two JWT kinds the service hands to clients.

Token Strategy:
    - Access tokens: short-lived JWT (15 minutes), stateless, never stored
    - Refresh tokens: JWT that references a stored refresh TokenRecord by id
      (token_id claim) and carries its raw secret (secret claim); the record
      decides whether the token is still live and its hash vouches for the
      secret
"""

from typing import Any, Protocol
from uuid import UUID

from src.core.result import Result


class TokenGenerationProtocol(Protocol):
    """JWT generation and validation interface.

    Implementations:
        - JWTService: HMAC-SHA256 (src/infrastructure/security/jwt_service.py)

    Usage:
        access = token_service.generate_access_token(
            account_id=account.id,
            email=account.email,
            username=account.username,
            role=account.role.value,
        )

        result = token_service.decode_refresh_token(refresh_jwt)
        match result:
            case Success(value=claims):
                token_id = UUID(claims["token_id"])
            case Failure(error=reason):
                ...
    """

    def generate_access_token(
        self,
        account_id: UUID,
        email: str,
        username: str,
        role: str,
    ) -> str:
        """Generate a signed access token.

        Claims: sub, email, username, role, type="access", iat, exp, jti.

        Returns:
            JWT string (header.payload.signature).
        """
        ...

    def generate_refresh_token(
        self, account_id: UUID, token_id: UUID, secret: str
    ) -> str:
        """Generate a signed refresh token referencing a stored record.

        Claims: sub, token_id, secret, type="refresh", iat, exp, jti.

        Args:
            account_id: Owning account (sub claim).
            token_id: Refresh TokenRecord id.
            secret: Raw secret whose hash the record stores.

        Returns:
            JWT string.
        """
        ...

    def decode_refresh_token(self, token: str) -> Result[dict[str, Any], str]:
        """Validate a refresh token and return its claims.

        Checks signature, expiry and that ``type == "refresh"``.

        Returns:
            Success with the claims, or Failure with a short reason
            ("expired", "invalid", "wrong_type").
        """
        ...
