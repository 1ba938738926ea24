"""JWT token service (adapter).

Implements TokenGenerationProtocol using PyJWT.

Security:
    - HMAC-SHA256 (HS256) by default
    - 256-bit secret key minimum
    - Unique JWT ID (jti, UUIDv7) per token
    - "type" claim keeps access and refresh tokens from being swapped
"""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from src.core.result import Failure, Result, Success

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


class JWTService:
    """JWT generation and validation service.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()
        access = token_service.generate_access_token(
            account_id=account.id,
            email=account.email,
            username=account.username,
            role="USER",
        )
    """

    def __init__(
        self,
        secret_key: str,
        access_expiration_minutes: int = 15,
        refresh_expiration_days: int = 30,
        algorithm: str = "HS256",
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Signing secret, at least 32 characters.
            access_expiration_minutes: Access token lifetime.
            refresh_expiration_days: Refresh token lifetime. Matches the
                stored refresh record's lifetime.
            algorithm: JWT signing algorithm.

        Raises:
            ValueError: If secret_key is shorter than 32 characters.
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_expiration = timedelta(minutes=access_expiration_minutes)
        self._refresh_expiration = timedelta(days=refresh_expiration_days)
        self._algorithm = algorithm

    def generate_access_token(
        self,
        account_id: UUID,
        email: str,
        username: str,
        role: str,
    ) -> str:
        """Generate a signed access token.

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> token = service.generate_access_token(
            ...     account_id=uuid7(), email="bob@x.io", username="bob", role="USER"
            ... )
            >>> len(token.split("."))
            3
        """
        return self._encode(
            {
                "sub": str(account_id),
                "email": email,
                "username": username,
                "role": role,
                "type": ACCESS_TOKEN_TYPE,
            },
            self._access_expiration,
        )

    def generate_refresh_token(
        self, account_id: UUID, token_id: UUID, secret: str
    ) -> str:
        """Generate a signed refresh token referencing a stored record.

        The record's raw secret rides in the "secret" claim so the record's
        own hash can be checked on refresh.
        """
        return self._encode(
            {
                "sub": str(account_id),
                "token_id": str(token_id),
                "secret": secret,
                "type": REFRESH_TOKEN_TYPE,
            },
            self._refresh_expiration,
        )

    def decode_refresh_token(self, token: str) -> Result[dict[str, Any], str]:
        """Validate a refresh token and return its claims.

        Note:
            A valid signature only proves the service signed the token. The
            caller still checks the referenced record is live and that the
            "secret" claim matches the record's hash.
        """
        return self._decode(token, REFRESH_TOKEN_TYPE)

    def _encode(self, claims: dict[str, Any], lifetime: timedelta) -> str:
        now = datetime.now(UTC)
        payload = {
            **claims,
            "iat": int(now.timestamp()),
            "exp": int((now + lifetime).timestamp()),
            "jti": str(uuid7()),
        }
        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def _decode(self, token: str, expected_type: str) -> Result[dict[str, Any], str]:
        try:
            # PyJWT validates signature and exp
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
        except ExpiredSignatureError:
            return Failure(error="expired")
        except InvalidTokenError:
            return Failure(error="invalid")

        if payload.get("type") != expected_type:
            return Failure(error="wrong_type")
        return Success(value=payload)
