"""Stub command handlers for API tests.

Each stub records the command it received and returns a preset result, so
router tests exercise request parsing and status mapping only.
"""

from src.application.dtos.auth_dtos import AuthTokens
from src.core.enums import ErrorCode
from src.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
)
from src.core.result import Failure, Success


class StubHandler:
    """Handler double returning a fixed result."""

    def __init__(self, result):
        self.result = result
        self.commands: list = []

    async def handle(self, cmd):
        self.commands.append(cmd)
        return self.result


def success(message: str) -> StubHandler:
    return StubHandler(Success(value=message))


def tokens(message: str = "Login successful") -> StubHandler:
    return StubHandler(
        Success(
            value=AuthTokens(
                access_token="access.jwt",
                refresh_token="refresh.jwt",
                message=message,
                expires_in=900,
            )
        )
    )


def failure(code: ErrorCode, message: str = "failed") -> StubHandler:
    error_types: dict[ErrorCode, DomainError] = {
        ErrorCode.ALREADY_EXISTS: ConflictError(
            code=code, message=message, resource_type="Account"
        ),
        ErrorCode.NOT_FOUND: NotFoundError(
            code=code, message=message, resource_type="Account", resource_id="x"
        ),
        ErrorCode.ACCOUNT_BLOCKED: AuthorizationError(code=code, message=message),
        ErrorCode.EMAIL_NOT_VERIFIED: AuthorizationError(code=code, message=message),
        ErrorCode.EMAIL_ALREADY_VERIFIED: AuthorizationError(code=code, message=message),
    }
    error = error_types.get(code, AuthenticationError(code=code, message=message))
    return StubHandler(Failure(error=error))
