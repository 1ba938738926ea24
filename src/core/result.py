"""Result types for railway-oriented programming.

Command handlers return a Result instead of raising for expected failures
(bad credentials, expired token, blocked account). Callers branch on the
variant with structural pattern matching.

Usage:
    result = await handler.handle(VerifyEmail(token=raw_token))
    match result:
        case Success(value=message):
            return {"message": message}
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error that occurred (usually a DomainError).
    """

    error: E


Result = Success[T] | Failure[E]
