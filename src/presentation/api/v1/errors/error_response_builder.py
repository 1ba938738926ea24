"""Error response builder for RFC 9457 Problem Details.

Builds RFC 9457 compliant error responses from the DomainError carried by a
handler's Failure result.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.presentation.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# ErrorCode -> (HTTP status, title)
_ERROR_CODE_INFO: dict[ErrorCode, tuple[int, str]] = {
    ErrorCode.VALIDATION_FAILED: (status.HTTP_400_BAD_REQUEST, "Validation Failed"),
    ErrorCode.ALREADY_EXISTS: (status.HTTP_409_CONFLICT, "Resource Conflict"),
    ErrorCode.INVALID_CREDENTIALS: (
        status.HTTP_401_UNAUTHORIZED,
        "Authentication Failed",
    ),
    ErrorCode.TOKEN_INVALID: (status.HTTP_400_BAD_REQUEST, "Invalid Token"),
    ErrorCode.TOKEN_EXPIRED: (status.HTTP_401_UNAUTHORIZED, "Token Expired"),
    ErrorCode.ACCOUNT_BLOCKED: (status.HTTP_403_FORBIDDEN, "Account Blocked"),
    ErrorCode.EMAIL_NOT_VERIFIED: (status.HTTP_403_FORBIDDEN, "Email Not Verified"),
    ErrorCode.EMAIL_ALREADY_VERIFIED: (
        status.HTTP_403_FORBIDDEN,
        "Email Already Verified",
    ),
    ErrorCode.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    ErrorCode.INTERNAL: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error",
    ),
}

_INTERNAL_DETAIL = "An unexpected error occurred. Please contact support with the trace ID."


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    The ErrorCode to status mapping is uniform across routes.

    Example:
        >>> error = AuthenticationError(
        ...     code=ErrorCode.TOKEN_EXPIRED,
        ...     message="Reset token has expired. Please request a new one.",
        ... )
        >>> response = ErrorResponseBuilder.from_domain_error(
        ...     error=error,
        ...     request=request,
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        """Convert DomainError to RFC 9457 JSON response.

        Args:
            error: Domain error from a Failure result
            request: FastAPI Request object (for instance URL)
            trace_id: Request trace ID for debugging

        Returns:
            JSONResponse with RFC 9457 ProblemDetails content
        """
        status_code = ErrorResponseBuilder.get_status_code(error.code)

        # Internal failures never expose their message
        detail = (
            _INTERNAL_DETAIL if error.code is ErrorCode.INTERNAL else error.message
        )

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=ErrorResponseBuilder.get_title(error.code),
            status=status_code,
            detail=detail,
            instance=str(request.url.path),
            errors=None,
            trace_id=trace_id or None,
        )

        if isinstance(error, ValidationError) and error.field:
            problem.errors = [
                ErrorDetail(
                    field=error.field,
                    code=error.code.value,
                    message=error.message,
                )
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def get_status_code(code: ErrorCode) -> int:
        """Map error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder.get_status_code(ErrorCode.TOKEN_EXPIRED)
            401
        """
        return _ERROR_CODE_INFO.get(
            code, (status.HTTP_500_INTERNAL_SERVER_ERROR, "")
        )[0]

    @staticmethod
    def get_title(code: ErrorCode) -> str:
        """Get human-readable title for error code."""
        return _ERROR_CODE_INFO.get(code, (0, "Internal Server Error"))[1]
