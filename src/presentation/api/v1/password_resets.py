"""Password resets resource routers.

Endpoints:
    POST /api/v1/password-reset-tokens - Create password reset token (request reset)
    POST /api/v1/password-resets       - Create password reset (execute reset)
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import RequestPasswordReset, ResetPassword
from src.application.commands.handlers import (
    RequestPasswordResetHandler,
    ResetPasswordHandler,
)
from src.core.container import (
    get_request_password_reset_handler,
    get_reset_password_handler,
)
from src.core.result import Failure
from src.presentation.api.middleware.trace_middleware import get_trace_id
from src.presentation.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.auth_schemas import (
    MessageResponse,
    PasswordResetCreateRequest,
    PasswordResetTokenCreateRequest,
)

password_reset_tokens_router = APIRouter(
    prefix="/password-reset-tokens",
    tags=["Password Reset Tokens"],
)

password_resets_router = APIRouter(
    prefix="/password-resets",
    tags=["Password Resets"],
)


@password_reset_tokens_router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
    summary="Create password reset token",
    description="Request a password reset. The response never reveals whether the email exists.",
)
async def create_password_reset_token(
    request: Request,
    data: PasswordResetTokenCreateRequest,
    handler: RequestPasswordResetHandler = Depends(get_request_password_reset_handler),
) -> MessageResponse | JSONResponse:
    """Request password reset (POST /api/v1/password-reset-tokens).

    Args:
        request: FastAPI request object.
        data: Account email.
        handler: Request password reset handler (injected).

    Returns:
        MessageResponse, identical for known, unknown and blocked emails.
    """
    result = await handler.handle(RequestPasswordReset(email=data.email))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return MessageResponse(message=result.value)


@password_resets_router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
    responses={
        400: {"description": "Invalid reset token", "model": ProblemDetails},
        401: {"description": "Reset token expired", "model": ProblemDetails},
        403: {"description": "Account blocked", "model": ProblemDetails},
    },
    summary="Create password reset",
    description="Set a new password with a reset token. All refresh tokens are revoked.",
)
async def create_password_reset(
    request: Request,
    data: PasswordResetCreateRequest,
    handler: ResetPasswordHandler = Depends(get_reset_password_handler),
) -> MessageResponse | JSONResponse:
    """Reset password (POST /api/v1/password-resets).

    Args:
        request: FastAPI request object.
        data: Reset token and new password.
        handler: Reset password handler (injected).

    Returns:
        MessageResponse on success.
        JSONResponse with RFC 9457 error on failure (400/401/403).
    """
    result = await handler.handle(
        ResetPassword(token=data.token, new_password=data.new_password)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return MessageResponse(message=result.value)
