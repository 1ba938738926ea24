"""Email verification resource routers.

Endpoints:
    POST /api/v1/email-verifications?token=  - Create verification (verify email)
    POST /api/v1/email-verification-tokens   - Create verification token (resend)
"""

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import ResendVerification, VerifyEmail
from src.application.commands.handlers import (
    ResendVerificationHandler,
    VerifyEmailHandler,
)
from src.core.container import (
    get_resend_verification_handler,
    get_verify_email_handler,
)
from src.core.result import Failure
from src.presentation.api.middleware.trace_middleware import get_trace_id
from src.presentation.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.auth_schemas import (
    EmailVerificationTokenCreateRequest,
    MessageResponse,
)

email_verifications_router = APIRouter(
    prefix="/email-verifications",
    tags=["Email Verifications"],
)

email_verification_tokens_router = APIRouter(
    prefix="/email-verification-tokens",
    tags=["Email Verification Tokens"],
)


@email_verifications_router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
    responses={
        400: {"description": "Invalid verification token", "model": ProblemDetails},
        401: {"description": "Verification token expired", "model": ProblemDetails},
        403: {"description": "Account blocked", "model": ProblemDetails},
    },
    summary="Create email verification",
    description="Verify an email address with the token from the verification link.",
)
async def create_email_verification(
    request: Request,
    token: str = Query(..., min_length=1, max_length=2048),
    handler: VerifyEmailHandler = Depends(get_verify_email_handler),
) -> MessageResponse | JSONResponse:
    """Verify email (POST /api/v1/email-verifications?token=...).

    Verifying an already verified account succeeds again.

    Args:
        request: FastAPI request object.
        token: Raw verification token from the email link.
        handler: Verify email handler (injected).

    Returns:
        MessageResponse on success.
        JSONResponse with RFC 9457 error on failure (400/401/403).
    """
    result = await handler.handle(VerifyEmail(token=token))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return MessageResponse(message=result.value)


@email_verification_tokens_router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
    responses={
        403: {
            "description": "Account blocked or already verified",
            "model": ProblemDetails,
        },
        404: {"description": "No account for this email", "model": ProblemDetails},
    },
    summary="Create email verification token",
    description="Resend the verification email with a fresh token.",
)
async def create_email_verification_token(
    request: Request,
    data: EmailVerificationTokenCreateRequest,
    handler: ResendVerificationHandler = Depends(get_resend_verification_handler),
) -> MessageResponse | JSONResponse:
    """Resend verification (POST /api/v1/email-verification-tokens).

    Args:
        request: FastAPI request object.
        data: Account email.
        handler: Resend verification handler (injected).

    Returns:
        MessageResponse on success.
        JSONResponse with RFC 9457 error on failure (403/404).
    """
    result = await handler.handle(ResendVerification(email=data.email))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return MessageResponse(message=result.value)
