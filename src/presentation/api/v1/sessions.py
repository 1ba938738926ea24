"""Sessions resource router.

Endpoints:
    POST   /api/v1/sessions         - Create session (login)
    DELETE /api/v1/sessions/current - Delete current session (logout)
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import LoginAccount, LogoutAccount
from src.application.commands.handlers import LoginAccountHandler, LogoutAccountHandler
from src.core.container import get_login_account_handler, get_logout_account_handler
from src.core.result import Failure
from src.presentation.api.middleware.trace_middleware import get_trace_id
from src.presentation.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.auth_schemas import (
    AuthTokensResponse,
    MessageResponse,
    SessionCreateRequest,
    SessionDeleteRequest,
)

router = APIRouter(prefix="/sessions", tags=["Sessions"])


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=AuthTokensResponse,
    responses={
        401: {"description": "Invalid email or password", "model": ProblemDetails},
        403: {
            "description": "Account blocked or not verified",
            "model": ProblemDetails,
        },
    },
    summary="Create session",
    description="Authenticate and receive an access token and a refresh token.",
)
async def create_session(
    request: Request,
    data: SessionCreateRequest,
    handler: LoginAccountHandler = Depends(get_login_account_handler),
) -> AuthTokensResponse | JSONResponse:
    """Create a new session (login).

    POST /api/v1/sessions → 200 OK

    Args:
        request: FastAPI request object.
        data: Login credentials (email, password).
        handler: Login handler (injected).

    Returns:
        AuthTokensResponse on success.
        JSONResponse with RFC 9457 error on failure (401/403).
    """
    result = await handler.handle(
        LoginAccount(email=data.email, password=data.password)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    tokens = result.value
    return AuthTokensResponse(
        access_token=tokens.access_token,
        refresh_token=tokens.refresh_token,
        token_type=tokens.token_type,
        expires_in=tokens.expires_in,
        message=tokens.message,
    )


@router.delete(
    "/current",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
    responses={
        400: {"description": "Malformed or forged refresh token", "model": ProblemDetails},
    },
    summary="Delete current session",
    description="Logout by revoking the presented refresh token.",
)
async def delete_current_session(
    request: Request,
    data: SessionDeleteRequest,
    handler: LogoutAccountHandler = Depends(get_logout_account_handler),
) -> MessageResponse | JSONResponse:
    """Delete current session (logout).

    DELETE /api/v1/sessions/current → 200 OK

    Expired or already revoked refresh tokens still log out successfully.

    Args:
        request: FastAPI request object.
        data: Refresh token to revoke.
        handler: Logout handler (injected).

    Returns:
        MessageResponse on success.
        JSONResponse with RFC 9457 error on failure (400).
    """
    result = await handler.handle(LogoutAccount(refresh_token=data.refresh_token))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return MessageResponse(message=result.value)
