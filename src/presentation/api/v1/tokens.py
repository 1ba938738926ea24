"""Tokens resource router.

Endpoints:
    POST /api/v1/tokens - Create new tokens (refresh)
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import RefreshTokens
from src.application.commands.handlers import RefreshTokensHandler
from src.core.container import get_refresh_tokens_handler
from src.core.result import Failure
from src.presentation.api.middleware.trace_middleware import get_trace_id
from src.presentation.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.auth_schemas import AuthTokensResponse, TokenCreateRequest

router = APIRouter(prefix="/tokens", tags=["Tokens"])


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=AuthTokensResponse,
    responses={
        400: {"description": "Invalid or revoked refresh token", "model": ProblemDetails},
        401: {"description": "Refresh token expired", "model": ProblemDetails},
        403: {"description": "Account blocked", "model": ProblemDetails},
    },
    summary="Create tokens",
    description="Rotate a refresh token: the presented one is revoked and a new pair issued.",
)
async def create_tokens(
    request: Request,
    data: TokenCreateRequest,
    handler: RefreshTokensHandler = Depends(get_refresh_tokens_handler),
) -> AuthTokensResponse | JSONResponse:
    """Refresh access token with token rotation.

    POST /api/v1/tokens → 200 OK

    Args:
        request: FastAPI request object.
        data: Refresh token.
        handler: Refresh handler (injected).

    Returns:
        AuthTokensResponse on success.
        JSONResponse with RFC 9457 error on failure (400/401/403).
    """
    result = await handler.handle(RefreshTokens(refresh_token=data.refresh_token))

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
