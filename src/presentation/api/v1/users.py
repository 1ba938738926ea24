"""Users resource router.

Endpoints:
    POST /api/v1/users - Create user (registration)
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import RegisterAccount
from src.application.commands.handlers import RegisterAccountHandler
from src.core.container import get_register_account_handler
from src.core.result import Failure
from src.presentation.api.middleware.trace_middleware import get_trace_id
from src.presentation.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.auth_schemas import MessageResponse, UserCreateRequest

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
    responses={
        400: {"description": "Invalid input", "model": ProblemDetails},
        403: {"description": "Account blocked", "model": ProblemDetails},
        409: {"description": "Email or username taken", "model": ProblemDetails},
    },
    summary="Create user",
    description="Register an account and email a verification link.",
)
async def create_user(
    request: Request,
    data: UserCreateRequest,
    handler: RegisterAccountHandler = Depends(get_register_account_handler),
) -> MessageResponse | JSONResponse:
    """Create a new user (registration).

    POST /api/v1/users → 200 OK

    Re-registering an unverified email with the same username issues a
    fresh verification token instead of failing.

    Args:
        request: FastAPI request object.
        data: Registration data (username, email, password).
        handler: Registration handler (injected).

    Returns:
        MessageResponse on success.
        JSONResponse with RFC 9457 error on failure (400/403/409).
    """
    command = RegisterAccount(
        username=data.username,
        email=data.email,
        password=data.password,
    )

    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return MessageResponse(message=result.value)
