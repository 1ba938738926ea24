"""Authentication handler dependency factories.

Request-scoped handler instances for the credential lifecycle:
- Registration and email verification (including resend)
- Login, logout and refresh token rotation
- Password reset (request and complete)

Each factory builds its repositories on the request session and passes the
same session as the handler's transaction, so one commit covers the flow.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.container.events import get_event_bus
from src.core.container.infrastructure import (
    get_db_session,
    get_logger,
    get_secret_hasher,
    get_token_service,
)
from src.core.container.repositories import (
    build_token_issuer,
    build_token_repositories,
    build_token_validator,
)
from src.domain.enums import TokenPurpose
from src.infrastructure.persistence.repositories import AccountRepository

if TYPE_CHECKING:
    from src.application.commands.handlers import (
        LoginAccountHandler,
        LogoutAccountHandler,
        RefreshTokensHandler,
        RegisterAccountHandler,
        RequestPasswordResetHandler,
        ResendVerificationHandler,
        ResetPasswordHandler,
        VerifyEmailHandler,
    )


# ============================================================================
# Authentication Handler Factories
# ============================================================================


async def get_register_account_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RegisterAccountHandler":
    """Get RegisterAccount command handler (request-scoped).

    Creates new handler instance per request with all required dependencies:
    - AccountRepository (request-scoped, uses session)
    - Verification token pool (request-scoped, uses session)
    - BcryptSecretHasher, EventBus, Logger (app-scoped singletons)

    Returns:
        RegisterAccountHandler instance.

    Usage:
        @router.post("/users")
        async def register(
            handler: RegisterAccountHandler = Depends(get_register_account_handler)
        ):
            result = await handler.handle(command)
    """
    from src.application.commands.handlers import RegisterAccountHandler

    repositories = build_token_repositories(session)

    return RegisterAccountHandler(
        account_repo=AccountRepository(session=session),
        verification_token_repo=repositories[TokenPurpose.VERIFICATION],
        token_issuer=build_token_issuer(repositories),
        hasher=get_secret_hasher(),
        transaction=session,
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


async def get_login_account_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "LoginAccountHandler":
    """Get LoginAccount command handler (request-scoped).

    Returns:
        LoginAccountHandler instance.
    """
    from src.application.commands.handlers import LoginAccountHandler

    repositories = build_token_repositories(session)

    return LoginAccountHandler(
        account_repo=AccountRepository(session=session),
        token_issuer=build_token_issuer(repositories),
        hasher=get_secret_hasher(),
        token_service=get_token_service(),
        transaction=session,
        event_bus=get_event_bus(),
        logger=get_logger(),
        access_token_expire_minutes=settings.access_token_expire_minutes,
    )


async def get_verify_email_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "VerifyEmailHandler":
    """Get VerifyEmail command handler (request-scoped).

    Returns:
        VerifyEmailHandler instance.
    """
    from src.application.commands.handlers import VerifyEmailHandler

    account_repo = AccountRepository(session=session)
    repositories = build_token_repositories(session)

    return VerifyEmailHandler(
        account_repo=account_repo,
        verification_token_repo=repositories[TokenPurpose.VERIFICATION],
        token_validator=build_token_validator(repositories, account_repo),
        transaction=session,
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


async def get_resend_verification_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ResendVerificationHandler":
    """Get ResendVerification command handler (request-scoped).

    Returns:
        ResendVerificationHandler instance.
    """
    from src.application.commands.handlers import ResendVerificationHandler

    repositories = build_token_repositories(session)

    return ResendVerificationHandler(
        account_repo=AccountRepository(session=session),
        verification_token_repo=repositories[TokenPurpose.VERIFICATION],
        token_issuer=build_token_issuer(repositories),
        transaction=session,
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


async def get_request_password_reset_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RequestPasswordResetHandler":
    """Get RequestPasswordReset command handler (request-scoped).

    Returns:
        RequestPasswordResetHandler instance.
    """
    from src.application.commands.handlers import RequestPasswordResetHandler

    return RequestPasswordResetHandler(
        account_repo=AccountRepository(session=session),
        token_issuer=build_token_issuer(build_token_repositories(session)),
        transaction=session,
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


async def get_reset_password_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ResetPasswordHandler":
    """Get ResetPassword command handler (request-scoped).

    Returns:
        ResetPasswordHandler instance.
    """
    from src.application.commands.handlers import ResetPasswordHandler

    account_repo = AccountRepository(session=session)
    repositories = build_token_repositories(session)

    return ResetPasswordHandler(
        account_repo=account_repo,
        reset_token_repo=repositories[TokenPurpose.RESET],
        refresh_token_repo=repositories[TokenPurpose.REFRESH],
        token_validator=build_token_validator(repositories, account_repo),
        hasher=get_secret_hasher(),
        transaction=session,
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


async def get_refresh_tokens_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RefreshTokensHandler":
    """Get RefreshTokens command handler (request-scoped).

    Returns:
        RefreshTokensHandler instance.
    """
    from src.application.commands.handlers import RefreshTokensHandler

    account_repo = AccountRepository(session=session)
    repositories = build_token_repositories(session)

    return RefreshTokensHandler(
        refresh_token_repo=repositories[TokenPurpose.REFRESH],
        token_issuer=build_token_issuer(repositories),
        token_validator=build_token_validator(repositories, account_repo),
        token_service=get_token_service(),
        transaction=session,
        event_bus=get_event_bus(),
        logger=get_logger(),
        access_token_expire_minutes=settings.access_token_expire_minutes,
    )


async def get_logout_account_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "LogoutAccountHandler":
    """Get LogoutAccount command handler (request-scoped).

    Returns:
        LogoutAccountHandler instance.
    """
    from src.application.commands.handlers import LogoutAccountHandler

    repositories = build_token_repositories(session)

    return LogoutAccountHandler(
        refresh_token_repo=repositories[TokenPurpose.REFRESH],
        token_service=get_token_service(),
        transaction=session,
        event_bus=get_event_bus(),
        logger=get_logger(),
    )
