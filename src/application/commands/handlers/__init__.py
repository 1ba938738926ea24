"""Command handlers, one per credential lifecycle flow."""

from src.application.commands.handlers.login_account_handler import (
    LoginAccountHandler,
)
from src.application.commands.handlers.logout_account_handler import (
    LogoutAccountHandler,
)
from src.application.commands.handlers.refresh_tokens_handler import (
    RefreshTokensHandler,
)
from src.application.commands.handlers.register_account_handler import (
    RegisterAccountHandler,
)
from src.application.commands.handlers.request_password_reset_handler import (
    RequestPasswordResetHandler,
)
from src.application.commands.handlers.resend_verification_handler import (
    ResendVerificationHandler,
)
from src.application.commands.handlers.reset_password_handler import (
    ResetPasswordHandler,
)
from src.application.commands.handlers.verify_email_handler import (
    VerifyEmailHandler,
)

__all__ = [
    "LoginAccountHandler",
    "LogoutAccountHandler",
    "RefreshTokensHandler",
    "RegisterAccountHandler",
    "RequestPasswordResetHandler",
    "ResendVerificationHandler",
    "ResetPasswordHandler",
    "VerifyEmailHandler",
]
