"""Commands - Write operations that change state.

Each command has a corresponding handler in commands/handlers/.
"""

from src.application.commands.auth_commands import (
    LoginAccount,
    LogoutAccount,
    RefreshTokens,
    RegisterAccount,
    RequestPasswordReset,
    ResendVerification,
    ResetPassword,
    VerifyEmail,
)

__all__ = [
    "LoginAccount",
    "LogoutAccount",
    "RefreshTokens",
    "RegisterAccount",
    "RequestPasswordReset",
    "ResendVerification",
    "ResetPassword",
    "VerifyEmail",
]
