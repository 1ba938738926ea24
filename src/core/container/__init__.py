"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_register_account_handler

The container is organized into modules:
- infrastructure: Core services (db, hashing, JWT, logging)
- events: Event bus and subscriptions
- repositories: Repository and token service builders
- auth_handlers: Credential lifecycle handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
    get_secret_hasher,
    get_token_service,
)

# Event bus
from src.core.container.events import get_event_bus

# Auth handlers
from src.core.container.auth_handlers import (
    get_login_account_handler,
    get_logout_account_handler,
    get_refresh_tokens_handler,
    get_register_account_handler,
    get_request_password_reset_handler,
    get_resend_verification_handler,
    get_reset_password_handler,
    get_verify_email_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    "get_secret_hasher",
    "get_token_service",
    # Events
    "get_event_bus",
    # Handlers
    "get_login_account_handler",
    "get_logout_account_handler",
    "get_refresh_tokens_handler",
    "get_register_account_handler",
    "get_request_password_reset_handler",
    "get_resend_verification_handler",
    "get_reset_password_handler",
    "get_verify_email_handler",
]
