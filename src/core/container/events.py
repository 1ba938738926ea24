"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. Subscriptions are
wired once, when the bus is first requested.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Subscriptions:
        - NotificationEventHandler: outbound email events
        - LoggingEventHandler: every lifecycle event

    Returns:
        Event bus implementing EventBusProtocol.

    Usage:
        event_bus = get_event_bus()
        await event_bus.publish(UserRegistered(...))
    """
    from src.core.config import get_settings
    from src.core.container.infrastructure import get_logger
    from src.domain.events import (
        AuthTokensRefreshed,
        EmailVerificationResent,
        EmailVerified,
        PasswordResetCompleted,
        PasswordResetRequested,
        UserLoggedIn,
        UserLoggedOut,
        UserRegistered,
    )
    from src.infrastructure.events.handlers import (
        LoggingEventHandler,
        NotificationEventHandler,
    )
    from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    logger = get_logger()
    event_bus = InMemoryEventBus(logger=logger)

    notification_handler = NotificationEventHandler(logger=logger, settings=get_settings())
    logging_handler = LoggingEventHandler(logger=logger)

    # Outbound notifications
    event_bus.subscribe(UserRegistered, notification_handler.handle_user_registered)  # type: ignore[arg-type]
    event_bus.subscribe(
        EmailVerificationResent,
        notification_handler.handle_email_verification_resent,  # type: ignore[arg-type]
    )
    event_bus.subscribe(
        PasswordResetRequested,
        notification_handler.handle_password_reset_requested,  # type: ignore[arg-type]
    )

    # Logging (all events)
    subscriptions = {
        UserRegistered: logging_handler.handle_user_registered,
        EmailVerificationResent: logging_handler.handle_email_verification_resent,
        PasswordResetRequested: logging_handler.handle_password_reset_requested,
        UserLoggedIn: logging_handler.handle_user_logged_in,
        EmailVerified: logging_handler.handle_email_verified,
        PasswordResetCompleted: logging_handler.handle_password_reset_completed,
        AuthTokensRefreshed: logging_handler.handle_auth_tokens_refreshed,
        UserLoggedOut: logging_handler.handle_user_logged_out,
    }
    for event_type, handler in subscriptions.items():
        event_bus.subscribe(event_type, handler)  # type: ignore[arg-type]

    return event_bus
