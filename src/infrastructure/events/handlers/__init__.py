"""Domain event handlers (subscribers)."""

from src.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)
from src.infrastructure.events.handlers.notification_event_handler import (
    NotificationEventHandler,
)

__all__ = [
    "LoggingEventHandler",
    "NotificationEventHandler",
]
