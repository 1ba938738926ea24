"""Infrastructure event implementations.

Event Bus:
    - InMemoryEventBus: fail-open, concurrent handler execution

Event Handlers:
    - LoggingEventHandler: Structured logging for all lifecycle events
    - NotificationEventHandler: Email notifications (stub, logs the link)
"""

from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = [
    "InMemoryEventBus",
]
