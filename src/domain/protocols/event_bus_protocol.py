"""Event bus protocol (port) for domain events.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Domain layer defines the interface (port)
    - InMemoryEventBus (src/infrastructure/events/) is the adapter
    - Container provides the app-scoped instance via get_event_bus()

Usage:
    >>> event_bus = get_event_bus()
    >>> await session.commit()  # Commit BEFORE publishing
    >>> await event_bus.publish(UserRegistered(...))
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from src.domain.events.base_event import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[DomainEvent], Awaitable[None]]
"""Async function receiving one event and returning None.

Handlers run concurrently and must not rely on ordering.
"""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open**: a failing handler never stops the others and never
           propagates to the publisher.
        2. **Exact type routing**: handlers receive only events of the type
           they subscribed to (no inheritance matching).
        3. **Publish after commit**: events are facts, never intents.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register an event handler for a specific event type.

        Args:
            event_type: Event class to handle.
            handler: Async callable invoked with each published event.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish an event to every handler registered for its type.

        No handlers is a no-op. Handler exceptions are logged, not raised.

        Args:
            event: Domain event to publish.
        """
        ...
