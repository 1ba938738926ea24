"""Process-local event bus.

Handlers are registered per exact event class and run concurrently on
publish. A failing handler is logged and ignored so an email outage can never
undo a committed registration or password reset.

Usage:
    >>> bus = InMemoryEventBus(logger=get_logger())
    >>> bus.subscribe(UserRegistered, email_handler.on_user_registered)
    >>> await bus.publish(UserRegistered(account_id=..., email=..., verification_token=...))
"""

import asyncio
from collections import defaultdict

from src.domain.events.base_event import DomainEvent
from src.domain.protocols.event_bus_protocol import EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """EventBusProtocol backed by a dict of handler lists.

    Single event loop only; no locking.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Attach handler to event_type. Subclasses are not matched and
        subscribing twice runs the handler twice."""
        self._handlers[event_type].append(handler)

    def handler_count(self, event_type: type[DomainEvent]) -> int:
        return len(self._handlers.get(event_type, []))

    async def publish(self, event: DomainEvent) -> None:
        """Run every handler for type(event) and wait for all of them.

        Never raises; handler exceptions are logged at warning level.
        """
        handlers = list(self._handlers.get(type(event), []))
        if not handlers:
            return

        event_id = str(event.event_id)
        self._logger.debug(
            "event_publishing",
            event_type=event.event_type,
            event_id=event_id,
            handler_count=len(handlers),
        )

        outcomes = await asyncio.gather(
            *(handler(event) for handler in handlers),
            return_exceptions=True,
        )

        for handler, outcome in zip(handlers, outcomes):
            if not isinstance(outcome, Exception):
                continue
            self._logger.warning(
                "event_handler_failed",
                event_type=event.event_type,
                event_id=event_id,
                handler_name=getattr(handler, "__name__", repr(handler)),
                error_type=type(outcome).__name__,
                error_message=str(outcome),
            )
