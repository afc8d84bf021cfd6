"""Routes domain events to the handlers registered for their type."""

import logging
from collections import defaultdict
from typing import Any, Awaitable, Callable, Dict, List, Type

from events.types import DomainEvent

logger = logging.getLogger(__name__)

Handler = Callable[[DomainEvent], Awaitable[Any]]


class EventDispatcher:
    """Runs every handler registered for an event's exact type, in registration order."""

    def __init__(self):
        self._handlers: Dict[Type[DomainEvent], List[Handler]] = defaultdict(list)

    def register(self, event_type: Type[DomainEvent], handler: Handler) -> None:
        self._handlers[event_type].append(handler)

    def handlers_for(self, event_type: Type[DomainEvent]) -> List[Handler]:
        return list(self._handlers.get(event_type, []))

    async def dispatch(self, event: DomainEvent) -> List[Any]:
        """
        Await each handler for the event and collect their results.

        A failing handler is logged and its exception re-raised; handlers
        after it do not run.
        """
        handlers = self.handlers_for(type(event))
        if not handlers:
            logger.debug("No handlers for %s", type(event).__name__)
        results = []
        for handler in handlers:
            try:
                results.append(await handler(event))
            except Exception:
                logger.exception(
                    "Handler %s failed for %s",
                    getattr(handler, "__name__", repr(handler)),
                    type(event).__name__,
                )
                raise
        return results
