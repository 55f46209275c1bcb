"""
Page Signal

Publish/subscribe signal scoped to one page session. Replaces a
process-wide event for cross-component UI intents such as opening the
create-post form.
"""

import logging
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

OPEN_CREATE_FORM = 'open_create_form'


class PageSignal:
    """
    Named-event dispatcher owned by a single page session.
    Handlers run synchronously in subscription order.
    """

    def __init__(self, scope: str):
        self.scope = scope
        self._handlers: Dict[str, List[Callable[..., Any]]] = {}

    def subscribe(self, event_type: str, handler: Callable[..., Any]) -> Callable[[], None]:
        """
        Register a handler for an event type

        Returns:
            Function that removes the handler again
        """
        self._handlers.setdefault(event_type, []).append(handler)

        def unsubscribe():
            handlers = self._handlers.get(event_type, [])
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def publish(self, event_type: str, **data) -> int:
        """Call every handler for event_type; returns how many ran"""
        handlers = list(self._handlers.get(event_type, []))
        for handler in handlers:
            handler(**data)
        logger.debug(f"📡 [{self.scope}] Published {event_type} to {len(handlers)} handler(s)")
        return len(handlers)
