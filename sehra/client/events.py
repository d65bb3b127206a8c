"""Ordered observer registry used by the realtime channel."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

EventHandler = Callable[[Any], Any]


class EventRegistry:
    """Handlers per event name, invoked in subscription order.

    Each event keeps an insertion-ordered dict keyed by handler, so
    subscribing twice is a no-op and unsubscribing is O(1).
    """

    def __init__(self) -> None:
        self._handlers: defaultdict[str, dict[EventHandler, None]] = defaultdict(dict)

    def on(self, event: str, handler: EventHandler) -> None:
        self._handlers[event].setdefault(handler, None)

    def off(self, event: str, handler: EventHandler) -> None:
        handlers = self._handlers.get(event)
        if handlers is None:
            return
        handlers.pop(handler, None)
        if not handlers:
            del self._handlers[event]

    def handlers(self, event: str) -> list[EventHandler]:
        return list(self._handlers.get(event, ()))

    def dispatch(self, event: str, payload: Any = None) -> None:
        """Call every handler of ``event``; a failing handler does not stop the rest."""

        for handler in self.handlers(event):
            try:
                handler(payload)
            except Exception:
                logger.exception("Handler %r for event %r failed", handler, event)

    def clear(self) -> None:
        self._handlers.clear()


__all__ = ["EventHandler", "EventRegistry"]
