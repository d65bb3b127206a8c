"""Helpers to broadcast realtime events to connected clients."""

from __future__ import annotations

import asyncio
import copy
import logging
from typing import Any, Iterable, Set

from anyio import from_thread

from .manager import ChatConnectionManager, chat_manager

logger = logging.getLogger(__name__)


class RealtimeEventPublisher:
    """Dispatch structured realtime events to websocket subscribers."""

    def __init__(self, manager: ChatConnectionManager) -> None:
        self._manager = manager

    def dispatch(self, user_id: int, *, event_type: str, payload: Any) -> None:
        """Schedule a realtime ``event_type`` event for ``user_id``."""

        if not user_id:
            return

        self._schedule_send(user_id, event_type, copy.deepcopy(payload))

    def dispatch_many(
        self,
        user_ids: Iterable[int],
        *,
        event_type: str,
        payload: Any,
    ) -> None:
        """Broadcast an event to multiple ``user_ids``."""

        seen: Set[int] = set()
        for user_id in user_ids:
            if not user_id or user_id in seen:
                continue
            seen.add(user_id)
            self.dispatch(user_id, event_type=event_type, payload=payload)

    def _schedule_send(self, user_id: int, event_type: str, data: Any) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Sync route handlers run in a worker thread of the server's loop.
            try:
                from_thread.run(self._manager.publish, user_id, event_type, data)
            except RuntimeError:
                logger.debug(
                    "No event loop available; realtime push to user %s skipped", user_id
                )
        else:
            loop.create_task(self._manager.publish(user_id, event_type, data))


realtime_event_publisher = RealtimeEventPublisher(chat_manager)


def dispatch_realtime_event(
    user_ids: Iterable[int], *, event_type: str, payload: Any
) -> None:
    """Public helper to broadcast realtime events to ``user_ids``."""

    realtime_event_publisher.dispatch_many(
        user_ids, event_type=event_type, payload=payload
    )


__all__ = [
    "RealtimeEventPublisher",
    "realtime_event_publisher",
    "dispatch_realtime_event",
]
