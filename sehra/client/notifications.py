"""In-memory log of received chat messages and the derived unread counter."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable

from pydantic import BaseModel

from sehra.domain.entities import MessageCategory

from .events import EventRegistry

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 60
CHANGED = "changed"


def preview_text(body: str, limit: int = PREVIEW_LENGTH) -> str:
    """Return the first ``limit`` characters of ``body``, with ``...`` when cut."""

    if len(body) <= limit:
        return body
    return body[:limit] + "..."


class _MessagePayload(BaseModel):
    id: int
    from_user_id: int
    to_user_id: int
    content: str
    message_type: MessageCategory = MessageCategory.TEXT
    read: bool = False
    created_at: datetime | None = None
    sender_name: str | None = None


@dataclass
class NotificationMessage:
    id: int
    sender_id: int
    recipient_id: int
    body: str
    category: MessageCategory = MessageCategory.TEXT
    read: bool = False
    timestamp: datetime | None = None
    sender_name: str | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "NotificationMessage":
        """Build a message from a ``receive_message`` frame; raises ``ValueError``."""

        parsed = _MessagePayload.model_validate(payload)
        return cls(
            id=parsed.id,
            sender_id=parsed.from_user_id,
            recipient_id=parsed.to_user_id,
            body=parsed.content,
            category=parsed.message_type,
            read=parsed.read,
            timestamp=parsed.created_at,
            sender_name=parsed.sender_name,
        )


class NotificationState:
    """Ordered message log owned by the client.

    ``unread_count`` is recomputed from the log after every mutation: the
    messages addressed to ``user_id``, sent by someone else, not yet read.
    """

    def __init__(self, user_id: int | None = None, *, max_messages: int | None = None) -> None:
        if max_messages is not None and max_messages <= 0:
            raise ValueError("max_messages must be positive")
        self.user_id = user_id
        self.max_messages = max_messages
        self._messages: deque[NotificationMessage] = deque()
        self._ids: set[int] = set()
        self._unread_count = 0
        self._listeners = EventRegistry()

    @property
    def messages(self) -> tuple[NotificationMessage, ...]:
        return tuple(self._messages)

    @property
    def unread_count(self) -> int:
        return self._unread_count

    def subscribe(self, listener: Callable[["NotificationState"], Any]) -> None:
        self._listeners.on(CHANGED, listener)

    def unsubscribe(self, listener: Callable[["NotificationState"], Any]) -> None:
        self._listeners.off(CHANGED, listener)

    def append(self, message: NotificationMessage) -> bool:
        """Append ``message`` unless its id is already logged."""

        if message.id in self._ids:
            logger.debug("Ignoring duplicate message %s", message.id)
            return False

        self._messages.append(message)
        self._ids.add(message.id)
        if self.max_messages is not None:
            while len(self._messages) > self.max_messages:
                dropped = self._messages.popleft()
                self._ids.discard(dropped.id)
        self._changed()
        return True

    def mark_read(self, from_user_id: int) -> int:
        """Flag every unread message from ``from_user_id`` as read; return how many."""

        changed = 0
        for message in self._messages:
            if message.sender_id == from_user_id and not message.read:
                message.read = True
                changed += 1
        if changed:
            self._changed()
        return changed

    def bind_user(self, user_id: int | None) -> None:
        self.user_id = user_id
        self._changed()

    def reset(self) -> None:
        self._messages.clear()
        self._ids.clear()
        self.user_id = None
        self._changed()

    def _recompute_unread(self) -> int:
        me = self.user_id
        if me is None:
            return 0
        return sum(
            1
            for message in self._messages
            if message.recipient_id == me and message.sender_id != me and not message.read
        )

    def _changed(self) -> None:
        self._unread_count = self._recompute_unread()
        self._listeners.dispatch(CHANGED, self)


__all__ = ["NotificationMessage", "NotificationState", "PREVIEW_LENGTH", "preview_text"]
