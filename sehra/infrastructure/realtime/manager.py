"""Per-user rooms of chat websockets and the events pushed into them."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, DefaultDict, Set

from fastapi import WebSocket

from sehra.domain.entities import Message

logger = logging.getLogger(__name__)


def chat_frame(event_type: str, data: Any) -> dict[str, Any]:
    """Wrap ``data`` in the ``{"type", "data"}`` envelope used on ``/ws``."""

    return {"type": event_type, "data": data}


def serialize_message(message: Message, *, sender_name: str | None = None) -> dict[str, Any]:
    """Return the websocket payload representation for ``message``."""

    payload: dict[str, Any] = {
        "id": message.id,
        "from_user_id": message.from_user_id,
        "to_user_id": message.to_user_id,
        "content": message.content,
        "message_type": message.message_type.value,
        "read": message.read,
        "created_at": message.created_at.isoformat() if message.created_at else None,
    }
    if sender_name is not None:
        payload["sender_name"] = sender_name
    return payload


class ChatConnectionManager:
    """Rooms of authenticated chat sockets, one room per user.

    A user may hold several sockets (tabs, devices); every event addressed to
    the user reaches all of them.
    """

    def __init__(self) -> None:
        self._rooms: DefaultDict[int, Set[WebSocket]] = defaultdict(set)

    def join(self, user_id: int, websocket: WebSocket) -> None:
        """Put an authenticated ``websocket`` in the room of ``user_id``."""

        self._rooms[user_id].add(websocket)
        logger.info("User %s joined the chat", user_id)

    def leave(self, user_id: int, websocket: WebSocket) -> None:
        room = self._rooms.get(user_id)
        if room is None:
            return
        room.discard(websocket)
        if not room:
            self._rooms.pop(user_id, None)
            logger.info("User %s left the chat", user_id)

    def is_online(self, user_id: int) -> bool:
        return bool(self._rooms.get(user_id))

    async def publish(self, user_id: int, event_type: str, data: Any) -> int:
        """Send one event to every socket of ``user_id``; return how many got it.

        Sockets that fail to receive are dropped from the room.
        """

        delivered = 0
        for websocket in list(self._rooms.get(user_id, set())):
            try:
                await websocket.send_json(chat_frame(event_type, data))
            except Exception:
                logger.warning("Dropping stale chat socket for user %s", user_id)
                self.leave(user_id, websocket)
            else:
                delivered += 1
        return delivered

    async def deliver_message(
        self, message: Message, *, sender_name: str, recipient_unread: int
    ) -> bool:
        """Hand ``message`` to its recipient along with their new unread count.

        Returns ``False`` when the recipient has no open socket; the message
        stays stored and unread either way.
        """

        delivered = await self.publish(
            message.to_user_id,
            "receive_message",
            serialize_message(message, sender_name=sender_name),
        )
        if delivered:
            await self.push_unread_count(message.to_user_id, recipient_unread)
        return bool(delivered)

    async def push_unread_count(self, user_id: int, count: int) -> None:
        await self.publish(user_id, "unread_count", {"count": count})

    async def notify_read(self, *, reader_id: int, sender_id: int) -> None:
        """Tell ``sender_id`` that ``reader_id`` has read their messages."""

        await self.publish(
            sender_id,
            "message_status_update",
            {"reader_id": reader_id, "from_user_id": sender_id, "read": True},
        )


chat_manager = ChatConnectionManager()


__all__ = ["ChatConnectionManager", "chat_frame", "chat_manager", "serialize_message"]
