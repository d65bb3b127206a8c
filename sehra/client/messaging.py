"""Outbound chat actions built on the realtime channel."""

from __future__ import annotations

import logging

from sehra.domain.entities import MessageCategory

from .channel import ChannelNotConnectedError, RealtimeChannelClient
from .notifications import NotificationState
from .toasts import Toaster, ToastVariant

logger = logging.getLogger(__name__)


class Messenger:
    def __init__(
        self,
        channel: RealtimeChannelClient,
        notifications: NotificationState,
        toaster: Toaster,
    ) -> None:
        self._channel = channel
        self._notifications = notifications
        self._toaster = toaster

    async def send_message(
        self,
        to_user_id: int,
        content: str,
        message_type: MessageCategory | str = MessageCategory.TEXT,
    ) -> bool:
        """Emit ``send_message``; returns ``False`` and toasts when offline."""

        try:
            await self._channel.emit(
                "send_message",
                {
                    "to_user_id": to_user_id,
                    "content": content,
                    "message_type": MessageCategory(message_type).value,
                },
            )
        except ChannelNotConnectedError:
            self._toaster.show(
                "Not connected",
                "Your message was not sent. Check your connection and try again.",
                ToastVariant.DESTRUCTIVE,
            )
            return False
        return True

    async def mark_read(self, from_user_id: int) -> int:
        """Mark the conversation read locally, then tell the server.

        The local change is kept even when the receipt cannot be sent.
        """

        changed = self._notifications.mark_read(from_user_id)
        try:
            await self._channel.emit("mark_read", {"from_user_id": from_user_id})
        except ChannelNotConnectedError as exc:
            logger.warning("Read receipt for user %s not delivered: %s", from_user_id, exc)
        return changed


__all__ = ["Messenger"]
