"""Realtime channel client: one authenticated connection per session."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

from .events import EventHandler, EventRegistry
from .notifications import NotificationMessage, NotificationState, preview_text
from .toasts import Toaster, ToastVariant
from .transport import ChannelTransport, Frame, WebSocketTransport

logger = logging.getLogger(__name__)


class ChannelState(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    AUTHENTICATED = "authenticated"


_OPEN_STATES = (ChannelState.CONNECTED, ChannelState.AUTHENTICATED)


class ChannelNotConnectedError(ConnectionError):
    """Raised by :meth:`RealtimeChannelClient.emit` when there is no open connection."""


def _message_of(data: Any, default: str) -> str:
    if isinstance(data, str) and data:
        return data
    if isinstance(data, dict) and isinstance(data.get("message"), str):
        return data["message"]
    return default


class _Listener:
    """Forward transport callbacks only while ``transport`` is the active one."""

    def __init__(self, channel: "RealtimeChannelClient", transport: ChannelTransport) -> None:
        self._channel = channel
        self._transport = transport

    def _active(self) -> bool:
        return self._channel._transport is self._transport

    async def handle_open(self) -> None:
        if self._active():
            await self._channel._on_open()

    async def handle_frame(self, frame: Frame) -> None:
        if self._active():
            await self._channel._on_frame(frame)

    def handle_close(self, reason: str | None) -> None:
        if self._active():
            self._channel._on_close(reason)


class RealtimeChannelClient:
    """Keep a realtime connection alive for the current session.

    Every (re)connection re-sends ``authenticate``. Inbound
    ``receive_message`` frames are appended to ``notifications`` before
    subscribers of the event run.
    """

    def __init__(
        self,
        url: str,
        *,
        notifications: NotificationState,
        toaster: Toaster | None = None,
        transport_factory: Callable[[], ChannelTransport] = WebSocketTransport,
    ) -> None:
        self.url = url
        self._notifications = notifications
        self._toaster = toaster
        self._transport_factory = transport_factory
        self._events = EventRegistry()
        self._state = ChannelState.DISCONNECTED
        self._token: str | None = None
        self._transport: ChannelTransport | None = None
        self._task: asyncio.Task | None = None

    @property
    def state(self) -> ChannelState:
        return self._state

    @property
    def connected(self) -> bool:
        return self._state in _OPEN_STATES

    @property
    def token(self) -> str | None:
        return self._token

    def on(self, event: str, handler: EventHandler) -> None:
        self._events.on(event, handler)

    def off(self, event: str, handler: EventHandler) -> None:
        self._events.off(event, handler)

    async def connect(self, token: str) -> None:
        """Open the connection for ``token``; a no-op while one for it is alive."""

        if self._task is not None and not self._task.done():
            if token == self._token:
                return
            await self.disconnect()

        transport = self._transport_factory()
        self._token = token
        self._transport = transport
        self._set_state(ChannelState.CONNECTING)
        self._task = asyncio.get_running_loop().create_task(self._run(transport))

    async def disconnect(self) -> None:
        """Close the connection; safe when already disconnected."""

        transport, task = self._transport, self._task
        self._transport = None
        self._task = None
        self._token = None

        if transport is not None:
            await transport.close()
        if task is not None and not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task

        if self._state is not ChannelState.DISCONNECTED:
            self._set_state(ChannelState.DISCONNECTED)
            self._events.dispatch("disconnect", {"reason": "client disconnect"})

    async def emit(self, event: str, payload: dict[str, Any] | None = None) -> None:
        """Send ``event``; raises :class:`ChannelNotConnectedError` instead of queuing."""

        transport = self._transport
        if transport is None or not self.connected:
            raise ChannelNotConnectedError(f"Cannot send {event!r}: realtime channel is not connected")
        try:
            await transport.send({"type": event, "data": payload or {}})
        except ConnectionError as exc:
            raise ChannelNotConnectedError(f"Cannot send {event!r}: {exc}") from exc

    async def _run(self, transport: ChannelTransport) -> None:
        try:
            await transport.run(self.url, _Listener(self, transport))
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            logger.warning("Realtime transport for %s stopped: %s", self.url, exc)
            if self._transport is transport:
                self._on_close(str(exc))
                self._events.dispatch("error", {"message": str(exc)})

    def _set_state(self, state: ChannelState) -> None:
        if state is not self._state:
            logger.debug("Realtime channel %s -> %s", self._state.value, state.value)
            self._state = state

    def _toast(self, title: str, description: str | None = None, variant=ToastVariant.DEFAULT) -> None:
        if self._toaster is not None:
            self._toaster.show(title, description, variant)

    async def _on_open(self) -> None:
        self._set_state(ChannelState.CONNECTED)
        logger.info("Realtime channel connected to %s", self.url)
        self._events.dispatch("connect", None)
        if self._token is not None and self._transport is not None:
            await self._transport.send({"type": "authenticate", "data": {"token": self._token}})

    def _on_close(self, reason: str | None) -> None:
        if self._state is ChannelState.DISCONNECTED:
            return
        self._set_state(ChannelState.DISCONNECTED)
        logger.info("Realtime channel disconnected: %s", reason or "closed")
        self._events.dispatch("disconnect", {"reason": reason})

    async def _on_frame(self, frame: Frame) -> None:
        event = frame["type"]
        data = frame.get("data")

        if event == "authenticated":
            self._set_state(ChannelState.AUTHENTICATED)
        elif event == "authentication_error":
            message = _message_of(data, "Authentication failed")
            logger.warning("Realtime authentication rejected: %s", message)
            self._toast("Chat unavailable", message, ToastVariant.DESTRUCTIVE)
            self._events.dispatch("error", {"message": message})
            # Retrying with the same token cannot succeed.
            if self._transport is not None:
                await self._transport.close()
        elif event == "error":
            self._toast("Chat error", _message_of(data, "Something went wrong"), ToastVariant.DESTRUCTIVE)
        elif event == "receive_message":
            if not self._on_receive_message(data):
                return

        self._events.dispatch(event, data)

    def _on_receive_message(self, data: Any) -> bool:
        try:
            message = NotificationMessage.from_payload(data if isinstance(data, dict) else {})
        except ValueError as exc:
            logger.warning("Dropping malformed receive_message frame: %s", exc)
            return False

        if not self._notifications.append(message):
            return False

        me = self._notifications.user_id
        if me is not None and message.recipient_id == me and message.sender_id != me:
            sender = message.sender_name or f"User {message.sender_id}"
            self._toast(f"New message from {sender}", preview_text(message.body))
        return True


__all__ = ["ChannelNotConnectedError", "ChannelState", "RealtimeChannelClient"]
