"""Shared fixtures for the client-side tests."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from sehra.client.channel import RealtimeChannelClient
from sehra.client.notifications import NotificationState
from sehra.client.toasts import Toaster


class FakeTransport:
    """In-memory stand-in for the websocket transport."""

    def __init__(self) -> None:
        self.sent: list[dict[str, Any]] = []
        self.listener = None
        self.url: str | None = None
        self.closed = False
        self._stopped = asyncio.Event()

    async def run(self, url: str, listener) -> None:
        self.url = url
        self.listener = listener
        await listener.handle_open()
        await self._stopped.wait()
        listener.handle_close("closed")

    async def send(self, frame: dict[str, Any]) -> None:
        if self.closed:
            raise ConnectionError("closed")
        self.sent.append(frame)

    async def close(self) -> None:
        self.closed = True
        self._stopped.set()

    async def deliver(self, event: str, data: Any = None) -> None:
        await self.listener.handle_frame({"type": event, "data": data})

    async def drop_and_reconnect(self) -> None:
        self.listener.handle_close("connection lost")
        await self.listener.handle_open()


@pytest.fixture()
def transports() -> list[FakeTransport]:
    return []


@pytest.fixture()
def transport_factory(transports):
    def _factory() -> FakeTransport:
        transport = FakeTransport()
        transports.append(transport)
        return transport

    return _factory


@pytest.fixture()
def toaster() -> Toaster:
    return Toaster(duration=60)


@pytest.fixture()
def notifications() -> NotificationState:
    return NotificationState(user_id=7)


@pytest.fixture()
def channel(notifications, toaster, transport_factory) -> RealtimeChannelClient:
    return RealtimeChannelClient(
        "ws://test/ws",
        notifications=notifications,
        toaster=toaster,
        transport_factory=transport_factory,
    )
