"""Transport seam for the realtime channel and its websocket implementation."""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

from websockets.asyncio.client import ClientConnection, connect
from websockets.exceptions import ConnectionClosed

logger = logging.getLogger(__name__)

Frame = dict[str, Any]


class ChannelListener(Protocol):
    async def handle_open(self) -> None: ...

    async def handle_frame(self, frame: Frame) -> None: ...

    def handle_close(self, reason: str | None) -> None: ...


class ChannelTransport(Protocol):
    """What the realtime channel needs from a connection.

    ``run`` keeps the connection alive, reconnecting as it sees fit, and
    reports every (re)connection, inbound frame and drop to ``listener``.
    It returns once ``close`` has been called.
    """

    async def run(self, url: str, listener: ChannelListener) -> None: ...

    async def send(self, frame: Frame) -> None: ...

    async def close(self) -> None: ...


def decode_frame(raw: str | bytes) -> Frame | None:
    """Parse a ``{"type": ..., "data": ...}`` envelope, ``None`` when malformed."""

    try:
        frame = json.loads(raw)
    except ValueError:
        return None
    if not isinstance(frame, dict) or not isinstance(frame.get("type"), str):
        return None
    return frame


class WebSocketTransport:
    """``websockets`` client whose ``connect`` iterator supplies the retry policy."""

    def __init__(self, **connect_options: Any) -> None:
        self._connect_options = connect_options
        self._connection: ClientConnection | None = None
        self._closing = False

    async def run(self, url: str, listener: ChannelListener) -> None:
        self._closing = False
        async for connection in connect(url, **self._connect_options):
            if self._closing:
                await connection.close()
                break
            self._connection = connection
            reason: str | None = None
            try:
                await listener.handle_open()
                async for raw in connection:
                    frame = decode_frame(raw)
                    if frame is None:
                        logger.warning("Ignoring malformed realtime frame")
                        continue
                    try:
                        await listener.handle_frame(frame)
                    except ConnectionError:
                        raise
                    except Exception:
                        logger.exception("Realtime listener failed on %s frame", frame["type"])
            except (ConnectionClosed, ConnectionError) as exc:
                reason = str(exc) or type(exc).__name__
            finally:
                self._connection = None

            listener.handle_close(reason)
            if self._closing:
                break
            logger.info("Realtime connection to %s lost; reconnecting", url)

    async def send(self, frame: Frame) -> None:
        connection = self._connection
        if connection is None:
            raise ConnectionError("Websocket is not open")
        try:
            await connection.send(json.dumps(frame))
        except ConnectionClosed as exc:
            raise ConnectionError(str(exc)) from exc

    async def close(self) -> None:
        self._closing = True
        if self._connection is not None:
            await self._connection.close()


__all__ = [
    "ChannelListener",
    "ChannelTransport",
    "Frame",
    "WebSocketTransport",
    "decode_frame",
]
