"""Realtime chat helpers for the infrastructure layer."""

from .manager import ChatConnectionManager, chat_frame, chat_manager, serialize_message
from .publisher import (
    RealtimeEventPublisher,
    dispatch_realtime_event,
    realtime_event_publisher,
)

__all__ = [
    "ChatConnectionManager",
    "chat_frame",
    "chat_manager",
    "RealtimeEventPublisher",
    "realtime_event_publisher",
    "dispatch_realtime_event",
    "serialize_message",
]
