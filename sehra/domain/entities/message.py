"""Domain entity representing a chat message between two users."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class MessageCategory(str, Enum):
    """Kinds of chat messages."""

    TEXT = "text"
    SYSTEM = "system"


@dataclass
class Message:
    """Direct message persisted by the chat service."""

    id: int | None
    from_user_id: int
    to_user_id: int
    content: str
    message_type: MessageCategory = MessageCategory.TEXT
    read: bool = False
    created_at: datetime | None = None
    read_at: datetime | None = None


__all__ = ["Message", "MessageCategory"]
