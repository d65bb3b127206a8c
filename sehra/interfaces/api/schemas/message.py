"""Chat message schemas, over HTTP and the realtime channel."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from sehra.application.use_cases.messages import MAX_MESSAGE_LENGTH
from sehra.domain.entities import MessageCategory


class MessageRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    from_user_id: int
    to_user_id: int
    content: str
    message_type: MessageCategory
    read: bool
    created_at: datetime | None
    read_at: datetime | None


class UnreadCountResponse(BaseModel):
    count: int
    by_sender: dict[int, int] = Field(default_factory=dict)


class WsInbound(BaseModel):
    """Envelope of every frame a client sends over ``/ws``."""

    type: str
    data: dict[str, Any] = Field(default_factory=dict)


class AuthenticatePayload(BaseModel):
    token: str = Field(..., min_length=1)


class SendMessagePayload(BaseModel):
    to_user_id: int
    content: str = Field(..., min_length=1, max_length=MAX_MESSAGE_LENGTH)
    message_type: MessageCategory = MessageCategory.TEXT


class MarkReadPayload(BaseModel):
    from_user_id: int


class SupervisorAllocatedPayload(BaseModel):
    client_id: int
    supervisor_id: int
