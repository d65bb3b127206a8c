"""Use cases for direct chat messages."""

from sqlalchemy.orm import Session

from sehra.domain.entities import (
    CLIENT_ROLES,
    STAFF_ROLES,
    Message,
    MessageCategory,
    User,
    UserRole,
)
from sehra.infrastructure.realtime import dispatch_realtime_event
from sehra.infrastructure.repositories import MessageRepository, UserRepository
from sehra.utils import now_utc_naive

MAX_MESSAGE_LENGTH = 5000


def send_message(
    session: Session,
    *,
    sender_id: int,
    to_user_id: int,
    content: str,
    message_type: MessageCategory | str = MessageCategory.TEXT,
) -> Message:
    """Persist a message from ``sender_id`` to ``to_user_id``."""

    if to_user_id == sender_id:
        raise ValueError("Cannot send a message to yourself")

    text = (content or "").strip()
    if not text:
        raise ValueError("Message content is required")
    if len(text) > MAX_MESSAGE_LENGTH:
        raise ValueError("Message content is too long")

    try:
        category = MessageCategory(message_type)
    except ValueError as exc:
        raise ValueError(f"Invalid message type: {message_type}") from exc

    if UserRepository(session).get(to_user_id) is None:
        raise ValueError("Recipient not found")

    message = Message(
        id=None,
        from_user_id=sender_id,
        to_user_id=to_user_id,
        content=text,
        message_type=category,
        created_at=now_utc_naive(),
    )
    return MessageRepository(session).create(message)


def mark_conversation_read(session: Session, *, reader_id: int, from_user_id: int) -> int:
    """Mark every message ``from_user_id`` sent to ``reader_id`` as read."""

    return MessageRepository(session).mark_as_read(
        from_user_id=from_user_id, to_user_id=reader_id
    )


def list_conversation(
    session: Session, *, user_id: int, other_user_id: int
) -> list[Message]:
    """Return the conversation with ``other_user_id`` and mark incoming messages read.

    When anything was newly read, the other party receives a
    ``message_status_update`` event.
    """

    if UserRepository(session).get(other_user_id) is None:
        raise ValueError("User not found")

    marked = mark_conversation_read(session, reader_id=user_id, from_user_id=other_user_id)
    if marked:
        dispatch_realtime_event(
            [other_user_id],
            event_type="message_status_update",
            payload={"reader_id": user_id, "from_user_id": other_user_id, "read": True},
        )
    return list(MessageRepository(session).list_between(user_id, other_user_id))


def count_unread(session: Session, *, user_id: int) -> int:
    return MessageRepository(session).count_unread(user_id)


def unread_counts_by_sender(session: Session, *, user_id: int) -> dict[int, int]:
    return MessageRepository(session).unread_counts_by_sender(user_id)


def _contact_roles(user: User) -> set[UserRole]:
    if user.is_client():
        return set(STAFF_ROLES)
    if user.role == UserRole.VENDOR:
        return set(CLIENT_ROLES) | {UserRole.SUPERVISOR, UserRole.ADMIN}
    return set(UserRole)


def list_chat_contacts(session: Session, *, user: User) -> list[User]:
    """Return the users ``user`` may chat with, excluding ``user`` itself."""

    candidates = UserRepository(session).list_by_roles(_contact_roles(user))
    return [candidate for candidate in candidates if candidate.id != user.id]


__all__ = [
    "MAX_MESSAGE_LENGTH",
    "send_message",
    "mark_conversation_read",
    "list_conversation",
    "count_unread",
    "unread_counts_by_sender",
    "list_chat_contacts",
]
