"""Persistence helpers for chat messages."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session

from sehra.domain.entities import Message, MessageCategory
from sehra.infrastructure.models import MessageModel
from sehra.utils import ensure_utc, now_utc_naive


class MessageRepository:
    """Provide persistence operations for :class:`Message` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, message: Message) -> Message:
        model = MessageModel(
            from_user_id=message.from_user_id,
            to_user_id=message.to_user_id,
            content=message.content,
            message_type=message.message_type.value,
            read=message.read,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_between(self, user_id: int, other_user_id: int) -> Sequence[Message]:
        query = (
            self.session.query(MessageModel)
            .filter(
                or_(
                    and_(
                        MessageModel.from_user_id == user_id,
                        MessageModel.to_user_id == other_user_id,
                    ),
                    and_(
                        MessageModel.from_user_id == other_user_id,
                        MessageModel.to_user_id == user_id,
                    ),
                )
            )
            .order_by(MessageModel.created_at, MessageModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def mark_as_read(self, *, from_user_id: int, to_user_id: int) -> int:
        """Flag every unread message from ``from_user_id`` to ``to_user_id`` as read."""

        updated = (
            self.session.query(MessageModel)
            .filter(
                MessageModel.from_user_id == from_user_id,
                MessageModel.to_user_id == to_user_id,
                MessageModel.read.is_(False),
            )
            .update(
                {MessageModel.read: True, MessageModel.read_at: now_utc_naive()},
                synchronize_session=False,
            )
        )
        self.session.commit()
        return int(updated or 0)

    def count_unread(self, user_id: int) -> int:
        return (
            self.session.query(MessageModel)
            .filter(MessageModel.to_user_id == user_id, MessageModel.read.is_(False))
            .count()
        )

    def unread_counts_by_sender(self, user_id: int) -> dict[int, int]:
        rows = (
            self.session.query(MessageModel.from_user_id)
            .filter(MessageModel.to_user_id == user_id, MessageModel.read.is_(False))
            .all()
        )
        return dict(Counter(from_user_id for (from_user_id,) in rows))

    @staticmethod
    def _to_entity(model: MessageModel) -> Message:
        return Message(
            id=model.id,
            from_user_id=model.from_user_id,
            to_user_id=model.to_user_id,
            content=model.content,
            message_type=MessageCategory(model.message_type),
            read=model.read,
            created_at=ensure_utc(model.created_at),
            read_at=ensure_utc(model.read_at),
        )


__all__ = ["MessageRepository"]
