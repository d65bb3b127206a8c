"""SQLAlchemy model for persisted chat messages."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text

from sehra.infrastructure.database import Base
from sehra.utils import now_utc_naive


class MessageModel(Base):
    """Database representation for direct messages."""

    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, index=True)
    from_user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    to_user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    message_type = Column(String(20), nullable=False, default="text")
    read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(), nullable=False, default=now_utc_naive)
    read_at = Column(DateTime(), nullable=True)


__all__ = ["MessageModel"]
