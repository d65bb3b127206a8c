"""SQLAlchemy model for the guest list."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, func

from sehra.infrastructure.database import Base


class GuestModel(Base):
    __tablename__ = "guests"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(120), nullable=True)
    phone = Column(String(30), nullable=True)
    address = Column(String(255), nullable=True)
    rsvp_status = Column(String(20), nullable=False, default="pending")
    plus_one = Column(Boolean, nullable=False, default=False)
    plus_one_name = Column(String(100), nullable=True)
    group = Column("guest_group", String(50), nullable=True)
    dietary_restrictions = Column(String(255), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())
