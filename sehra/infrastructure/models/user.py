"""SQLAlchemy model for the user table."""

from sqlalchemy import Column, Date, DateTime, Float, ForeignKey, Integer, String, func

from sehra.infrastructure.database import Base


class UserModel(Base):
    """Database representation of a Sehra account."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(120), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    name = Column(String(100), nullable=False)
    role = Column(String(20), nullable=False, index=True)
    package = Column(String(20), nullable=True)
    wedding_date = Column(Date, nullable=True)
    budget = Column(Float, nullable=True)
    location = Column(String(120), nullable=True)
    partner_name = Column(String(100), nullable=True)
    supervisor_id = Column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())
