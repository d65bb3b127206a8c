"""SQLAlchemy model for budget lines."""

from sqlalchemy import Boolean, Column, Date, DateTime, Float, ForeignKey, Integer, String, Text, func

from sehra.infrastructure.database import Base


class BudgetItemModel(Base):
    __tablename__ = "budget_items"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    category = Column(String(50), nullable=False)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    estimated_cost = Column(Float, nullable=False)
    actual_cost = Column(Float, nullable=True)
    paid_amount = Column(Float, nullable=False, default=0.0)
    vendor_id = Column(Integer, ForeignKey("vendor_profiles.id", ondelete="SET NULL"), nullable=True)
    due_date = Column(Date, nullable=True)
    is_paid = Column(Boolean, nullable=False, default=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())
