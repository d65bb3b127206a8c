"""SQLAlchemy model for vendors a supervisor recommends to a client."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint, func

from sehra.infrastructure.database import Base


class VendorAssignmentModel(Base):
    __tablename__ = "vendor_assignments"
    __table_args__ = (UniqueConstraint("client_id", "vendor_user_id", name="uq_vendor_assignment"),)

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    vendor_user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    assigned_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    assigned_at = Column(DateTime, nullable=False, server_default=func.now())
