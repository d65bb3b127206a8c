"""SQLAlchemy model for vendor profiles."""

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from sehra.infrastructure.database import Base


class VendorProfileModel(Base):
    """Database representation of a vendor's business profile."""

    __tablename__ = "vendor_profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    business_name = Column(String(150), nullable=False)
    description = Column(Text, nullable=True)
    vendor_type = Column(String(30), nullable=False, index=True)
    contact_email = Column(String(120), nullable=True)
    contact_phone = Column(String(30), nullable=True)
    address = Column(String(255), nullable=True)
    website = Column(String(255), nullable=True)
    services = Column(JSON, nullable=False, default=list)
    pricing = Column(JSON, nullable=False, default=dict)
    rating = Column(Float, nullable=False, default=0.0)
    featured = Column(Boolean, nullable=False, default=False)
    verified = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())

    user = relationship("UserModel", lazy="joined")
