"""Customer model for PayTrack."""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, String
from sqlalchemy.orm import relationship

from paytrack.app.core.time import utc_now
from paytrack.app.db.base_class import Base


class Customer(Base):
    __tablename__ = "customers"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    company = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    created_by = Column(String(36), nullable=False)

    owner = relationship("User", back_populates="customers", foreign_keys=[user_id])
    purchases = relationship(
        "Purchase",
        back_populates="customer",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Purchase.purchase_date.desc()",
    )
