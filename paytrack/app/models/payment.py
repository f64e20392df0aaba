"""Payment model: one scheduled installment of a purchase."""

import uuid

from sqlalchemy import Column, Date, DateTime, ForeignKey, Numeric, String
from sqlalchemy.orm import relationship

from paytrack.app.core.time import utc_now
from paytrack.app.db.base_class import Base


class Payment(Base):
    __tablename__ = "payments"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    purchase_id = Column(String(36), ForeignKey("purchases.id", ondelete="CASCADE"), nullable=False, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    due_date = Column(Date, nullable=False, index=True)
    # paid, upcoming or overdue as of the last write
    status = Column(String(20), nullable=False)
    paid_date = Column(Date, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    created_by = Column(String(36), nullable=False)
    marked_paid_by = Column(String(36), nullable=True)

    purchase = relationship("Purchase", back_populates="payments")
