"""Purchase model: a product sold to a customer with its rental terms."""

import uuid

from sqlalchemy import Column, Date, DateTime, ForeignKey, Numeric, String
from sqlalchemy.orm import relationship

from paytrack.app.core.time import utc_now
from paytrack.app.db.base_class import Base


class Purchase(Base):
    __tablename__ = "purchases"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    customer_id = Column(String(36), ForeignKey("customers.id", ondelete="CASCADE"), nullable=False, index=True)
    product = Column(String, nullable=False)
    purchase_date = Column(Date, nullable=False)
    initial_payment = Column(Numeric(10, 2), nullable=False, default=0)
    rental_amount = Column(Numeric(10, 2), nullable=False, default=0)
    # one-time, monthly, quarterly or yearly
    rental_frequency = Column(String(20), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    created_by = Column(String(36), nullable=False)

    customer = relationship("Customer", back_populates="purchases")
    payments = relationship(
        "Payment",
        back_populates="purchase",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Payment.due_date.asc()",
    )
