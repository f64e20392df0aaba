"""Payment schemas."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from paytrack.app.schemas.common import Money, MoneyStr, coerce_date
from paytrack.app.services.payment_status import effective_status


class PaymentRead(BaseModel):
    id: str
    purchase_id: str
    amount: Money
    due_date: date
    status: str
    paid_date: Optional[date] = None
    created_at: datetime
    created_by: str
    marked_paid_by: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_payment(cls, payment, today: date) -> "PaymentRead":
        read = cls.model_validate(payment)
        return read.model_copy(update={"status": effective_status(payment, today)})


class PaymentUpdate(BaseModel):
    amount: Optional[MoneyStr] = None
    due_date: Optional[date] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def parse_due_date(cls, v):
        return coerce_date(v)


class UpcomingPayment(BaseModel):
    id: str
    amount: Money
    due_date: date
    status: str
    product: str
    customer_id: str
    customer_name: str


class PaymentWithContact(UpcomingPayment):
    company: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class OverdueCount(BaseModel):
    count: int
