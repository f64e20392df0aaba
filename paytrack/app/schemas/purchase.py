"""Purchase schemas."""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from paytrack.app.schemas.common import Money, MoneyStr, coerce_date
from paytrack.app.schemas.payment import PaymentRead


class PurchaseCreate(BaseModel):
    customer_id: str
    product: str = Field(min_length=1)
    purchase_date: date
    initial_payment: MoneyStr = "0"
    rental_amount: MoneyStr
    # Unknown values are accepted and produce no recurring payments.
    rental_frequency: str

    @field_validator("purchase_date", mode="before")
    @classmethod
    def parse_purchase_date(cls, v):
        return coerce_date(v)


class PurchaseUpdate(BaseModel):
    product: Optional[str] = Field(default=None, min_length=1)
    purchase_date: Optional[date] = None
    initial_payment: Optional[MoneyStr] = None
    rental_amount: Optional[MoneyStr] = None
    rental_frequency: Optional[str] = None

    @field_validator("purchase_date", mode="before")
    @classmethod
    def parse_purchase_date(cls, v):
        return coerce_date(v)


class PurchaseRead(BaseModel):
    id: str
    customer_id: str
    product: str
    purchase_date: date
    initial_payment: Money
    rental_amount: Money
    rental_frequency: str
    created_at: datetime
    created_by: str

    model_config = ConfigDict(from_attributes=True)


class PurchaseWithPayments(PurchaseRead):
    payments: List[PaymentRead] = []
