"""Customer schemas for PayTrack."""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from paytrack.app.schemas.common import Money, blank_to_none
from paytrack.app.schemas.purchase import PurchaseWithPayments


class CustomerBase(BaseModel):
    name: str = Field(min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    company: Optional[str] = None

    @field_validator("email", "phone", "company", mode="before")
    @classmethod
    def empty_as_missing(cls, v):
        return blank_to_none(v)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v


class CustomerCreate(CustomerBase):
    pass


class CustomerUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    company: Optional[str] = None

    @field_validator("email", "phone", "company", mode="before")
    @classmethod
    def empty_as_missing(cls, v):
        return blank_to_none(v)


class CustomerRead(CustomerBase):
    id: str
    user_id: str
    created_at: datetime
    created_by: str

    model_config = ConfigDict(from_attributes=True)


class CustomerSummary(CustomerRead):
    next_payment_date: Optional[date] = None
    next_payment_amount: Optional[Money] = None
    total_overdue: Money
    total_paid: Money


class CustomerDetail(CustomerRead):
    purchases: List[PurchaseWithPayments] = []
