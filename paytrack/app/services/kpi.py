"""Per-tenant payment totals and rollups for the dashboard."""

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, List, Optional

from sqlalchemy.orm import Query, Session

from paytrack.app.core.time import as_date
from paytrack.app.models.customer import Customer
from paytrack.app.models.payment import Payment
from paytrack.app.models.purchase import Purchase
from paytrack.app.services.money import ZERO, quantize_money
from paytrack.app.services.payment_status import OVERDUE, PAID, UPCOMING, effective_status

KPI_PERIODS = ("all", "month", "year")
UPCOMING_LIMIT = 10


@dataclass(frozen=True)
class KpiTotals:
    total_paid: Decimal
    total_overdue: Decimal


def period_start(period: str, today: date) -> Optional[date]:
    if period == "month":
        return today.replace(day=1)
    if period == "year":
        return today.replace(month=1, day=1)
    if period == "all":
        return None
    raise ValueError(f"Unsupported period: {period}")


def month_bounds(today: date) -> tuple[date, date]:
    last_day = calendar.monthrange(today.year, today.month)[1]
    return today.replace(day=1), today.replace(day=last_day)


def compute_totals(payments: Iterable[Payment], period: str, today: date) -> KpiTotals:
    """Sum paid and overdue amounts.

    The paid total honours the reporting period through ``paid_date``; the
    overdue total is always as of ``today`` and ignores the period.
    """
    filter_date = period_start(period, today)
    total_paid = ZERO
    total_overdue = ZERO

    for payment in payments:
        amount = Decimal(str(payment.amount or 0))
        status = effective_status(payment, today)
        if status == PAID:
            if filter_date is None or (payment.paid_date is not None and as_date(payment.paid_date) >= filter_date):
                total_paid += amount
        elif status == OVERDUE:
            total_overdue += amount

    return KpiTotals(total_paid=quantize_money(total_paid), total_overdue=quantize_money(total_overdue))


def _owner_payments(db: Session, owner_id: str) -> Query:
    return (
        db.query(Payment, Purchase, Customer)
        .join(Purchase, Payment.purchase_id == Purchase.id)
        .join(Customer, Purchase.customer_id == Customer.id)
        .filter(Customer.user_id == owner_id)
    )


def _unpaid(query: Query) -> Query:
    return query.filter(Payment.status != PAID, Payment.paid_date.is_(None))


def _payment_row(payment: Payment, purchase: Purchase, customer: Customer, today: date, with_contact: bool) -> dict:
    row = {
        "id": payment.id,
        "amount": quantize_money(payment.amount),
        "due_date": payment.due_date,
        "status": effective_status(payment, today),
        "product": purchase.product,
        "customer_id": customer.id,
        "customer_name": customer.name,
    }
    if with_contact:
        row.update({"company": customer.company, "email": customer.email, "phone": customer.phone})
    return row


def get_kpi_totals(db: Session, *, owner_id: str, period: str, today: date) -> KpiTotals:
    payments = [payment for payment, _, _ in _owner_payments(db, owner_id).all()]
    return compute_totals(payments, period, today)


def get_overdue_count(db: Session, *, owner_id: str, today: date) -> int:
    return _unpaid(_owner_payments(db, owner_id)).filter(Payment.due_date < today).count()


def get_upcoming_payments(db: Session, *, owner_id: str, days: int, today: date) -> List[dict]:
    """Unpaid payments due between today and ``days`` ahead, soonest first, at most ten."""
    horizon = today + timedelta(days=days)
    rows = (
        _unpaid(_owner_payments(db, owner_id))
        .filter(Payment.due_date >= today, Payment.due_date <= horizon)
        .order_by(Payment.due_date.asc(), Payment.id.asc())
        .limit(UPCOMING_LIMIT)
        .all()
    )
    return [_payment_row(payment, purchase, customer, today, with_contact=False) for payment, purchase, customer in rows]


def get_this_month_upcoming_payments(db: Session, *, owner_id: str, today: date) -> List[dict]:
    """Upcoming payments due inside the current calendar month."""
    start, end = month_bounds(today)
    rows = (
        _unpaid(_owner_payments(db, owner_id))
        .filter(Payment.due_date >= max(start, today), Payment.due_date <= end)
        .order_by(Payment.due_date.asc(), Payment.id.asc())
        .all()
    )
    return [
        _payment_row(payment, purchase, customer, today, with_contact=True)
        for payment, purchase, customer in rows
        if effective_status(payment, today) == UPCOMING
    ]


def get_overdue_payments(db: Session, *, owner_id: str, today: date) -> List[dict]:
    rows = (
        _unpaid(_owner_payments(db, owner_id))
        .filter(Payment.due_date < today)
        .order_by(Payment.due_date.asc(), Payment.id.asc())
        .all()
    )
    return [_payment_row(payment, purchase, customer, today, with_contact=True) for payment, purchase, customer in rows]
