"""Payment endpoints: mark-paid, edits and dashboard rollups."""

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from paytrack.app.core.settings import get_settings
from paytrack.app.core.time import utc_today
from paytrack.app.db.session import get_db
from paytrack.app.dependencies.auth import get_current_user
from paytrack.app.models.user import User
from paytrack.app.schemas.payment import OverdueCount, PaymentRead, PaymentUpdate, PaymentWithContact, UpcomingPayment
from paytrack.app.services.kpi import (
    get_overdue_count,
    get_overdue_payments,
    get_this_month_upcoming_payments,
    get_upcoming_payments,
)
from paytrack.app.services.purchases import get_payment_for_update, mark_payment_paid, update_payment

router = APIRouter(prefix="/payments", tags=["payments"])


@router.get("/upcoming", response_model=List[UpcomingPayment])
def list_upcoming_payments(
    days: int | None = Query(default=None, ge=0, le=3650),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    days_ahead = days if days is not None else get_settings().upcoming_days
    return get_upcoming_payments(db, owner_id=current_user.id, days=days_ahead, today=utc_today())


@router.get("/this-month", response_model=List[PaymentWithContact])
def list_this_month_payments(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return get_this_month_upcoming_payments(db, owner_id=current_user.id, today=utc_today())


@router.get("/overdue", response_model=List[PaymentWithContact])
def list_overdue_payments(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return get_overdue_payments(db, owner_id=current_user.id, today=utc_today())


@router.get("/overdue-count", response_model=OverdueCount)
def overdue_payment_count(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return OverdueCount(count=get_overdue_count(db, owner_id=current_user.id, today=utc_today()))


@router.patch("/{payment_id}/mark-paid", response_model=PaymentRead)
def mark_paid(payment_id: str, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    payment = get_payment_for_update(db, payment_id=payment_id, user=current_user)
    today = utc_today()
    payment = mark_payment_paid(db, payment=payment, user=current_user, today=today)
    return PaymentRead.from_payment(payment, today)


@router.patch("/{payment_id}", response_model=PaymentRead)
def edit_payment(
    payment_id: str,
    payload: PaymentUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    payment = get_payment_for_update(db, payment_id=payment_id, user=current_user)
    today = utc_today()
    payment = update_payment(db, payment=payment, payload=payload, today=today)
    return PaymentRead.from_payment(payment, today)
