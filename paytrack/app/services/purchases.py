"""Purchase creation with its payment schedule, and payment mutations."""

import logging
from datetime import date
from decimal import Decimal

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from paytrack.app.models.customer import Customer
from paytrack.app.models.payment import Payment
from paytrack.app.models.purchase import Purchase
from paytrack.app.models.user import User
from paytrack.app.schemas.payment import PaymentUpdate
from paytrack.app.schemas.purchase import PurchaseCreate, PurchaseUpdate
from paytrack.app.services.payment_status import PAID, classify_due_date
from paytrack.app.services.schedule import generate_schedule

logger = logging.getLogger(__name__)


def create_purchase_with_schedule(db: Session, *, payload: PurchaseCreate, user: User, today: date) -> Purchase:
    """Insert a purchase and its generated payments in a single transaction."""
    purchase = Purchase(
        customer_id=payload.customer_id,
        product=payload.product,
        purchase_date=payload.purchase_date,
        initial_payment=Decimal(payload.initial_payment),
        rental_amount=Decimal(payload.rental_amount),
        rental_frequency=payload.rental_frequency,
        created_by=user.id,
    )
    drafts = generate_schedule(
        initial_payment=purchase.initial_payment,
        recurring_amount=purchase.rental_amount,
        frequency=purchase.rental_frequency,
        purchase_date=purchase.purchase_date,
        today=today,
    )
    for draft in drafts:
        purchase.payments.append(
            Payment(
                amount=draft.amount,
                due_date=draft.due_date,
                status=draft.status,
                paid_date=draft.paid_date,
                created_by=user.id,
                marked_paid_by=user.id if draft.paid_date else None,
            )
        )

    db.add(purchase)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create purchase for customer %s", payload.customer_id)
        raise
    db.refresh(purchase)
    logger.info("Created purchase %s with %d scheduled payments", purchase.id, len(drafts))
    return purchase


def _ensure_can_modify(customer: Customer | None, user: User) -> None:
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    if customer.user_id != user.id and not user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Unauthorized")


def get_purchase_for_update(db: Session, *, purchase_id: str, user: User) -> Purchase:
    purchase = db.query(Purchase).filter(Purchase.id == purchase_id).first()
    if not purchase:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Purchase not found")
    _ensure_can_modify(purchase.customer, user)
    return purchase


def get_payment_for_update(db: Session, *, payment_id: str, user: User) -> Payment:
    payment = db.query(Payment).filter(Payment.id == payment_id).first()
    if not payment:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Payment not found")
    purchase = payment.purchase
    if purchase is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Purchase not found")
    _ensure_can_modify(purchase.customer, user)
    return payment


def update_purchase(db: Session, *, purchase: Purchase, payload: PurchaseUpdate) -> Purchase:
    # Edits never regenerate the payment schedule.
    update_data = payload.model_dump(exclude_unset=True, exclude_none=True)
    for field in ("initial_payment", "rental_amount"):
        if field in update_data:
            update_data[field] = Decimal(update_data[field])
    for field, value in update_data.items():
        setattr(purchase, field, value)
    db.commit()
    db.refresh(purchase)
    return purchase


def mark_payment_paid(db: Session, *, payment: Payment, user: User, today: date) -> Payment:
    payment.status = PAID
    payment.paid_date = today
    payment.marked_paid_by = user.id
    db.commit()
    db.refresh(payment)
    logger.info("Payment %s marked paid by %s", payment.id, user.id)
    return payment


def update_payment(db: Session, *, payment: Payment, payload: PaymentUpdate, today: date) -> Payment:
    if payload.amount is not None:
        payment.amount = Decimal(payload.amount)
    if payload.due_date is not None:
        payment.due_date = payload.due_date
        if payment.status != PAID and payment.paid_date is None:
            payment.status = classify_due_date(payment.due_date, today)
    db.commit()
    db.refresh(payment)
    return payment
