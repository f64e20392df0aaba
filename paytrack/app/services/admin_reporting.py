"""Admin-level user statistics and activity log."""

import logging
from datetime import datetime, time, timezone
from typing import Dict, List

from fastapi import HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session

from paytrack.app.models.customer import Customer
from paytrack.app.models.payment import Payment
from paytrack.app.models.purchase import Purchase
from paytrack.app.models.user import User
from paytrack.app.schemas.admin import ActivityLogEntry
from paytrack.app.schemas.user import AdminUserRead
from paytrack.app.services.money import format_money
from paytrack.app.services.payment_status import PAID

logger = logging.getLogger(__name__)


def _counts_by(db: Session, column) -> Dict[str, int]:
    return {key: count for key, count in db.query(column, func.count()).group_by(column).all() if key is not None}


def get_users_with_stats(db: Session) -> List[AdminUserRead]:
    customers_created = _counts_by(db, Customer.created_by)
    purchases_created = _counts_by(db, Purchase.created_by)
    payments_marked = _counts_by(db, Payment.marked_paid_by)

    rows = []
    for user in db.query(User).order_by(User.created_at.desc()).all():
        rows.append(
            AdminUserRead(
                id=user.id,
                username=user.username,
                role=user.role,
                is_active=user.is_active,
                created_at=user.created_at,
                created_by=user.created_by,
                customers_created=customers_created.get(user.id, 0),
                purchases_created=purchases_created.get(user.id, 0),
                payments_marked=payments_marked.get(user.id, 0),
            )
        )
    return rows


def delete_user(db: Session, *, user: User, current_admin: User) -> None:
    """Delete a user and, through cascades, all of their customers."""
    if user.is_admin:
        admin_count = db.query(User).filter(User.role == "admin").count()
        if admin_count <= 1:
            raise HTTPException(status_code=400, detail="Cannot delete the last admin user")
    db.delete(user)
    db.commit()
    logger.info("Admin %s deleted user %s", current_admin.id, user.id)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def get_activity_log(db: Session, *, limit: int = 50) -> List[ActivityLogEntry]:
    """Merge recent customer, purchase and mark-paid events, newest first."""
    usernames = {user_id: username for user_id, username in db.query(User.id, User.username).all()}
    entries: List[ActivityLogEntry] = []

    for customer in db.query(Customer).order_by(Customer.created_at.desc()).limit(limit).all():
        entries.append(
            ActivityLogEntry(
                id=f"customer-{customer.id}",
                type="customer_created",
                entity_id=customer.id,
                entity_name=customer.name,
                user_id=customer.created_by,
                username=usernames.get(customer.created_by, "Unknown"),
                created_at=_as_utc(customer.created_at),
            )
        )

    purchase_rows = (
        db.query(Purchase, Customer.name)
        .outerjoin(Customer, Purchase.customer_id == Customer.id)
        .order_by(Purchase.created_at.desc())
        .limit(limit)
        .all()
    )
    for purchase, customer_name in purchase_rows:
        entries.append(
            ActivityLogEntry(
                id=f"purchase-{purchase.id}",
                type="purchase_created",
                entity_id=purchase.id,
                entity_name=f"{purchase.product} for {customer_name}",
                user_id=purchase.created_by,
                username=usernames.get(purchase.created_by, "Unknown"),
                created_at=_as_utc(purchase.created_at),
            )
        )

    payment_rows = (
        db.query(Payment, Purchase.product, Customer.name)
        .outerjoin(Purchase, Payment.purchase_id == Purchase.id)
        .outerjoin(Customer, Purchase.customer_id == Customer.id)
        .filter(Payment.status == PAID, Payment.marked_paid_by.isnot(None))
        .order_by(Payment.paid_date.desc())
        .limit(limit)
        .all()
    )
    for payment, product, customer_name in payment_rows:
        if payment.paid_date:
            paid_at = datetime.combine(payment.paid_date, time.min, tzinfo=timezone.utc)
        else:
            paid_at = _as_utc(payment.created_at)
        entries.append(
            ActivityLogEntry(
                id=f"payment-{payment.id}",
                type="payment_marked_paid",
                entity_id=payment.id,
                entity_name=f"${format_money(payment.amount)} - {product} for {customer_name}",
                user_id=payment.marked_paid_by,
                username=usernames.get(payment.marked_paid_by, "Unknown"),
                created_at=paid_at,
            )
        )

    entries.sort(key=lambda entry: entry.created_at, reverse=True)
    return entries[:limit]
