"""Admin cross-tenant reporting endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session, selectinload

from paytrack.app.core.time import utc_today
from paytrack.app.db.session import get_db
from paytrack.app.dependencies.auth import get_current_admin
from paytrack.app.models.customer import Customer
from paytrack.app.models.purchase import Purchase
from paytrack.app.models.user import User
from paytrack.app.schemas.admin import ActivityLogEntry
from paytrack.app.schemas.customer import CustomerSummary
from paytrack.app.services.admin_reporting import get_activity_log
from paytrack.app.services.customers import build_customer_summaries

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/customers", response_model=List[CustomerSummary])
def list_all_customers(db: Session = Depends(get_db), current_admin: User = Depends(get_current_admin)):
    customers = (
        db.query(Customer)
        .options(selectinload(Customer.purchases).selectinload(Purchase.payments))
        .order_by(Customer.created_at.desc())
        .all()
    )
    return build_customer_summaries(customers, utc_today())


@router.get("/activity", response_model=List[ActivityLogEntry])
def read_activity_log(
    limit: int = Query(default=50, ge=1, le=500),
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    return get_activity_log(db, limit=limit)
