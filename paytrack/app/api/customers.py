"""Customer endpoints for PayTrack."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session, selectinload

from paytrack.app.core.time import utc_today
from paytrack.app.crud.crud_customer import customer_crud
from paytrack.app.db.session import get_db
from paytrack.app.dependencies.auth import get_current_user
from paytrack.app.models.customer import Customer
from paytrack.app.models.purchase import Purchase
from paytrack.app.models.user import User
from paytrack.app.schemas.customer import CustomerCreate, CustomerDetail, CustomerRead, CustomerSummary, CustomerUpdate
from paytrack.app.schemas.customer_import import BulkImportRequest, BulkImportResult
from paytrack.app.services.customer_import import import_customers_csv
from paytrack.app.services.customers import build_customer_detail, build_customer_summaries

router = APIRouter(prefix="/customers", tags=["customers"])


def _get_owned_customer(db: Session, customer_id: str, owner_id: str) -> Customer:
    customer = customer_crud.get(db, customer_id=customer_id, owner_id=owner_id)
    if not customer:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    return customer


@router.get("/", response_model=List[CustomerSummary])
def list_customers(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    customers = (
        db.query(Customer)
        .options(selectinload(Customer.purchases).selectinload(Purchase.payments))
        .filter(Customer.user_id == current_user.id)
        .order_by(Customer.created_at.desc())
        .all()
    )
    return build_customer_summaries(customers, utc_today())


@router.post("/", response_model=CustomerRead, status_code=status.HTTP_201_CREATED)
def create_customer(
    customer_in: CustomerCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return customer_crud.create(db, obj_in=customer_in, owner_id=current_user.id)


@router.post("/bulk-import", response_model=BulkImportResult)
def bulk_import_customers(
    payload: BulkImportRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if not payload.csv_data or not payload.csv_data.strip():
        raise HTTPException(status_code=400, detail="CSV data is required")
    return import_customers_csv(db, csv_text=payload.csv_data, owner_id=current_user.id)


@router.get("/{customer_id}", response_model=CustomerDetail)
def get_customer(customer_id: str, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    customer = _get_owned_customer(db, customer_id, current_user.id)
    return build_customer_detail(customer, utc_today())


@router.patch("/{customer_id}", response_model=CustomerRead)
def update_customer(
    customer_id: str,
    customer_in: CustomerUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    customer = _get_owned_customer(db, customer_id, current_user.id)
    return customer_crud.update(db, db_obj=customer, obj_in=customer_in)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(customer_id: str, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    customer = _get_owned_customer(db, customer_id, current_user.id)
    customer_crud.delete(db, db_obj=customer)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
