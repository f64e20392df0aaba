"""Purchase endpoints: creating a purchase generates its payment schedule."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from paytrack.app.core.time import utc_today
from paytrack.app.crud.crud_customer import customer_crud
from paytrack.app.db.session import get_db
from paytrack.app.dependencies.auth import get_current_user
from paytrack.app.models.purchase import Purchase
from paytrack.app.models.user import User
from paytrack.app.schemas.purchase import PurchaseCreate, PurchaseUpdate, PurchaseWithPayments
from paytrack.app.services.customers import build_purchase_with_payments
from paytrack.app.services.purchases import create_purchase_with_schedule, get_purchase_for_update, update_purchase

router = APIRouter(prefix="/purchases", tags=["purchases"])


@router.post("/", response_model=PurchaseWithPayments, status_code=status.HTTP_201_CREATED)
def create_purchase(
    payload: PurchaseCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if not customer_crud.get(db, customer_id=payload.customer_id, owner_id=current_user.id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    today = utc_today()
    purchase = create_purchase_with_schedule(db, payload=payload, user=current_user, today=today)
    return build_purchase_with_payments(purchase, today)


@router.get("/{purchase_id}", response_model=PurchaseWithPayments)
def get_purchase(purchase_id: str, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    purchase = db.query(Purchase).filter(Purchase.id == purchase_id).first()
    if not purchase or purchase.customer is None or purchase.customer.user_id != current_user.id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Purchase not found")
    return build_purchase_with_payments(purchase, utc_today())


@router.patch("/{purchase_id}", response_model=PurchaseWithPayments)
def edit_purchase(
    purchase_id: str,
    payload: PurchaseUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    purchase = get_purchase_for_update(db, purchase_id=purchase_id, user=current_user)
    purchase = update_purchase(db, purchase=purchase, payload=payload)
    return build_purchase_with_payments(purchase, utc_today())
