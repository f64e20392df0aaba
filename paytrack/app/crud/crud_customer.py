"""CRUD operations for customers, always scoped to the owning user."""

from typing import Optional

from sqlalchemy.orm import Session

from paytrack.app.models.customer import Customer
from paytrack.app.schemas.customer import CustomerCreate, CustomerUpdate


class CRUDCustomer:
    def create(self, db: Session, *, obj_in: CustomerCreate, owner_id: str) -> Customer:
        obj = Customer(user_id=owner_id, created_by=owner_id, **obj_in.model_dump())
        db.add(obj)
        db.commit()
        db.refresh(obj)
        return obj

    def get(self, db: Session, *, customer_id: str, owner_id: str) -> Optional[Customer]:
        return db.query(Customer).filter(Customer.id == customer_id, Customer.user_id == owner_id).first()

    def update(self, db: Session, *, db_obj: Customer, obj_in: CustomerUpdate) -> Customer:
        update_data = obj_in.model_dump(exclude_unset=True)
        if update_data.get("name") is None:
            update_data.pop("name", None)
        for field, value in update_data.items():
            setattr(db_obj, field, value)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, db_obj: Customer) -> Customer:
        db.delete(db_obj)
        db.commit()
        return db_obj


customer_crud = CRUDCustomer()
