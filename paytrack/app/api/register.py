"""Handles user registration for PayTrack."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from paytrack.app.core.security import get_password_hash
from paytrack.app.db.session import get_db
from paytrack.app.models.user import User
from paytrack.app.schemas.user import UserCreate, UserRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(user_in: UserCreate, db: Session = Depends(get_db)):
    existing = db.query(User).filter(User.username == user_in.username).first()
    if existing:
        raise HTTPException(status_code=400, detail="Username already exists")
    # The very first account administers the installation.
    role = "admin" if db.query(User).count() == 0 else "user"
    user = User(username=user_in.username, hashed_password=get_password_hash(user_in.password), role=role)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user %s with role %s", user.username, role)
    return user
