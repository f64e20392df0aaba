"""Admin user management endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from paytrack.app.core.security import get_password_hash
from paytrack.app.db.session import get_db
from paytrack.app.dependencies.auth import get_current_admin
from paytrack.app.models.user import User
from paytrack.app.schemas.user import AdminUserCreate, AdminUserRead, PasswordReset
from paytrack.app.services.admin_reporting import delete_user, get_users_with_stats

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/users", tags=["admin"])


def _get_user(db: Session, user_id: str) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.get("/", response_model=list[AdminUserRead])
def list_users(db: Session = Depends(get_db), current_admin: User = Depends(get_current_admin)):
    return get_users_with_stats(db)


@router.post("/", response_model=AdminUserRead, status_code=status.HTTP_201_CREATED)
def create_user(payload: AdminUserCreate, db: Session = Depends(get_db), current_admin: User = Depends(get_current_admin)):
    if db.query(User).filter(User.username == payload.username).first():
        raise HTTPException(status_code=400, detail="Username already exists")
    user = User(
        username=payload.username,
        hashed_password=get_password_hash(payload.password),
        role=payload.role,
        created_by=current_admin.id,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Admin %s created user %s (%s)", current_admin.id, user.username, user.role)
    return AdminUserRead.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_user(user_id: str, db: Session = Depends(get_db), current_admin: User = Depends(get_current_admin)):
    delete_user(db, user=_get_user(db, user_id), current_admin=current_admin)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{user_id}/reset-password")
def reset_password(
    user_id: str,
    payload: PasswordReset,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    user = _get_user(db, user_id)
    user.hashed_password = get_password_hash(payload.new_password)
    db.commit()
    logger.info("Admin %s reset password for user %s", current_admin.id, user.id)
    return {"status": "ok"}
