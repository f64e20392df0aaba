"""Login endpoint and current-user lookups."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from paytrack.app.core.security import create_access_token, verify_password
from paytrack.app.db.session import get_db
from paytrack.app.dependencies.auth import get_current_user
from paytrack.app.models.user import User
from paytrack.app.schemas.login import LoginRequest, Token
from paytrack.app.schemas.user import UserRead, UserRole

router = APIRouter(tags=["auth"])


@router.post("/auth/login", response_model=Token)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.username == credentials.username).first()
    if not user or not verify_password(credentials.password, user.hashed_password):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid credentials")
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User is inactive")

    return Token(access_token=create_access_token(user_id=user.id))


@router.get("/auth/me", response_model=UserRead)
def read_me(current_user: User = Depends(get_current_user)):
    return current_user


@router.get("/user/role", response_model=UserRole)
def read_role(current_user: User = Depends(get_current_user)):
    return UserRole(role=current_user.role, is_admin=current_user.is_admin)
