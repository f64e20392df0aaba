"""User schemas used for registration, responses and administration."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    username: str = Field(min_length=3, max_length=150)
    password: str = Field(min_length=6)


class UserRead(BaseModel):
    id: str
    username: str
    role: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class UserRole(BaseModel):
    role: str
    is_admin: bool


class AdminUserCreate(UserCreate):
    role: Literal["admin", "user"] = "user"


class AdminUserRead(UserRead):
    is_active: bool
    created_by: Optional[str] = None
    customers_created: int = 0
    purchases_created: int = 0
    payments_marked: int = 0


class PasswordReset(BaseModel):
    new_password: str = Field(min_length=6)
