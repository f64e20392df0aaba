"""Admin reporting schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

ActivityType = Literal["customer_created", "purchase_created", "payment_marked_paid"]


class ActivityLogEntry(BaseModel):
    id: str
    type: ActivityType
    entity_id: str
    entity_name: str
    user_id: str | None = None
    username: str
    created_at: datetime
