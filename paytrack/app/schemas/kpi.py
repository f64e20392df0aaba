"""KPI schemas for dashboard totals."""

from pydantic import BaseModel

from paytrack.app.schemas.common import Money


class KpiRead(BaseModel):
    period: str
    total_paid: Money
    total_overdue: Money
