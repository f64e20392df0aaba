"""KPI totals for the dashboard."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from paytrack.app.core.time import utc_today
from paytrack.app.db.session import get_db
from paytrack.app.dependencies.auth import get_current_user
from paytrack.app.models.user import User
from paytrack.app.schemas.kpi import KpiRead
from paytrack.app.services.kpi import KPI_PERIODS, get_kpi_totals

router = APIRouter(prefix="/kpi", tags=["kpi"])


@router.get("", response_model=KpiRead)
def read_kpi(period: str = "all", db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    if period not in KPI_PERIODS:
        raise HTTPException(status_code=400, detail="Invalid period value")
    totals = get_kpi_totals(db, owner_id=current_user.id, period=period, today=utc_today())
    return KpiRead(period=period, total_paid=totals.total_paid, total_overdue=totals.total_overdue)
