"""Payment status classification at day granularity."""

from datetime import date, datetime

from paytrack.app.core.time import as_date
from paytrack.app.models.payment import Payment

PAID = "paid"
UPCOMING = "upcoming"
OVERDUE = "overdue"

PAYMENT_STATUSES = (PAID, UPCOMING, OVERDUE)


def classify_due_date(due_date: date | datetime, today: date | datetime) -> str:
    """Return overdue when the due day is strictly before today, else upcoming."""
    if as_date(due_date) < as_date(today):
        return OVERDUE
    return UPCOMING


def classify_payment(
    status: str | None,
    due_date: date | datetime,
    paid_date: date | datetime | None,
    today: date | datetime,
) -> str:
    """Compute the effective status of a payment as of ``today``.

    A stored ``paid`` status or a recorded paid date always wins. Any other
    stored value (upcoming or overdue) is only a snapshot from when the row was
    last written, so it is re-derived from the due date.
    """
    if status == PAID or paid_date is not None:
        return PAID
    return classify_due_date(due_date, today)


def effective_status(payment: Payment, today: date | datetime) -> str:
    return classify_payment(payment.status, payment.due_date, payment.paid_date, today)
