"""Payment schedule generation for purchases."""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Callable, Dict, List, Optional, Tuple

from dateutil.relativedelta import relativedelta

from paytrack.app.services.money import quantize_money
from paytrack.app.services.payment_status import PAID, classify_due_date

logger = logging.getLogger(__name__)

ONE_TIME = "one-time"
MONTHLY = "monthly"
QUARTERLY = "quarterly"
YEARLY = "yearly"

RENTAL_FREQUENCIES = (ONE_TIME, MONTHLY, QUARTERLY, YEARLY)

# frequency -> (step as relativedelta, number of installments)
_FREQUENCY_TABLE: Dict[str, Tuple[relativedelta, int]] = {
    MONTHLY: (relativedelta(months=1), 12),
    QUARTERLY: (relativedelta(months=3), 4),
    YEARLY: (relativedelta(years=1), 3),
}


@dataclass(frozen=True)
class PaymentDraft:
    amount: Decimal
    due_date: date
    status: str
    paid_date: Optional[date] = None


def add_period(base: date, step: relativedelta, count: int) -> date:
    """Add ``count`` steps to ``base``, clamping to the end of shorter months."""
    return base + step * count


def installment_dates(purchase_date: date, frequency: str) -> List[date]:
    if frequency == ONE_TIME:
        return [purchase_date]
    entry = _FREQUENCY_TABLE.get(frequency)
    if entry is None:
        return []
    step, count = entry
    # Each date is derived from the purchase date so month-end clamping never drifts.
    return [add_period(purchase_date, step, i) for i in range(1, count + 1)]


def generate_schedule(
    initial_payment: Decimal,
    recurring_amount: Decimal,
    frequency: str,
    purchase_date: date,
    today: date,
    classify: Callable[[date, date], str] = classify_due_date,
) -> List[PaymentDraft]:
    """Build the ordered payment drafts for a newly created purchase.

    The initial payment, when positive, is recorded as already paid on the
    purchase date. Recurring installments follow the frequency table and get
    overdue/upcoming based on ``today``. Unknown frequencies produce no
    recurring installments.
    """
    initial = quantize_money(initial_payment)
    recurring = quantize_money(recurring_amount)

    drafts: List[PaymentDraft] = []
    if initial > Decimal("0.00"):
        drafts.append(
            PaymentDraft(amount=initial, due_date=purchase_date, status=PAID, paid_date=purchase_date)
        )

    due_dates = installment_dates(purchase_date, frequency)
    if not due_dates:
        logger.warning("Unknown rental frequency %r; no recurring payments generated", frequency)
        return drafts

    for due_date in due_dates:
        drafts.append(PaymentDraft(amount=recurring, due_date=due_date, status=classify(due_date, today)))
    return drafts
