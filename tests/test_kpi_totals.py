from datetime import date
from decimal import Decimal

import pytest

import paytrack.app.db.base  # noqa: F401
from paytrack.app.models.payment import Payment
from paytrack.app.services.kpi import compute_totals, month_bounds, period_start


def make_payment(amount, status, due_date, paid_date=None):
    return Payment(amount=Decimal(amount), status=status, due_date=due_date, paid_date=paid_date)


PAYMENTS = [
    make_payment("100", "paid", date(2024, 3, 1), paid_date=date(2024, 3, 1)),
    make_payment("50", "overdue", date(2024, 1, 1)),
]


def test_all_period_totals():
    totals = compute_totals(PAYMENTS, "all", date(2024, 6, 1))
    assert totals.total_paid == Decimal("100.00")
    assert totals.total_overdue == Decimal("50.00")


def test_year_period_keeps_paid_within_year_and_ignores_period_for_overdue():
    totals = compute_totals(PAYMENTS, "year", date(2024, 6, 1))
    assert totals.total_paid == Decimal("100.00")
    assert totals.total_overdue == Decimal("50.00")


def test_month_period_filters_paid_only():
    totals = compute_totals(PAYMENTS, "month", date(2024, 6, 1))
    assert totals.total_paid == Decimal("0.00")
    assert totals.total_overdue == Decimal("50.00")


def test_upcoming_payments_count_toward_neither_total():
    payments = [make_payment("75", "upcoming", date(2024, 6, 1)), make_payment("20", "upcoming", date(2024, 9, 1))]
    totals = compute_totals(payments, "all", date(2024, 6, 1))
    assert totals.total_paid == Decimal("0.00")
    assert totals.total_overdue == Decimal("0.00")


def test_stored_upcoming_past_due_counts_as_overdue():
    payments = [make_payment("30", "upcoming", date(2024, 5, 1))]
    assert compute_totals(payments, "all", date(2024, 6, 1)).total_overdue == Decimal("30.00")


def test_totals_summed_exactly():
    payments = [make_payment("0.10", "paid", date(2024, 1, 1), date(2024, 1, 1)) for _ in range(3)]
    assert str(compute_totals(payments, "all", date(2024, 6, 1)).total_paid) == "0.30"


def test_period_start_and_month_bounds():
    assert period_start("all", date(2024, 2, 10)) is None
    assert period_start("month", date(2024, 2, 10)) == date(2024, 2, 1)
    assert period_start("year", date(2024, 2, 10)) == date(2024, 1, 1)
    assert month_bounds(date(2024, 2, 10)) == (date(2024, 2, 1), date(2024, 2, 29))
    with pytest.raises(ValueError):
        period_start("week", date(2024, 2, 10))
