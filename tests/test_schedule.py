import logging
from datetime import date
from decimal import Decimal

import pytest

from paytrack.app.services.schedule import generate_schedule, installment_dates


def test_monthly_schedule_with_initial_payment():
    drafts = generate_schedule(Decimal("100"), Decimal("50"), "monthly", date(2024, 1, 15), today=date(2024, 1, 15))

    assert len(drafts) == 13
    first = drafts[0]
    assert first.amount == Decimal("100.00")
    assert first.due_date == date(2024, 1, 15)
    assert first.status == "paid"
    assert first.paid_date == date(2024, 1, 15)

    assert drafts[1].amount == Decimal("50.00")
    assert drafts[1].due_date == date(2024, 2, 15)
    assert drafts[-1].due_date == date(2025, 1, 15)
    assert all(d.status == "upcoming" and d.paid_date is None for d in drafts[1:])


@pytest.mark.parametrize(
    "frequency, installments",
    [("monthly", 12), ("quarterly", 4), ("yearly", 3), ("one-time", 1)],
)
@pytest.mark.parametrize("initial", [Decimal("0"), Decimal("25.50")])
def test_installment_count_table(frequency, installments, initial):
    drafts = generate_schedule(initial, Decimal("10"), frequency, date(2024, 3, 10), today=date(2024, 3, 10))

    expected = installments + (1 if initial > 0 else 0)
    assert len(drafts) == expected
    due_dates = [d.due_date for d in drafts]
    assert due_dates == sorted(due_dates)


def test_quarterly_and_yearly_steps():
    assert installment_dates(date(2024, 1, 15), "quarterly") == [
        date(2024, 4, 15),
        date(2024, 7, 15),
        date(2024, 10, 15),
        date(2025, 1, 15),
    ]
    assert installment_dates(date(2024, 1, 15), "yearly") == [
        date(2025, 1, 15),
        date(2026, 1, 15),
        date(2027, 1, 15),
    ]


def test_month_end_dates_are_clamped_without_drift():
    dates = installment_dates(date(2024, 1, 31), "monthly")
    assert dates[:4] == [date(2024, 2, 29), date(2024, 3, 31), date(2024, 4, 30), date(2024, 5, 31)]


def test_one_time_purchase_yesterday_is_overdue():
    drafts = generate_schedule(Decimal("0"), Decimal("200"), "one-time", date(2024, 6, 1), today=date(2024, 6, 2))

    assert len(drafts) == 1
    assert drafts[0].amount == Decimal("200.00")
    assert drafts[0].due_date == date(2024, 6, 1)
    assert drafts[0].status == "overdue"
    assert drafts[0].paid_date is None


def test_one_time_purchase_today_is_upcoming():
    drafts = generate_schedule(Decimal("0"), Decimal("200"), "one-time", date(2024, 6, 2), today=date(2024, 6, 2))
    assert drafts[0].status == "upcoming"


def test_past_installments_are_overdue_and_future_upcoming():
    drafts = generate_schedule(Decimal("0"), Decimal("50"), "monthly", date(2024, 1, 15), today=date(2024, 4, 20))

    statuses = [d.status for d in drafts]
    assert statuses[:3] == ["overdue", "overdue", "overdue"]
    assert set(statuses[3:]) == {"upcoming"}


def test_initial_payment_is_never_reclassified():
    drafts = generate_schedule(Decimal("10"), Decimal("5"), "yearly", date(2020, 1, 1), today=date(2024, 1, 1))
    assert drafts[0].status == "paid"


def test_amounts_have_two_fraction_digits():
    drafts = generate_schedule(Decimal("12.5"), Decimal("33.3"), "quarterly", date(2024, 1, 1), today=date(2024, 1, 1))
    assert [str(d.amount) for d in drafts[:2]] == ["12.50", "33.30"]


def test_unknown_frequency_generates_no_recurring_payments(caplog):
    with caplog.at_level(logging.WARNING):
        drafts = generate_schedule(Decimal("40"), Decimal("10"), "weekly", date(2024, 1, 1), today=date(2024, 1, 1))

    assert len(drafts) == 1
    assert drafts[0].status == "paid"
    assert "Unknown rental frequency" in caplog.text
    assert generate_schedule(Decimal("0"), Decimal("10"), "weekly", date(2024, 1, 1), today=date(2024, 1, 1)) == []
