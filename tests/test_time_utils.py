from datetime import UTC, date, datetime

from paytrack.app.core.time import as_date, utc_now, utc_today


def test_utc_now_is_timezone_aware_utc():
    value = utc_now()
    assert value.tzinfo is UTC


def test_utc_today_is_a_plain_date():
    value = utc_today()
    assert type(value) is date
    assert value <= utc_now().date()


def test_as_date_truncates_datetimes():
    assert as_date(datetime(2024, 3, 5, 23, 59, tzinfo=UTC)) == date(2024, 3, 5)
    assert as_date(date(2024, 3, 5)) == date(2024, 3, 5)
