from datetime import date, datetime, timedelta, timezone

from models.outcome import Outcome
from services.relative_day import day_for, get_relative_days, index_by_relative_day

NOW = datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc)
TOKYO = timezone(timedelta(hours=9))

def test_today_is_zero():
    assert get_relative_days(NOW, date(2024, 1, 10)) == 0

def test_days_before_now():
    assert get_relative_days(NOW, date(2024, 1, 9)) == 1
    assert get_relative_days(NOW, date(2024, 1, 7)) == 3
    assert get_relative_days(NOW, date(2023, 12, 11)) == 30

def test_future_date_uses_absolute_distance():
    # next midnight is 12 hours away
    assert get_relative_days(NOW, date(2024, 1, 11)) == 0
    assert get_relative_days(NOW, date(2024, 1, 13)) == 2

def test_relative_days_in_display_timezone():
    # 21:00 in Tokyo on Jan 10, so Jan 10 started 21 hours ago
    assert get_relative_days(NOW, date(2024, 1, 10), TOKYO) == 0
    assert get_relative_days(NOW, date(2024, 1, 9), TOKYO) == 1

def test_index_fills_thirty_slots():
    slots = index_by_relative_day({}, NOW)
    assert slots == [None] * 30

def test_index_by_relative_day():
    statuses = {
        date(2024, 1, 10): Outcome.SUCCESS,
        date(2024, 1, 7): Outcome.FAILURE,
        date(2023, 12, 12): Outcome.PARTIAL,
    }
    slots = index_by_relative_day(statuses, NOW)
    assert len(slots) == 30
    assert slots[0] is Outcome.SUCCESS
    assert slots[3] is Outcome.FAILURE
    assert slots[29] is Outcome.PARTIAL
    assert slots[1] is None

def test_dates_outside_window_are_dropped():
    statuses = {date(2023, 12, 1): Outcome.FAILURE, date(2023, 12, 11): Outcome.FAILURE}
    assert index_by_relative_day(statuses, NOW) == [None] * 30

def test_collisions_keep_worse_status():
    statuses = {date(2024, 1, 10): Outcome.SUCCESS, date(2024, 1, 11): Outcome.PARTIAL}
    assert index_by_relative_day(statuses, NOW)[0] is Outcome.PARTIAL

def test_none_status_does_not_hide_data():
    statuses = {date(2024, 1, 10): Outcome.SUCCESS, date(2024, 1, 11): None}
    assert index_by_relative_day(statuses, NOW)[0] is Outcome.SUCCESS

def test_day_for_slot():
    assert day_for(NOW, 0) == date(2024, 1, 10)
    assert day_for(NOW, 29) == date(2023, 12, 12)
    assert day_for(datetime(2024, 1, 10, 20, 0, tzinfo=timezone.utc), 0, TOKYO) == date(2024, 1, 11)
