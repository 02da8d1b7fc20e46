import itertools
from datetime import date, timedelta

from models.outcome import Outcome
from services.day_bucketer import (
    DEFAULT_BUCKET_CAP,
    bucket_log_lines,
    bucket_log_text,
    format_uptime,
    reduce_day,
    reduce_days,
)

def _daily_lines(start: date, count: int, token: str = "success"):
    return [f"{start + timedelta(days=i)} 12:00:00,{token}" for i in range(count)]

# Test day reduction
def test_reduce_day_empty_is_no_data():
    assert reduce_day([]) is None

def test_reduce_day_all_success():
    assert reduce_day([Outcome.SUCCESS, Outcome.SUCCESS]) is Outcome.SUCCESS

def test_reduce_day_failure_dominates():
    outcomes = [Outcome.SUCCESS] * 20 + [Outcome.PARTIAL] * 5 + [Outcome.FAILURE]
    assert reduce_day(outcomes) is Outcome.FAILURE
    assert reduce_day(reversed(outcomes)) is Outcome.FAILURE

def test_reduce_day_partial_dominates_success():
    assert reduce_day([Outcome.SUCCESS, Outcome.PARTIAL, Outcome.SUCCESS]) is Outcome.PARTIAL

# Test uptime formatting
def test_format_uptime():
    assert format_uptime(0, 0) == "--%"
    assert format_uptime(1.5, 2) == "75.00%"
    assert format_uptime(1, 3) == "33.33%"
    assert format_uptime(4, 4) == "100.00%"
    assert format_uptime(0, 5) == "0.00%"

# Test bucketing
def test_single_day_example():
    bucketed = bucket_log_text("2024-01-01 10:00:00,success\n2024-01-01 14:00:00,warn\n")
    assert bucketed.days == {date(2024, 1, 1): [Outcome.SUCCESS, Outcome.PARTIAL]}
    assert reduce_days(bucketed) == {date(2024, 1, 1): Outcome.PARTIAL}
    assert bucketed.uptime.up_time == "75.00%"
    assert bucketed.uptime.line_count == 2

def test_outcomes_grouped_by_date():
    lines = [
        "2024-01-01 01:00:00,success",
        "2024-01-02 01:00:00,fail",
        "2024-01-01 23:00:00,success",
        "2024-01-02 13:00:00,success",
    ]
    statuses = reduce_days(bucket_log_lines(lines))
    assert statuses == {
        date(2024, 1, 1): Outcome.SUCCESS,
        date(2024, 1, 2): Outcome.FAILURE,
    }

def test_empty_text_has_no_uptime():
    for text in ("", "\n\n", "   \n"):
        bucketed = bucket_log_text(text)
        assert bucketed.days == {}
        assert bucketed.uptime.up_time == "--%"
        assert bucketed.uptime.line_count == 0

def test_uptime_is_order_independent():
    lines = [
        "2024-01-01 10:00:00,success",
        "2024-01-02 10:00:00,warn",
        "2024-01-03 10:00:00,fail",
        "2024-01-03 11:00:00,success",
    ]
    results = {bucket_log_lines(p).uptime.up_time for p in itertools.permutations(lines)}
    assert results == {"62.50%"}

def test_malformed_lines_are_skipped():
    lines = [
        "2024-01-01 10:00:00,success",
        "garbage",
        "not-a-date,success",
        "2024-01-01 11:00:00,warn",
    ]
    bucketed = bucket_log_lines(lines)
    assert bucketed.uptime.line_count == 2
    assert bucketed.uptime.skipped_lines == 2
    assert bucketed.uptime.up_time == "75.00%"
    assert reduce_days(bucketed) == {date(2024, 1, 1): Outcome.PARTIAL}

def test_windows_line_endings():
    bucketed = bucket_log_text("2024-01-01 10:00:00,success\r\n2024-01-01 11:00:00,success\r\n")
    assert reduce_days(bucketed) == {date(2024, 1, 1): Outcome.SUCCESS}
    assert bucketed.uptime.up_time == "100.00%"

# Test the distinct-date cap
def test_bucket_cap_defaults_to_thirty():
    assert DEFAULT_BUCKET_CAP == 30
    start = date(2024, 1, 1)
    lines = _daily_lines(start, 35, "success") + [f"{start + timedelta(days=34)} 18:00:00,fail"]
    bucketed = bucket_log_lines(lines)

    assert len(bucketed.days) == 30
    # the most recent dates are kept
    assert sorted(bucketed.days) == [start + timedelta(days=i) for i in range(5, 35)]
    assert bucketed.days[start + timedelta(days=34)] == [Outcome.SUCCESS, Outcome.FAILURE]
    # lines on dropped dates still count towards uptime
    assert bucketed.uptime.line_count == 36
    assert bucketed.uptime.up_time == "97.22%"

def test_cap_keeps_recent_dates_in_any_order():
    start = date(2024, 1, 1)
    lines = _daily_lines(start, 40)
    newest_first = bucket_log_lines(list(reversed(lines)))
    oldest_first = bucket_log_lines(lines)
    expected = [start + timedelta(days=i) for i in range(10, 40)]
    assert sorted(newest_first.days) == expected
    assert sorted(oldest_first.days) == expected

def test_capped_dates_keep_collecting_outcomes():
    start = date(2024, 1, 1)
    latest = start + timedelta(days=30)
    lines = _daily_lines(start, 31) + [f"{latest} 20:00:00,warn", f"{start} 20:00:00,fail"]
    bucketed = bucket_log_lines(lines)
    assert len(bucketed.days) == 30
    assert start not in bucketed.days
    assert bucketed.days[latest] == [Outcome.SUCCESS, Outcome.PARTIAL]
    assert bucketed.uptime.line_count == 33

def test_bucket_cap_can_be_disabled():
    bucketed = bucket_log_lines(_daily_lines(date(2024, 1, 1), 45), bucket_cap=None)
    assert len(bucketed.days) == 45

def test_custom_bucket_cap():
    bucketed = bucket_log_lines(_daily_lines(date(2024, 1, 1), 10), bucket_cap=3)
    assert sorted(bucketed.days) == [date(2024, 1, 8), date(2024, 1, 9), date(2024, 1, 10)]
