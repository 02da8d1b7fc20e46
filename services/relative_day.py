from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Dict, List, Optional

from models.outcome import Outcome
from models.service_report import WINDOW_DAYS
from services.group_reducer import combine

ONE_DAY = timedelta(days=1)

def get_relative_days(now: datetime, day: date, tz: tzinfo = timezone.utc) -> int:
    """Whole days between now and the start of day in tz"""
    midnight = datetime.combine(day, time.min, tzinfo=tz)
    return abs(now - midnight) // ONE_DAY

def index_by_relative_day(
    day_statuses: Dict[date, Optional[Outcome]],
    now: datetime,
    tz: tzinfo = timezone.utc,
    window: int = WINDOW_DAYS,
) -> List[Optional[Outcome]]:
    """
    Re-keys calendar dates as days before now. Dates outside the window are
    dropped; two dates landing on the same slot keep the worse status.
    """
    slots: List[Optional[Outcome]] = [None] * window
    for day, status in day_statuses.items():
        relative_day = get_relative_days(now, day, tz)
        if relative_day >= window:
            continue
        slots[relative_day] = combine(slots[relative_day], status)
    return slots

def day_for(now: datetime, relative_day: int, tz: tzinfo = timezone.utc) -> date:
    """Calendar date shown for a slot"""
    return now.astimezone(tz).date() - timedelta(days=relative_day)
