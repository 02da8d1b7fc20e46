import logging
from datetime import date, timezone, tzinfo
from typing import Dict, Iterable, List, Optional

from models.outcome import Outcome
from models.service_report import BucketedLog, UptimeSummary, NO_UPTIME
from services.log_parser import MalformedLogLineError, parse_log_line

logger = logging.getLogger(__name__)

DEFAULT_BUCKET_CAP = 30

def reduce_day(outcomes: Iterable[Outcome]) -> Optional[Outcome]:
    """Worst outcome of the day: any failure wins, then any warning"""
    outcomes = list(outcomes)
    if not outcomes:
        return None
    if Outcome.FAILURE in outcomes:
        return Outcome.FAILURE
    if Outcome.PARTIAL in outcomes:
        return Outcome.PARTIAL
    return Outcome.SUCCESS

def format_uptime(total: float, count: int) -> str:
    if not count:
        return NO_UPTIME
    return f"{(total / count) * 100:.2f}%"

def bucket_log_lines(
    lines: Iterable[str],
    tz: tzinfo = timezone.utc,
    bucket_cap: Optional[int] = DEFAULT_BUCKET_CAP,
) -> BucketedLog:
    """
    Groups outcomes by calendar date and computes the overall uptime.

    At most bucket_cap distinct dates are kept: the most recent ones, whatever
    order the lines arrive in. Lines on dropped dates still count towards
    uptime. Malformed lines are skipped.
    """
    days: Dict[date, List[Outcome]] = {}
    total = 0.0
    count = 0
    skipped = 0

    for raw in lines:
        line = raw.strip()
        if not line:
            continue

        try:
            check = parse_log_line(line, tz)
        except MalformedLogLineError as e:
            skipped += 1
            logger.warning("Skipping malformed log line: %s", e)
            continue

        total += check.outcome.value
        count += 1

        bucket = days.get(check.calendar_date)
        if bucket is None:
            if bucket_cap and len(days) >= bucket_cap:
                oldest = min(days)
                if check.calendar_date < oldest:
                    continue
                del days[oldest]
            bucket = days[check.calendar_date] = []
        bucket.append(check.outcome)

    return BucketedLog(
        days=days,
        uptime=UptimeSummary(
            up_time=format_uptime(total, count),
            line_count=count,
            skipped_lines=skipped,
        ),
    )

def bucket_log_text(
    text: str,
    tz: tzinfo = timezone.utc,
    bucket_cap: Optional[int] = DEFAULT_BUCKET_CAP,
) -> BucketedLog:
    return bucket_log_lines(text.splitlines(), tz=tz, bucket_cap=bucket_cap)

def reduce_days(bucketed: BucketedLog) -> Dict[date, Optional[Outcome]]:
    return {day: reduce_day(outcomes) for day, outcomes in bucketed.days.items()}
