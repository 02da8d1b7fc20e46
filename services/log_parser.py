from datetime import datetime, timezone, tzinfo
from models.outcome import Outcome, ParsedCheck

OUTCOME_TOKENS = {
    "success": Outcome.SUCCESS,
    "warn": Outcome.PARTIAL,
}

class MalformedLogLineError(ValueError):
    """Raised for a line without an outcome field or with an unreadable timestamp"""

def parse_outcome(token: str) -> Outcome:
    """Anything that is not exactly success or warn counts as a failure"""
    return OUTCOME_TOKENS.get(token.strip(), Outcome.FAILURE)

def parse_timestamp(value: str) -> datetime:
    """Parse a dashed date-time; values without an offset are GMT"""
    text = value.strip()
    if not text:
        raise MalformedLogLineError("Empty timestamp")
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise MalformedLogLineError(f"Unreadable timestamp: {value!r}") from e

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)

def parse_log_line(line: str, tz: tzinfo = timezone.utc) -> ParsedCheck:
    """
    Turns "<timestamp>,<outcome>" into the calendar date (in tz) and outcome.
    Only the field right after the first comma is read as the outcome.
    """
    timestamp_str, separator, rest = line.partition(",")
    if not separator:
        raise MalformedLogLineError(f"Missing outcome field: {line!r}")

    moment = parse_timestamp(timestamp_str)
    result_str = rest.split(",", 1)[0]
    return ParsedCheck(
        calendar_date=moment.astimezone(tz).date(),
        outcome=parse_outcome(result_str),
    )
