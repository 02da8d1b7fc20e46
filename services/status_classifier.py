from datetime import date
from typing import Optional, Union

from models.outcome import StatusColor

FAILURE_THRESHOLD = 0.3
DATE_FORMAT = "%a %b %d %Y"

STATUS_TEXT = {
    StatusColor.NODATA: "No Data Available",
    StatusColor.SUCCESS: "Fully Operational",
    StatusColor.FAILURE: "Major Outage",
    StatusColor.PARTIAL: "Outage Warning",
}

STATUS_DESCRIPTION = {
    StatusColor.NODATA: "No Data Available: Health check was not performed.",
    StatusColor.SUCCESS: "No downtime recorded on this day.",
    StatusColor.FAILURE: "Major outages recorded on this day.",
    StatusColor.PARTIAL: "Outage warning recorded on this day.",
}

UNKNOWN_TEXT = "Unknown"

def get_color(status: Optional[float]) -> StatusColor:
    if status is None:
        return StatusColor.NODATA
    if status == 1:
        return StatusColor.SUCCESS
    if status < FAILURE_THRESHOLD:
        return StatusColor.FAILURE
    return StatusColor.PARTIAL

def _lookup(table: dict, color: Union[StatusColor, str]) -> str:
    try:
        return table[StatusColor(color)]
    except ValueError:
        return UNKNOWN_TEXT

def get_status_text(color: Union[StatusColor, str]) -> str:
    return _lookup(STATUS_TEXT, color)

def get_status_descriptive_text(color: Union[StatusColor, str]) -> str:
    return _lookup(STATUS_DESCRIPTION, color)

def get_tooltip(key: str, day: date, color: Union[StatusColor, str]) -> str:
    """e.g. "api | Mon Jan 01 2024 : success : Fully Operational" """
    color_name = color.value if isinstance(color, StatusColor) else color
    return f"{key} | {day.strftime(DATE_FORMAT)} : {color_name} : {get_status_text(color)}"
