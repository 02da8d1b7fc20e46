from pydantic import BaseModel
from datetime import date
from enum import Enum

class Outcome(float, Enum):
    """Result of a single health check line"""
    SUCCESS = 1.0
    PARTIAL = 0.5
    FAILURE = 0.0

class StatusColor(str, Enum):
    """User-facing category of a day status"""
    NODATA = "nodata"
    SUCCESS = "success"
    FAILURE = "failure"
    PARTIAL = "partial"

class ParsedCheck(BaseModel):
    calendar_date: date
    outcome: Outcome
