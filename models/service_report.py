"""
Models for per-service and per-group status history
"""

from datetime import date
from typing import Optional, List, Dict
from pydantic import BaseModel, Field

from models.outcome import Outcome

WINDOW_DAYS = 30
NO_UPTIME = "--%"

class UptimeSummary(BaseModel):
    """Overall uptime computed over every well-formed log line"""
    up_time: str = NO_UPTIME
    line_count: int = 0
    skipped_lines: int = 0

class BucketedLog(BaseModel):
    """Outcomes grouped by calendar date, kept apart from the uptime summary"""
    days: Dict[date, List[Outcome]] = Field(default_factory=dict)
    uptime: UptimeSummary = Field(default_factory=UptimeSummary)

class ServiceReport(BaseModel):
    """Day statuses indexed by relative day (0 = today)"""
    days: List[Optional[Outcome]] = Field(default_factory=lambda: [None] * WINDOW_DAYS)
    uptime: UptimeSummary = Field(default_factory=UptimeSummary)

    def status_for(self, relative_day: int) -> Optional[Outcome]:
        if 0 <= relative_day < len(self.days):
            return self.days[relative_day]
        return None

class GroupReport(BaseModel):
    """Composite day statuses of a group of services"""
    days: List[Optional[Outcome]] = Field(default_factory=lambda: [None] * WINDOW_DAYS)
    up_time: str = NO_UPTIME
