"""
Models handed to the rendering layer
"""

from datetime import date, datetime
from typing import List
from pydantic import BaseModel, Field

from models.outcome import StatusColor

class StatusCell(BaseModel):
    """One square of a status stream"""
    relative_day: int
    day: date
    color: StatusColor
    status_text: str
    description: str
    tooltip: str

class StatusStream(BaseModel):
    """30-day history of a service or group, today first"""
    key: str
    label: str
    type: str
    up_time: str
    status: StatusColor
    status_text: str
    cells: List[StatusCell] = Field(default_factory=list)

class ReportSection(BaseModel):
    title: str
    streams: List[StatusStream] = Field(default_factory=list)

class EnvironmentSelection(BaseModel):
    env: str
    partner_id: str

class DashboardReport(BaseModel):
    env: str
    partner_id: str
    generated_at: datetime
    sections: List[ReportSection] = Field(default_factory=list)

