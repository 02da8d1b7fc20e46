from pydantic import BaseModel, Field
from typing import List

class ServiceMeta(BaseModel):
    tags: List[str] = Field(default_factory=list)

class ServiceDescriptor(BaseModel):
    """One entry of the dashboard's service configuration"""
    key: str = Field(..., description="Unique service key, also the log file prefix")
    label: str = Field(..., description="Display label")
    type: str = Field(..., description="Icon type and log directory, e.g. api or web")
    env: str = Field("production", description="Environment the service reports for")
    meta: ServiceMeta = Field(default_factory=ServiceMeta)

    def has_tag(self, tag: str) -> bool:
        return tag in self.meta.tags

class GroupDescriptor(BaseModel):
    """Static metadata of a composite service group"""
    key: str
    label: str
    type: str = "api"
    up_time: str = "--%"  # Groups never recompute uptime
