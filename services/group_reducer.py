"""
Combines the day statuses of services that share a group.

The composite for a day is the worst status reported by any member:
Success > Partial > Failure, with absent days ignored. Failure absorbs every
later value, so one failing member marks the whole group failed for that day
no matter the order members are folded in.
"""

from functools import reduce
from typing import Dict, Iterable, List, Optional

from models.outcome import Outcome
from models.service_config import GroupDescriptor, ServiceDescriptor
from models.service_report import GroupReport, ServiceReport, WINDOW_DAYS

GROUP_TAGS = ("auth", "accounts", "links")
DEFAULT_GROUP = "transfers"

API_GROUPS: Dict[str, GroupDescriptor] = {
    "auth": GroupDescriptor(key="authGroup", label="Auth"),
    "accounts": GroupDescriptor(key="accountsGroup", label="Accounts"),
    "links": GroupDescriptor(key="linksGroup", label="Links"),
    "transfers": GroupDescriptor(key="transfersGroup", label="Transfers"),
}

def combine(current: Optional[Outcome], incoming: Optional[Outcome]) -> Optional[Outcome]:
    """Worse of two day statuses; None means absent"""
    if incoming is None:
        return current
    if current is None:
        return incoming
    return min(current, incoming)

def assign_group(service: ServiceDescriptor) -> str:
    for tag in GROUP_TAGS:
        if service.has_tag(tag):
            return tag
    return DEFAULT_GROUP

def partition_services(services: Iterable[ServiceDescriptor]) -> Dict[str, List[ServiceDescriptor]]:
    """Splits services into the api groups, keeping configured order"""
    groups: Dict[str, List[ServiceDescriptor]] = {name: [] for name in API_GROUPS}
    for service in services:
        groups[assign_group(service)].append(service)
    return groups

def reduce_group(reports: Iterable[ServiceReport], window: int = WINDOW_DAYS) -> List[Optional[Outcome]]:
    reports = list(reports)
    return [
        reduce(combine, (report.status_for(day) for report in reports), None)
        for day in range(window)
    ]

def build_group_report(descriptor: GroupDescriptor, reports: Iterable[ServiceReport]) -> GroupReport:
    return GroupReport(days=reduce_group(reports), up_time=descriptor.up_time)
