import asyncio
import logging
from datetime import datetime, timezone, tzinfo
from typing import Dict, List, Optional, Tuple

from models.dashboard import DashboardReport, ReportSection, StatusCell, StatusStream
from models.outcome import Outcome
from models.service_config import ServiceDescriptor
from models.service_report import ServiceReport
from services.day_bucketer import DEFAULT_BUCKET_CAP, bucket_log_text, reduce_days
from services.environment import resolve_environment
from services.group_reducer import API_GROUPS, build_group_report, partition_services
from services.log_fetcher import LogFetcher
from services.relative_day import day_for, index_by_relative_day
from services.service_config import filter_by_tag, load_service_config
from services.settings import StatusSettings, settings as default_settings
from services.status_classifier import (
    get_color,
    get_status_descriptive_text,
    get_status_text,
    get_tooltip,
)

logger = logging.getLogger(__name__)

WEB_SECTION = "web"
API_SECTION = "api"

ReportKey = Tuple[str, str]

def report_key(service: ServiceDescriptor) -> ReportKey:
    """Logs live under <type>/<key>, so both tell services apart"""
    return (service.type, service.key)

def build_service_report(
    text: str,
    now: datetime,
    tz: tzinfo = timezone.utc,
    bucket_cap: Optional[int] = DEFAULT_BUCKET_CAP,
) -> ServiceReport:
    """Raw log text -> 30 day statuses (today first) plus uptime"""
    bucketed = bucket_log_text(text, tz=tz, bucket_cap=bucket_cap)
    days = index_by_relative_day(reduce_days(bucketed), now, tz)
    return ServiceReport(days=days, uptime=bucketed.uptime)

def build_status_stream(
    key: str,
    label: str,
    type: str,
    days: List[Optional[Outcome]],
    up_time: str,
    now: datetime,
    tz: tzinfo = timezone.utc,
) -> StatusStream:
    cells = []
    for relative_day, status in enumerate(days):
        color = get_color(status)
        day = day_for(now, relative_day, tz)
        cells.append(StatusCell(
            relative_day=relative_day,
            day=day,
            color=color,
            status_text=get_status_text(color),
            description=get_status_descriptive_text(color),
            tooltip=get_tooltip(key, day, color),
        ))

    current = get_color(days[0] if days else None)
    return StatusStream(
        key=key,
        label=label,
        type=type,
        up_time=up_time,
        status=current,
        status_text=get_status_text(current),
        cells=cells,
    )

class ReportBuilder:
    def __init__(self, settings: Optional[StatusSettings] = None, fetcher: Optional[LogFetcher] = None):
        self.settings = settings or default_settings
        self.fetcher = fetcher or LogFetcher(
            source=self.settings.log_source,
            timeout=self.settings.fetch_timeout,
            max_retries=self.settings.fetch_retries,
        )

    async def load_services(self) -> List[ServiceDescriptor]:
        return await load_service_config(self.settings.config_source, timeout=self.settings.fetch_timeout)

    async def fetch_reports(
        self,
        env: str,
        services: List[ServiceDescriptor],
        now: datetime,
    ) -> Dict[ReportKey, ServiceReport]:
        """Fetches every log concurrently; results are keyed, so arrival order doesn't matter"""
        unique: Dict[ReportKey, ServiceDescriptor] = {}
        for service in services:
            unique.setdefault(report_key(service), service)

        texts = await asyncio.gather(*(self.fetcher.fetch(env, service) for service in unique.values()))

        reports = {}
        for service, text in zip(unique.values(), texts):
            report = build_service_report(text, now, self.settings.tz, self.settings.bucket_cap)
            if report.uptime.skipped_lines:
                logger.warning(
                    "%s: skipped %d malformed log lines", service.key, report.uptime.skipped_lines
                )
            reports[report_key(service)] = report
        return reports

    def _service_stream(self, service: ServiceDescriptor, report: ServiceReport, now: datetime) -> StatusStream:
        return build_status_stream(
            service.key, service.label, service.type,
            report.days, report.uptime.up_time, now, self.settings.tz,
        )

    async def build_dashboard(
        self,
        env: Optional[str] = None,
        partner_id: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> DashboardReport:
        selection = resolve_environment(env, partner_id)
        now = now or datetime.now(timezone.utc)

        services = await self.load_services()
        web_services = filter_by_tag(services, WEB_SECTION)
        api_services = filter_by_tag(services, API_SECTION)

        selected = [s for s in web_services + api_services if s.env == selection.env]
        reports = await self.fetch_reports(selection.env, selected, now)

        sections = []
        if web_services:
            streams = [
                self._service_stream(service, reports[report_key(service)], now)
                for service in web_services
                if service.env == selection.env
            ]
            sections.append(ReportSection(title=WEB_SECTION.upper(), streams=streams))

        if api_services:
            streams = []
            for name, members in partition_services(api_services).items():
                descriptor = API_GROUPS[name]
                group = build_group_report(
                    descriptor,
                    [reports[report_key(m)] for m in members if m.env == selection.env],
                )
                streams.append(build_status_stream(
                    descriptor.key, descriptor.label, descriptor.type,
                    group.days, group.up_time, now, self.settings.tz,
                ))
            sections.append(ReportSection(title=API_SECTION.upper(), streams=streams))

        logger.info(
            "Built %s dashboard for %s: %d services, %d sections",
            selection.env, selection.partner_id, len(selected), len(sections),
        )
        return DashboardReport(
            env=selection.env,
            partner_id=selection.partner_id,
            generated_at=now,
            sections=sections,
        )

    async def build_service_stream(
        self,
        key: str,
        env: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Optional[StatusStream]:
        """Ungrouped stream of one service, None if the key isn't configured for env"""
        selection = resolve_environment(env)
        now = now or datetime.now(timezone.utc)

        services = await self.load_services()
        service = next((s for s in services if s.key == key and s.env == selection.env), None)
        if service is None:
            return None

        reports = await self.fetch_reports(selection.env, [service], now)
        return self._service_stream(service, reports[report_key(service)], now)

# Singleton instance
report_builder = ReportBuilder()
