# backend/services/settings.py
import os
import logging
from datetime import timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

def resolve_timezone(name: str) -> tzinfo:
    """Unknown zone names fall back to UTC"""
    if name.upper() in ("UTC", "GMT"):
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, using UTC", name)
        return timezone.utc

class StatusSettings:
    """Dashboard configuration read from the environment (and .env)"""

    def __init__(self):
        # Base URL or local directory holding <env>/<type>/<key>_report.log
        self.log_source = os.getenv("STATUS_LOG_SOURCE", "logs")
        # Path or URL of the service configuration JSON
        self.config_source = os.getenv("STATUS_CONFIG_SOURCE", "config.json")
        self.timezone_name = os.getenv("STATUS_TIMEZONE", "UTC")
        self.tz = resolve_timezone(self.timezone_name)
        self.bucket_cap_value = int(os.getenv("STATUS_BUCKET_CAP", "30"))
        self.fetch_timeout = float(os.getenv("STATUS_FETCH_TIMEOUT", "10"))
        self.fetch_retries = int(os.getenv("STATUS_FETCH_RETRIES", "1"))
        self.port = int(os.getenv("PORT", "8080"))

    @property
    def bucket_cap(self) -> Optional[int]:
        """Distinct dates retained per service; None when disabled (0)"""
        return self.bucket_cap_value if self.bucket_cap_value > 0 else None

settings = StatusSettings()
