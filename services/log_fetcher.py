import httpx
import asyncio
import logging
from pathlib import Path

from models.service_config import ServiceDescriptor
from services.service_config import is_remote

logger = logging.getLogger(__name__)

class LogFetcher:
    """
    Retrieves the raw report log of a service. A missing or unreachable log
    yields an empty string, which the dashboard shows as no data.
    """

    def __init__(self, source: str = "logs", timeout: float = 10, max_retries: int = 1, retry_delay: float = 2):
        self.source = source
        self.timeout = timeout  # seconds
        self.max_retries = max(1, max_retries)
        self.retry_delay = retry_delay  # seconds

    def log_path(self, env: str, service: ServiceDescriptor) -> str:
        return f"{env}/{service.type}/{service.key}_report.log"

    async def fetch(self, env: str, service: ServiceDescriptor) -> str:
        path = self.log_path(env, service)
        if is_remote(self.source):
            return await self._fetch_remote(f"{self.source.rstrip('/')}/{path}")
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._read_local, Path(self.source) / path)

    async def _fetch_remote(self, url: str) -> str:
        last_error = None

        for attempt in range(self.max_retries):
            try:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(url, follow_redirects=True)

                    if response.status_code < 400:
                        return response.text
                    last_error = f"{response.status_code} {response.reason_phrase}"
                    if response.status_code < 500:
                        break

            except httpx.TimeoutException:
                last_error = "Timeout"
            except httpx.RequestError as e:
                last_error = str(e)

            if attempt < self.max_retries - 1:
                await asyncio.sleep(self.retry_delay)

        logger.warning("Log unavailable at %s (%s), treating as empty", url, last_error)
        return ""

    def _read_local(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.warning("Log file %s not found, treating as empty", path)
        except OSError as e:
            logger.warning("Could not read log file %s (%s), treating as empty", path, e)
        return ""
