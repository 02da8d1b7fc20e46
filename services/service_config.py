import json
import asyncio
import logging
from typing import Any, Iterable, List

import httpx
from pydantic import ValidationError

from models.service_config import ServiceDescriptor

logger = logging.getLogger(__name__)

class ServiceConfigError(Exception):
    """The service configuration could not be read"""

def is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://"))

def parse_service_config(payload: Any) -> List[ServiceDescriptor]:
    """Validates descriptors, skipping entries that don't fit the model"""
    if not isinstance(payload, list):
        raise ServiceConfigError("Service configuration must be a JSON array")

    services = []
    for index, item in enumerate(payload):
        try:
            services.append(ServiceDescriptor(**item))
        except (ValidationError, TypeError) as e:
            logger.warning("Skipping service config entry %d: %s", index, e)
            continue
    return services

def _read_config_file(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)

async def load_service_config(source: str, timeout: float = 10) -> List[ServiceDescriptor]:
    try:
        if is_remote(source):
            async with httpx.AsyncClient(timeout=timeout) as client:
                response = await client.get(source, follow_redirects=True)
                response.raise_for_status()
                payload = response.json()
        else:
            loop = asyncio.get_running_loop()
            payload = await loop.run_in_executor(None, _read_config_file, source)
    except (OSError, ValueError, httpx.HTTPError) as e:
        raise ServiceConfigError(f"Could not load service config from {source}: {e}") from e

    return parse_service_config(payload)

def filter_by_tag(services: Iterable[ServiceDescriptor], tag: str) -> List[ServiceDescriptor]:
    return [service for service in services if service.has_tag(tag)]
