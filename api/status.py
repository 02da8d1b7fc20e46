import logging
from fastapi import APIRouter, HTTPException, Query
from typing import Optional, Dict, Any
from models.dashboard import DashboardReport, StatusStream
from services.environment import ENVIRONMENTS, PARTNERS, DEFAULT_ENV, DEFAULT_PARTNER
from services.report_builder import report_builder
from services.service_config import ServiceConfigError

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Status Dashboard"])

# 📊 Full dashboard for an environment
@router.get("/status", response_model=DashboardReport)
async def get_dashboard(
    env: Optional[str] = Query(None, description="production, sandbox or live-test"),
    partner_id: Optional[str] = Query(None, alias="partnerId"),
):
    """
    Builds the 30-day status grid of every configured service.
    - env / partnerId: invalid values fall back to the defaults
    """
    try:
        return await report_builder.build_dashboard(env=env, partner_id=partner_id)
    except ServiceConfigError as e:
        logger.error("Error loading service configuration: %s", e)
        raise HTTPException(
            status_code=500,
            detail="An internal error occurred while loading the service configuration."
        )

# 🌐 Allowed environments and partners
@router.get("/status/environments")
async def get_environments() -> Dict[str, Any]:
    return {
        "environments": list(ENVIRONMENTS),
        "partners": list(PARTNERS),
        "default_env": DEFAULT_ENV,
        "default_partner": DEFAULT_PARTNER,
    }

# 🔍 Single service, ungrouped
@router.get("/status/services/{key}", response_model=StatusStream)
async def get_service_status(
    key: str,
    env: Optional[str] = Query(None, description="production, sandbox or live-test"),
):
    """Status stream of one service, even if it's normally shown inside a group"""
    try:
        stream = await report_builder.build_service_stream(key, env=env)
    except ServiceConfigError as e:
        logger.error("Error loading service configuration: %s", e)
        raise HTTPException(
            status_code=500,
            detail="An internal error occurred while loading the service configuration."
        )
    if not stream:
        raise HTTPException(status_code=404, detail=f"Service not found: {key}")
    return stream
