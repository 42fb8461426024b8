"""
Path2Hack Backend: Health Check Route
======================================

What:  GET /health for container health checks and load balancer probes.
How:   SELECT 1 against the database, list_models() against Gemini.

Status levels:
    - healthy:   all dependencies operational
    - degraded:  Gemini unreachable (registration and projects still work)
    - unhealthy: database unreachable
"""

import logging
import time

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from path2hack import __version__
from path2hack.database import get_db_session
from path2hack.schemas.common import HealthResponse
from path2hack.services.gemini_service import get_llm_service
from path2hack.services.llm_base import LLMService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    db: AsyncSession = Depends(get_db_session),
    llm: LLMService = Depends(get_llm_service),
) -> HealthResponse:
    db_status = "connected"
    gemini_status = "available"
    overall = "healthy"

    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    if not await llm.health_check():
        gemini_status = "unavailable"
        if overall != "unhealthy":
            overall = "degraded"

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        gemini=gemini_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
