# ============================================================================
# HEALTH CHECK ROUTER
# ============================================================================
# EPOCH: 1 - HEALTH PROBES
# STATUS: Infrastructure - FastAPI health check endpoints
# PURPOSE: Liveness and readiness probe endpoints
# CREATED: 18 OCT 2026
# ============================================================================
"""
Health Check Router

FastAPI router providing two probe endpoints:

Endpoints:
    GET /health        - Liveness probe (is the process alive?)
                         No dependency checks; always 200.

    GET /health/ready  - Readiness probe (can we serve traffic?)
                         Always 200. Degradation is reported in the
                         body (ready: false plus per-check errors),
                         never as a 5xx.

The HealthService is read from app.state.health_service; main.py puts
it there during startup.
"""

import logging
import uuid

from fastapi import APIRouter, Depends, Request

from core.logging import log_context
from health.schemas import LivenessResponse, ReadinessResponse
from health.service import HealthService

logger = logging.getLogger(__name__)

health_router = APIRouter(prefix="/health", tags=["health"])


def get_health_service(request: Request) -> HealthService:
    """Dependency: the application's HealthService."""
    return request.app.state.health_service


# ============================================================================
# LIVENESS PROBE
# ============================================================================

@health_router.get(
    "",
    response_model=LivenessResponse,
    response_model_exclude_none=True,
    summary="Health check (liveness)",
    description=(
        "Returns basic liveness information. Use this to verify the "
        "service process is running."
    ),
    responses={200: {"description": "Service is alive"}},
)
def liveness_probe(service: HealthService = Depends(get_health_service)):
    return LivenessResponse.from_report(service.liveness())


# ============================================================================
# READINESS PROBE
# ============================================================================

@health_router.get(
    "/ready",
    response_model=ReadinessResponse,
    response_model_exclude_none=True,
    summary="Readiness check",
    description=(
        "Checks whether the service is ready to receive traffic. "
        "Includes dependency and env validation."
    ),
    responses={200: {"description": "Readiness status (never fails)"}},
)
async def readiness_probe(
    request: Request,
    service: HealthService = Depends(get_health_service),
):
    correlation_id = request.headers.get("x-request-id") or uuid.uuid4().hex[:12]

    with log_context(correlation_id=correlation_id, operation="readiness"):
        report = await service.readiness()

    return ReadinessResponse.from_report(report)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "health_router",
    "get_health_service",
]
