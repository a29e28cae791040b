# ============================================================================
# HEALTH PROBE SERVICE - MAIN APPLICATION
# ============================================================================
# EPOCH: 1 - HEALTH PROBES
# STATUS: Core - FastAPI application entry point
# PURPOSE: Main application exposing liveness/readiness probes
# CREATED: 18 OCT 2026
# ============================================================================
"""
Health Probe Service Main Application

FastAPI application that:
1. Loads configuration from the environment
2. Builds the readiness check set and health service
3. Serves /health and /health/ready

Usage:
    uvicorn main:app --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from __version__ import __version__, BUILD_DATE, EPOCH
from core.config import Defaults, get_defaults
from core.logging import configure_logging
from health import HealthService, health_router
from health.checks import build_default_registry

logger = logging.getLogger(__name__)


def create_app(defaults: Optional[Defaults] = None) -> FastAPI:
    """Build the application; defaults come from the environment if omitted."""
    defaults = defaults or get_defaults()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        Logs startup/shutdown; the health service itself needs no teardown.
        """
        logger.info(
            f"Starting {defaults.app.service_name} v{defaults.app.version} "
            f"(Epoch {EPOCH}, Build {BUILD_DATE})"
        )
        logger.info(
            f"Readiness checks: {', '.join(app.state.health_service.registry.names())} "
            f"(timeout {defaults.health.timeout_ms}ms)"
        )
        yield
        logger.info(f"{defaults.app.service_name} stopped")

    app = FastAPI(
        title="Health Probes",
        description="Liveness and readiness probes",
        version=__version__,
        lifespan=lifespan,
    )

    # Liveness uptime counts from app creation
    app.state.health_service = HealthService.from_defaults(
        build_default_registry(defaults), defaults
    )

    app.include_router(health_router)

    return app


_defaults = get_defaults()
configure_logging(level=_defaults.app.log_level, json_output=_defaults.app.json_logs)

app = create_app(_defaults)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
