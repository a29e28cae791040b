# ============================================================================
# HEALTH CHECK MODULE
# ============================================================================
# EPOCH: 1 - HEALTH PROBES
# STATUS: Infrastructure - Health check engine
# PURPOSE: Liveness and readiness probes
# CREATED: 18 OCT 2026
# ============================================================================
"""
Health Check Module

Check engine for service probes:
- /health: Process alive (instant, no checks)
- /health/ready: Ready to serve traffic (all checks ok)

Architecture:
- Check: Base class for readiness checks
- CheckRegistry: Ordered set of checks to run
- CheckRunner: Concurrent execution, each check raced against a timeout
- ReadinessAggregator: Results -> ready flag + diagnostics
- LivenessReporter: Uptime/version, owns the process start instant
- HealthService: Facade used by the router

Usage:
    from health import HealthService, health_router
    from health.checks import build_default_registry

    app.state.health_service = HealthService.from_defaults(
        build_default_registry()
    )
    app.include_router(health_router)
"""

from health.core import (
    CheckResult,
    ReadinessReport,
    LivenessReport,
    Check,
)
from health.registry import CheckRegistry
from health.runner import CheckRunner
from health.aggregator import ReadinessAggregator
from health.liveness import LivenessReporter
from health.service import HealthService
from health.router import health_router

__all__ = [
    # Core types
    "CheckResult",
    "ReadinessReport",
    "LivenessReport",
    "Check",
    # Engine
    "CheckRegistry",
    "CheckRunner",
    "ReadinessAggregator",
    "LivenessReporter",
    "HealthService",
    # Router
    "health_router",
]
