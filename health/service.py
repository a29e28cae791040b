# ============================================================================
# HEALTH SERVICE
# ============================================================================
# EPOCH: 1 - HEALTH PROBES
# STATUS: Service - Probe facade
# PURPOSE: Liveness and readiness operations for the routing layer
# CREATED: 18 OCT 2026
# ============================================================================
"""
Health Service

Ties registry, runner, aggregator and liveness reporter together. Each
readiness() call runs every registered check afresh; nothing is cached
between calls.
"""

import logging
from typing import Optional

from core.config import Defaults, get_defaults
from health.aggregator import ReadinessAggregator
from health.core import LivenessReport, ReadinessReport
from health.liveness import LivenessReporter
from health.registry import CheckRegistry
from health.runner import CheckRunner

logger = logging.getLogger(__name__)


class HealthService:
    """Probe operations backed by explicitly injected components."""

    def __init__(
        self,
        registry: CheckRegistry,
        runner: Optional[CheckRunner] = None,
        aggregator: Optional[ReadinessAggregator] = None,
        reporter: Optional[LivenessReporter] = None,
    ):
        self.registry = registry
        self.runner = runner or CheckRunner()
        self.aggregator = aggregator or ReadinessAggregator()
        self.reporter = reporter or LivenessReporter()

    @classmethod
    def from_defaults(
        cls,
        registry: CheckRegistry,
        defaults: Optional[Defaults] = None,
    ) -> "HealthService":
        """Build with timeout and version taken from configuration."""
        defaults = defaults or get_defaults()
        return cls(
            registry=registry,
            runner=CheckRunner(timeout_ms=defaults.health.timeout_ms),
            reporter=LivenessReporter(version=defaults.app.version),
        )

    def liveness(self) -> LivenessReport:
        return self.reporter.liveness()

    async def readiness(self) -> ReadinessReport:
        results = await self.runner.run(self.registry.get_all())
        return self.aggregator.aggregate(results)


__all__ = [
    "HealthService",
]
