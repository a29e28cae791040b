# ============================================================================
# READINESS AGGREGATOR
# ============================================================================
# EPOCH: 1 - HEALTH PROBES
# STATUS: Infrastructure - Result aggregation
# PURPOSE: Fold ordered check results into a readiness report
# CREATED: 18 OCT 2026
# ============================================================================
"""
Readiness Aggregator

Pure, synchronous reduction of runner output. The report keeps the
results verbatim and in order; `ready` is computed from them on access.
"""

import logging
from typing import Iterable

from health.core import CheckResult, ReadinessReport

logger = logging.getLogger(__name__)


class ReadinessAggregator:
    """Reduces check results to a ReadinessReport."""

    def aggregate(self, results: Iterable[CheckResult]) -> ReadinessReport:
        report = ReadinessReport.from_results(results)
        if not report.ready:
            logger.info(
                "Not ready: "
                + ", ".join(f"{c.name}={c.error}" for c in report.degraded)
            )
        return report


__all__ = [
    "ReadinessAggregator",
]
