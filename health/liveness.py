# ============================================================================
# LIVENESS REPORTER
# ============================================================================
# EPOCH: 1 - HEALTH PROBES
# STATUS: Infrastructure - Process liveness
# PURPOSE: Uptime/version report for the liveness probe
# CREATED: 18 OCT 2026
# ============================================================================
"""
Liveness Reporter

No checks, no I/O: if this code runs, the process is alive. The start
instant is owned by the reporter and fixed at construction; inject the
reporter wherever liveness is served instead of reading a module global.
"""

import math
import time
from typing import Callable, Optional

from health.core import LivenessReport


class LivenessReporter:
    """
    Reports process uptime and version.

    Args:
        version: Application version, omitted from reports when None
        clock: Monotonic seconds source (injectable for tests)
    """

    def __init__(
        self,
        version: Optional[str] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.version = version
        self._clock = clock
        self._started_at = clock()

    @property
    def started_at(self) -> float:
        return self._started_at

    def uptime_seconds(self) -> int:
        """Whole seconds since construction, never negative."""
        return max(0, math.floor(self._clock() - self._started_at))

    def liveness(self) -> LivenessReport:
        return LivenessReport(
            uptime_seconds=self.uptime_seconds(),
            version=self.version,
        )


__all__ = [
    "LivenessReporter",
]
