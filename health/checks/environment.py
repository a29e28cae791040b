# ============================================================================
# ENVIRONMENT HEALTH CHECK
# ============================================================================
# EPOCH: 1 - HEALTH PROBES
# STATUS: Infrastructure - Configuration presence check
# PURPOSE: Verify required environment variables are set and non-empty
# CREATED: 18 OCT 2026
# ============================================================================
"""
Environment Health Check

Verifies required configuration keys are present. Does NOT check whether
values are valid; dependency checks find that out.
"""

import logging
import os
from typing import List, Mapping, Optional, Sequence

from core.config import DEFAULT_REQUIRED_ENV_VARS
from core.contracts import FailureKind
from health.core import Check, CheckResult, describe_exception

logger = logging.getLogger(__name__)


class EnvironmentCheck(Check):
    """
    Configuration health check.

    A key is missing if absent or empty. Missing keys are reported in
    the order they were required. The environment is read on every
    check, never cached; SupabaseCheck follows the same rule.
    """

    name = "env"

    def __init__(
        self,
        required: Optional[Sequence[str]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.required = tuple(DEFAULT_REQUIRED_ENV_VARS if required is None else required)
        # None means read os.environ at check time
        self._environ = environ

    def missing(self) -> List[str]:
        environ = os.environ if self._environ is None else self._environ
        return [key for key in self.required if not environ.get(key)]

    async def check(self) -> CheckResult:
        try:
            missing = self.missing()
        except Exception as e:
            logger.error(
                f"Environment check failed: {type(e).__name__}: "
                f"{describe_exception(e)}"
            )
            return CheckResult.degraded(self.name, "env check failed")

        if missing:
            return CheckResult.degraded(
                self.name,
                f"Missing env vars: {', '.join(missing)}",
                FailureKind.CONFIGURATION_MISSING,
            )

        return CheckResult.ok(self.name)


__all__ = [
    "EnvironmentCheck",
]
