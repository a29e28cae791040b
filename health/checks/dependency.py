# ============================================================================
# DEPENDENCY HEALTH CHECKS
# ============================================================================
# EPOCH: 1 - HEALTH PROBES
# STATUS: Infrastructure - External dependency reachability
# PURPOSE: Fail-fast config precondition plus one read-only probe
# CREATED: 18 OCT 2026
# ============================================================================
"""
Dependency Health Checks

- DependencyCheck: base class; precondition, then a single probe
- SupabaseCheck: Supabase REST API reachability

If connection settings are missing the check is DEGRADED without any
network call. Probe failures of every sort (connect refused, transport
timeout, auth failure, query error) end up as a DEGRADED result.
"""

import logging
from abc import abstractmethod
from typing import Callable, Mapping, Optional

from core.config import SupabaseDefaults
from core.contracts import FailureKind
from health.core import Check, CheckResult, describe_exception
from infrastructure.supabase import SupabaseClient

logger = logging.getLogger(__name__)


class DependencyCheck(Check):
    """
    Reachability check for one external dependency.

    Subclasses supply missing_configuration() and probe(). probe()
    signals failure by raising; check() turns that into a result.
    """

    name = "dependency"
    unreachable_message = "dependency unreachable"

    @abstractmethod
    def missing_configuration(self) -> Optional[str]:
        """Describe missing connection settings, or None if configured."""

    @abstractmethod
    async def probe(self) -> None:
        """One minimal, side-effect free request. Raises on failure."""

    async def check(self) -> CheckResult:
        try:
            missing = self.missing_configuration()
        except Exception as e:
            logger.error(
                f"{self.name} configuration check failed: {describe_exception(e)}"
            )
            return CheckResult.from_exception(
                self.name, e, self.unreachable_message,
                FailureKind.CONFIGURATION_MISSING,
            )

        if missing:
            return CheckResult.degraded(
                self.name, missing, FailureKind.CONFIGURATION_MISSING
            )

        try:
            await self.probe()
        except Exception as e:
            logger.warning(
                f"{self.name} probe failed: {type(e).__name__}: "
                f"{describe_exception(e)}"
            )
            return CheckResult.from_exception(
                self.name, e, self.unreachable_message,
                FailureKind.DEPENDENCY_UNREACHABLE,
            )

        return CheckResult.ok(self.name)


class SupabaseCheck(DependencyCheck):
    """
    Supabase health check.

    Pings the REST API with the service role key. A fresh client is
    opened per probe and closed on exit, including on cancellation.

    Without explicit settings, connection settings are read from the
    environment on every check, so this check and EnvironmentCheck
    always judge the same variables.
    """

    name = "supabase"
    unreachable_message = "Supabase unreachable"

    def __init__(
        self,
        settings: Optional[SupabaseDefaults] = None,
        environ: Optional[Mapping[str, str]] = None,
        client_factory: Callable[[SupabaseDefaults], SupabaseClient] = SupabaseClient,
    ):
        self._settings = settings
        # None means read os.environ at check time
        self._environ = environ
        self._client_factory = client_factory

    @property
    def settings(self) -> SupabaseDefaults:
        if self._settings is not None:
            return self._settings
        return SupabaseDefaults.from_env(self._environ)

    def missing_configuration(self) -> Optional[str]:
        if not self.settings.is_configured:
            return "Supabase env not configured"
        return None

    async def probe(self) -> None:
        async with self._client_factory(self.settings) as client:
            await client.ping()


__all__ = [
    "DependencyCheck",
    "SupabaseCheck",
]
