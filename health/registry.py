# ============================================================================
# HEALTH CHECK REGISTRY
# ============================================================================
# EPOCH: 1 - HEALTH PROBES
# STATUS: Infrastructure - Check registration
# PURPOSE: Ordered collection of readiness checks
# CREATED: 18 OCT 2026
# ============================================================================
"""
Health Check Registry

Holds the checks a readiness probe runs. Registration order is the
order results appear in the readiness report.

Usage:
    registry = CheckRegistry()
    registry.register(EnvironmentCheck())
    registry.register(SupabaseCheck(settings))

    checks = registry.get_all()
"""

import logging
from typing import Dict, Iterable, List, Optional

from health.core import Check, check_name

logger = logging.getLogger(__name__)


class CheckRegistry:
    """
    Registry for readiness checks.

    Instance-scoped: build one per application and hand it to the
    HealthService rather than sharing a process-wide registry.
    """

    def __init__(self, checks: Optional[Iterable[Check]] = None):
        self._checks: Dict[str, Check] = {}
        for check in checks or ():
            self.register(check)

    def register(self, check: Check) -> None:
        """
        Register a check instance.

        A check with an already registered name replaces the old one
        in its original position.
        """
        name = check_name(check)
        if name in self._checks:
            logger.warning(f"Overwriting health check: {name}")

        self._checks[name] = check
        logger.debug(f"Registered health check: {name}")

    def unregister(self, name: str) -> bool:
        """
        Remove a check by name.

        Returns:
            True if check was removed
        """
        if name in self._checks:
            del self._checks[name]
            return True
        return False

    def get(self, name: str) -> Optional[Check]:
        """Get check by name."""
        return self._checks.get(name)

    def get_all(self) -> List[Check]:
        """Get all registered checks in registration order."""
        return list(self._checks.values())

    def names(self) -> List[str]:
        return list(self._checks)

    def clear(self) -> None:
        """Remove all registered checks."""
        self._checks.clear()

    def __len__(self) -> int:
        return len(self._checks)

    def __contains__(self, name: str) -> bool:
        return name in self._checks


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "CheckRegistry",
]
