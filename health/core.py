# ============================================================================
# HEALTH CHECK CORE TYPES
# ============================================================================
# EPOCH: 1 - HEALTH PROBES
# STATUS: Infrastructure - Base classes for health checks
# PURPOSE: Check interface and immutable result/report types
# CREATED: 18 OCT 2026
# ============================================================================
"""
Health Check Core Types

Defines the check interface and the value objects produced per probe call.

Results are tagged by status:
- ok: check passed
- degraded: missing config, unreachable dependency, timeout or failure

Readiness is the conjunction of all check statuses and is always derived
from the checks themselves, never stored alongside them.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple

from core.contracts import CheckStatus, FailureKind

# Used when a failure carries no message of its own
FALLBACK_ERROR = "failed"


@dataclass(frozen=True)
class CheckResult:
    """Result from a single readiness check."""
    name: str
    status: CheckStatus
    error: Optional[str] = None
    # Diagnostic only; not part of the HTTP payload
    kind: Optional[FailureKind] = field(default=None, compare=False)

    def __post_init__(self):
        # Raises ValueError for anything outside ok/degraded
        if not isinstance(self.status, CheckStatus):
            object.__setattr__(self, "status", CheckStatus(self.status))
        if self.error is not None and not isinstance(self.error, str):
            object.__setattr__(self, "error", describe_exception(self.error))

    @property
    def is_ok(self) -> bool:
        return self.status == CheckStatus.OK

    @classmethod
    def ok(cls, name: str) -> "CheckResult":
        """Create passing result."""
        return cls(name=name, status=CheckStatus.OK)

    @classmethod
    def degraded(
        cls,
        name: str,
        error: str,
        kind: FailureKind = FailureKind.UNKNOWN_FAILURE,
    ) -> "CheckResult":
        """Create degraded result."""
        return cls(name=name, status=CheckStatus.DEGRADED, error=error, kind=kind)

    @classmethod
    def from_exception(
        cls,
        name: str,
        exc: BaseException,
        fallback: str = FALLBACK_ERROR,
        kind: FailureKind = FailureKind.UNKNOWN_FAILURE,
    ) -> "CheckResult":
        """Create degraded result from exception, keeping only its message."""
        return cls.degraded(name, describe_exception(exc) or fallback, kind)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON response."""
        result = {
            "name": self.name,
            "status": self.status.value,
        }
        if self.error is not None:
            result["error"] = self.error
        return result


@dataclass(frozen=True)
class ReadinessReport:
    """Ordered check results for one readiness invocation."""
    checks: Tuple[CheckResult, ...] = ()

    @classmethod
    def from_results(cls, results: Iterable[CheckResult]) -> "ReadinessReport":
        return cls(checks=tuple(results))

    @property
    def ready(self) -> bool:
        """True iff every check is OK (vacuously true when empty)."""
        return all(check.is_ok for check in self.checks)

    @property
    def degraded(self) -> Tuple[CheckResult, ...]:
        return tuple(check for check in self.checks if not check.is_ok)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON response."""
        return {
            "ready": self.ready,
            "checks": [check.to_dict() for check in self.checks],
        }


@dataclass(frozen=True)
class LivenessReport:
    """Process liveness: status is always ok if this could be built."""
    uptime_seconds: int
    version: Optional[str] = None
    status: CheckStatus = CheckStatus.OK

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON response."""
        result = {
            "status": self.status.value,
            "uptime": self.uptime_seconds,
        }
        if self.version is not None:
            result["version"] = self.version
        return result


class Check(ABC):
    """
    Base class for readiness checks.

    Subclass and implement check(). A check reports every failure it
    knows about by returning CheckResult.degraded(); the runner still
    guards against checks that raise or hang.

    Cancellation: when a check loses its timeout race the runner cancels
    its task. Let asyncio.CancelledError propagate and release resources
    in `async with` / `finally` blocks.

    Example:
        class CacheCheck(Check):
            name = "cache"

            async def check(self) -> CheckResult:
                try:
                    await cache.ping()
                except CacheError as e:
                    return CheckResult.degraded(self.name, str(e))
                return CheckResult.ok(self.name)
    """

    name: str = "unnamed"

    @abstractmethod
    async def check(self) -> CheckResult:
        """
        Execute the check.

        Returns:
            CheckResult with status and optional error string
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


def check_name(check: Any) -> str:
    """Declared name of a Check instance or bare check callable.

    Never raises: a name attribute that fails on access falls through
    to the class name.
    """
    for attr in ("name", "__name__"):
        try:
            name = getattr(check, attr, None)
        except Exception:
            continue
        if isinstance(name, str) and name:
            return name
    return type(check).__name__


def describe_exception(exc: Any) -> str:
    """Message of an exception, or "" when it has none or cannot be rendered."""
    try:
        return str(exc)
    except Exception:
        return ""


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "FALLBACK_ERROR",
    "CheckResult",
    "ReadinessReport",
    "LivenessReport",
    "Check",
    "check_name",
    "describe_exception",
]
