# ============================================================================
# BASE CONTRACTS & ENUMS
# ============================================================================
# EPOCH: 1 - HEALTH PROBES
# STATUS: Foundation - Check status and failure taxonomy
# PURPOSE: Enums shared by checks, runner and HTTP schemas
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: CheckStatus, FailureKind
# DEPENDENCIES: enum
# ============================================================================
"""
Base contracts for the health probe system.

These values cross the HTTP boundary (CheckStatus) or stay internal to
logging and diagnostics (FailureKind).
"""

from enum import Enum


class CheckStatus(str, Enum):
    """
    Outcome of a single readiness check.

    Only OK counts towards readiness; anything else is DEGRADED.
    """
    OK = "ok"
    DEGRADED = "degraded"

    @property
    def is_ok(self) -> bool:
        return self is CheckStatus.OK


class FailureKind(str, Enum):
    """Why a check came back DEGRADED."""
    CONFIGURATION_MISSING = "configuration_missing"    # Required key absent/empty
    DEPENDENCY_UNREACHABLE = "dependency_unreachable"  # Probe failed
    TIMEOUT = "timeout"                                # Lost the timeout race
    UNKNOWN_FAILURE = "unknown_failure"                # Caught at runner boundary


__all__ = [
    "CheckStatus",
    "FailureKind",
]
