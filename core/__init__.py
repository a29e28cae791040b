# ============================================================================
# CORE MODULE
# ============================================================================
# EPOCH: 1 - HEALTH PROBES
# STATUS: Core module initialization
# PURPOSE: Export core contracts
# LAST_REVIEWED: 18 OCT 2026
# ============================================================================

from core.contracts import CheckStatus, FailureKind

__all__ = [
    "CheckStatus",
    "FailureKind",
]
