# ============================================================================
# HEALTH CHECK IMPLEMENTATIONS
# ============================================================================
# EPOCH: 1 - HEALTH PROBES
# STATUS: Infrastructure - Health check implementations
# PURPOSE: Concrete readiness checks and the default check set
# CREATED: 18 OCT 2026
# ============================================================================
"""
Health Check Implementations

- env: Required environment variables present
- supabase: Supabase REST API reachable

build_default_registry() wires them up in that order.
"""

from typing import Mapping, Optional

from core.config import Defaults, get_defaults
from health.checks.environment import EnvironmentCheck
from health.checks.dependency import DependencyCheck, SupabaseCheck
from health.registry import CheckRegistry


def build_default_registry(
    defaults: Optional[Defaults] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> CheckRegistry:
    """
    Registry with the env check followed by the Supabase check.

    Both checks read environ (os.environ when None) at check time.
    """
    defaults = defaults or get_defaults()
    return CheckRegistry([
        EnvironmentCheck(
            required=defaults.health.required_env_vars, environ=environ
        ),
        SupabaseCheck(environ=environ),
    ])


__all__ = [
    "EnvironmentCheck",
    "DependencyCheck",
    "SupabaseCheck",
    "build_default_registry",
]
