# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# EPOCH: 1 - HEALTH PROBES
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 18 OCT 2026
# ============================================================================
"""
Configuration Module

Provides centralized configuration and defaults for the health probe service.
"""

from core.config.defaults import (
    DEFAULT_REQUIRED_ENV_VARS,
    HealthDefaults,
    SupabaseDefaults,
    AppDefaults,
    Defaults,
    get_defaults,
    reset_defaults,
)

__all__ = [
    "DEFAULT_REQUIRED_ENV_VARS",
    "HealthDefaults",
    "SupabaseDefaults",
    "AppDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
