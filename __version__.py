# ============================================================================
# VERSION - SERVICE PROBES
# ============================================================================
# EPOCH: 1 - HEALTH PROBES
# ============================================================================
"""
Version information for the health probe service.

This is the single source of truth for the application version.
APP_VERSION in the environment overrides it at runtime (see core.config).
"""
# Version format: major.minor.patch
__version__ = "0.1.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Build metadata
BUILD_DATE = "2026-10-18"

EPOCH = 1
CODENAME = "Health Probes"
