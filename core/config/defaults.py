# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# EPOCH: 1 - HEALTH PROBES
# STATUS: Core - Default configuration values
# PURPOSE: Centralized defaults for probes, Supabase ping and app metadata
# CREATED: 18 OCT 2026
# ============================================================================
"""
Configuration Defaults

Provides sensible defaults for the health probe service.
These can be overridden via environment variables.

Design:
- Immutable dataclasses for defaults
- Environment variable overrides
- Type-safe access
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from __version__ import __version__

logger = logging.getLogger(__name__)

# Keys whose presence the env check verifies unless overridden
DEFAULT_REQUIRED_ENV_VARS: Tuple[str, ...] = (
    "SUPABASE_URL",
    "SUPABASE_SERVICE_ROLE_KEY",
)


def _env_number(environ: Mapping[str, str], key: str, default, cast=int):
    """Parse a numeric env var, falling back to default on bad input."""
    raw = environ.get(key)
    if raw is None or raw == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {key}={raw!r}, using {default}")
        return default


@dataclass(frozen=True)
class HealthDefaults:
    """
    Defaults for the readiness probe.

    timeout_ms bounds every check in one readiness invocation.
    """
    timeout_ms: int = 1500
    required_env_vars: Tuple[str, ...] = DEFAULT_REQUIRED_ENV_VARS

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "HealthDefaults":
        """Create from environment variables."""
        environ = os.environ if environ is None else environ

        timeout_ms = _env_number(environ, "HEALTH_CHECK_TIMEOUT_MS", 1500)
        if timeout_ms <= 0:
            logger.warning("HEALTH_CHECK_TIMEOUT_MS must be positive, using 1500")
            timeout_ms = 1500

        raw_vars = environ.get("HEALTH_REQUIRED_ENV_VARS", "")
        required = tuple(v.strip() for v in raw_vars.split(",") if v.strip())

        return cls(
            timeout_ms=timeout_ms,
            required_env_vars=required or DEFAULT_REQUIRED_ENV_VARS,
        )


@dataclass(frozen=True)
class SupabaseDefaults:
    """
    Connection settings for the Supabase dependency ping.

    url/service_role_key are None when not supplied; the dependency
    check reports that instead of attempting any network call.

    Not part of the cached Defaults bundle: SupabaseCheck re-reads these
    from the environment on every check, as EnvironmentCheck does.
    """
    url: Optional[str] = None
    service_role_key: Optional[str] = field(default=None, repr=False)

    # Lightweight ping target: system catalog, one row, no scan
    probe_table: str = "pg_catalog.pg_tables"
    request_timeout_seconds: float = 5.0

    @property
    def is_configured(self) -> bool:
        """True when both endpoint and credential are present."""
        return bool(self.url) and bool(self.service_role_key)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SupabaseDefaults":
        """Create from environment variables."""
        environ = os.environ if environ is None else environ
        return cls(
            url=environ.get("SUPABASE_URL") or None,
            service_role_key=environ.get("SUPABASE_SERVICE_ROLE_KEY") or None,
            probe_table=environ.get("SUPABASE_PROBE_TABLE", "pg_catalog.pg_tables"),
            request_timeout_seconds=_env_number(
                environ, "SUPABASE_PING_TIMEOUT_SECONDS", 5.0, cast=float
            ),
        )


@dataclass(frozen=True)
class AppDefaults:
    """Process metadata and logging settings."""
    version: Optional[str] = __version__
    service_name: str = "health-probes"
    log_level: str = "INFO"
    log_format: str = "human"  # "human" or "json"

    @property
    def json_logs(self) -> bool:
        return self.log_format.lower() == "json"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppDefaults":
        """Create from environment variables."""
        environ = os.environ if environ is None else environ
        return cls(
            version=environ.get("APP_VERSION") or __version__,
            service_name=environ.get("SERVICE_NAME", "health-probes"),
            log_level=environ.get("LOG_LEVEL", "INFO"),
            log_format=environ.get("LOG_FORMAT", "human"),
        )


# ============================================================================
# GLOBAL DEFAULTS INSTANCE
# ============================================================================

@dataclass
class Defaults:
    """Container for all default configurations."""
    health: HealthDefaults = field(default_factory=HealthDefaults)
    app: AppDefaults = field(default_factory=AppDefaults)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Defaults":
        """Create all defaults from environment variables."""
        return cls(
            health=HealthDefaults.from_env(environ),
            app=AppDefaults.from_env(environ),
        )


_defaults: Optional[Defaults] = None


def get_defaults() -> Defaults:
    """Get global defaults instance."""
    global _defaults
    if _defaults is None:
        _defaults = Defaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "DEFAULT_REQUIRED_ENV_VARS",
    "HealthDefaults",
    "SupabaseDefaults",
    "AppDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
