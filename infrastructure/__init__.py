# ============================================================================
# INFRASTRUCTURE MODULE
# ============================================================================
# EPOCH: 1 - HEALTH PROBES
# STATUS: Infrastructure - External service clients
# PURPOSE: Clients for dependencies probed by readiness checks
# CREATED: 18 OCT 2026
# ============================================================================
"""
Infrastructure module for the health probe service.

Provides:
- SupabaseClient: Async Supabase REST client (ping only)
- SupabaseError: Error status returned by Supabase
"""

from infrastructure.supabase import SupabaseClient, SupabaseError

__all__ = [
    "SupabaseClient",
    "SupabaseError",
]
