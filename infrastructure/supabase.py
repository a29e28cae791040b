# ============================================================================
# SUPABASE HTTP CLIENT
# ============================================================================
# EPOCH: 1 - HEALTH PROBES
# STATUS: Infrastructure - Async HTTP client for Supabase REST
# PURPOSE: Minimal read-only ping against the Supabase PostgREST API
# CREATED: 18 OCT 2026
# ============================================================================
"""
Supabase HTTP Client

Async httpx client for the Supabase REST (PostgREST) endpoint. Only the
ping capability is implemented: a single-row select against a system
catalog view. No table scan, no writes, no auth session.

HTTP-level errors raise SupabaseError with the PostgREST message;
transport errors (connect refused, timeouts) propagate as httpx
exceptions. Callers decide how to report them.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from core.config import SupabaseDefaults

logger = logging.getLogger(__name__)

REST_PATH = "/rest/v1"


class SupabaseError(Exception):
    """Supabase answered, but with an error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SupabaseClient:
    """Async HTTP client for the Supabase REST API."""

    def __init__(
        self,
        settings: SupabaseDefaults,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not settings.is_configured:
            raise ValueError("Supabase URL and service role key are required")

        self._settings = settings
        self._base_url = settings.url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=f"{self._base_url}{REST_PATH}",
            headers=self._auth_headers(settings.service_role_key),
            timeout=httpx.Timeout(settings.request_timeout_seconds),
            transport=transport,
        )

    @staticmethod
    def _auth_headers(key: str) -> Dict[str, str]:
        return {
            "apikey": key,
            "Authorization": f"Bearer {key}",
            "Accept": "application/json",
        }

    async def __aenter__(self) -> "SupabaseClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def ping(self) -> None:
        """
        Select one row from the probe table.

        GET /rest/v1/{probe_table}?select=tablename&limit=1

        Raises:
            SupabaseError: Supabase returned an error status
            httpx.HTTPError: Transport-level failure
        """
        resp = await self._client.get(
            f"/{self._settings.probe_table}",
            params={"select": "tablename", "limit": "1"},
        )

        if resp.status_code >= 400:
            message = self._error_message(resp)
            logger.debug(f"Supabase ping returned {resp.status_code}: {message}")
            raise SupabaseError(message, status_code=resp.status_code)

    @staticmethod
    def _error_message(resp: httpx.Response) -> str:
        """PostgREST puts the reason in 'message'; fall back to the status."""
        try:
            body: Any = resp.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            for key in ("message", "msg", "error_description", "error"):
                if body.get(key):
                    return str(body[key])

        return f"HTTP {resp.status_code}"


__all__ = [
    "SupabaseError",
    "SupabaseClient",
]
