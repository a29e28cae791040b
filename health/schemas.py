# ============================================================================
# HEALTH API SCHEMAS
# ============================================================================
# EPOCH: 1 - HEALTH PROBES
# STATUS: Core - Response schemas
# PURPOSE: Pydantic models documenting the probe payloads
# CREATED: 18 OCT 2026
# ============================================================================
"""
Health API Schemas

Response models for /health and /health/ready. Optional fields are
omitted from the JSON when unset.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from core.contracts import CheckStatus
from health.core import CheckResult, LivenessReport, ReadinessReport


class LivenessResponse(BaseModel):
    """Liveness probe payload."""
    status: CheckStatus = Field(
        CheckStatus.OK,
        description="Health status of the service; always 'ok' when answered",
    )
    uptime: int = Field(..., ge=0, description="Uptime in seconds")
    version: Optional[str] = Field(None, description="Application version")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"status": "ok", "uptime": 12345, "version": "1.0.0"}
            ]
        }
    }

    @classmethod
    def from_report(cls, report: LivenessReport) -> "LivenessResponse":
        return cls(
            status=report.status,
            uptime=report.uptime_seconds,
            version=report.version,
        )


class ReadinessCheck(BaseModel):
    """One check's outcome."""
    name: str = Field(..., description="Check identifier", examples=["supabase"])
    status: CheckStatus = Field(..., description="'ok' or 'degraded'")
    error: Optional[str] = Field(
        None, description="Why the check is degraded", examples=["timeout"]
    )

    @classmethod
    def from_result(cls, result: CheckResult) -> "ReadinessCheck":
        return cls(name=result.name, status=result.status, error=result.error)


class ReadinessResponse(BaseModel):
    """Readiness probe payload."""
    ready: bool = Field(..., description="True iff every check is ok")
    checks: List[ReadinessCheck] = Field(
        default_factory=list, description="Check outcomes, in registration order"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "ready": False,
                    "checks": [
                        {"name": "env", "status": "ok"},
                        {"name": "supabase", "status": "degraded", "error": "timeout"},
                    ],
                }
            ]
        }
    }

    @classmethod
    def from_report(cls, report: ReadinessReport) -> "ReadinessResponse":
        return cls(
            ready=report.ready,
            checks=[ReadinessCheck.from_result(c) for c in report.checks],
        )


__all__ = [
    "LivenessResponse",
    "ReadinessCheck",
    "ReadinessResponse",
]
