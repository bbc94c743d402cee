"""
Hauge API — Shared Response Schemas
====================================

What:  Error and health payloads shared by every route module.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    What:  Error body returned for every non-2xx response.

    Examples:
        {"error": "Access token required"}
        {"error": "Validation failed", "details": ["Email must be a valid email"]}
    """

    error: str = Field(description="Human-readable error description")
    details: Optional[List[str]] = Field(
        default=None,
        description="Per-field validation messages (400 responses only)",
    )


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""

    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
