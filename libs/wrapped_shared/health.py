# libs/wrapped_shared/health.py
"""
Payload for the wrapped service's /health endpoint.
"""

from typing import Any, Dict, Sequence

from .models import HealthResponse, HealthStatus


def format_health_response(
    version: str, details: Dict[str, Any], problems: Sequence[str] = ()
) -> HealthResponse:
    """
    Report the service as ok, or as warning when any problem is listed.

    Args:
        version: Service version
        details: Settings and data sizes worth showing to an operator
        problems: Human-readable problems; copied to details["problems"]

    Returns:
        HealthResponse for the /health endpoint
    """
    if not problems:
        return HealthResponse(status=HealthStatus.OK, details=details, version=version)
    return HealthResponse(
        status=HealthStatus.WARNING,
        details={**details, "problems": list(problems)},
        version=version,
    )
