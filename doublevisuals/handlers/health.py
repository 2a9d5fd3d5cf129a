"""Health check endpoint handler."""

from datetime import UTC, datetime

from fastapi.responses import JSONResponse

from doublevisuals import __version__
from doublevisuals.content import WORKS
from doublevisuals.models.site import HealthCheckResponse


async def health_check() -> JSONResponse:
    """
    Handles the health check request.
    Returns a JSON response with the server's health status.
    """
    response_model = HealthCheckResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(UTC),
        works_loaded=len(WORKS),
    )

    return JSONResponse(content=response_model.model_dump(mode="json"))
