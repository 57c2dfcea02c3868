"""Health check endpoint."""

from fastapi import APIRouter, Request

from vanillatemplates.api.models import HealthResponse
from vanillatemplates.config import VERSION

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check(request: Request) -> HealthResponse:
    """Health check endpoint with the active partial loader."""
    loader = getattr(request.app.state, "loader", None)
    return HealthResponse(
        status="healthy",
        version=VERSION,
        loader=loader.name if loader else None,
    )
