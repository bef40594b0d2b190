"""Health check routes."""

from fastapi import APIRouter, Request

from ..schemas import HealthResponse
from ... import __version__

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check(request: Request) -> HealthResponse:
    """
    Health check endpoint.

    Returns the status of the API and its components.
    """
    components = {}

    try:
        from ...enhancement import detect_frameworks
        detect_frameworks("health check")
        components["enhancement"] = "healthy"
    except Exception:
        components["enhancement"] = "unavailable"

    try:
        request.app.state.store.list_all()
        components["library"] = "healthy"
    except Exception:
        components["library"] = "unavailable"

    all_healthy = all(v == "healthy" for v in components.values())
    status = "healthy" if all_healthy else "degraded"

    return HealthResponse(
        status=status,
        version=__version__,
        components=components
    )


@router.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "PromptForge API",
        "version": __version__,
        "description": "Rewrite instructions into structured, framework-driven prompts",
        "docs": "/docs",
        "endpoints": {
            "enhance": "/api/v1/enhance",
            "detect": "/api/v1/detect",
            "frameworks": "/api/v1/frameworks",
            "prompts": "/api/v1/prompts",
            "health": "/health"
        }
    }
