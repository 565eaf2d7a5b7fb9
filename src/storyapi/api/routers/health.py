"""Health and readiness probes.

Neither probe needs a bearer token. Both answer from the story handler
built at startup, so they fail when the lifespan has not run.
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from storyapi.core.config import get_settings
from storyapi.services.story_store import StoreError

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    story_store: str


async def _story_store_status(request: Request) -> str:
    handler = getattr(request.app.state, "story_handler", None)
    if handler is None:
        return "not initialized"
    try:
        await handler.store.ping()
    except StoreError as e:
        return f"error: {e.message}"
    return "healthy"


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Report version and whether the story store answers a query."""
    store_status = await _story_store_status(request)
    return HealthResponse(
        status="healthy" if store_status == "healthy" else "degraded",
        version=get_settings().app_version,
        story_store=store_status,
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: 503 until the story store can serve requests."""
    ready = await _story_store_status(request) == "healthy"
    return JSONResponse(
        status_code=status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"ready": ready},
    )


@router.get("/live")
async def liveness_check() -> dict:
    """Liveness probe."""
    return {"alive": True}
