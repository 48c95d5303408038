from datetime import datetime, timezone

from fastapi import APIRouter

from chronicler import __version__
from chronicler.api.schemas import ApiHealth, HealthResponse, SuccessResponse

router = APIRouter()


@router.get("/api/health", response_model=SuccessResponse[ApiHealth], tags=["health"])
async def health() -> SuccessResponse[ApiHealth]:
    return SuccessResponse(
        data=ApiHealth(
            timestamp=datetime.now(timezone.utc).isoformat(),
            version=__version__,
            services={"distanceCalculation": "operational", "fileUpload": "operational"},
        )
    )


@router.get("/healthz/live", response_model=HealthResponse, include_in_schema=False)
async def liveness() -> HealthResponse:
    """Liveness check: is the process alive?"""
    return HealthResponse()
