from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ocrs_parser.api.schemas import HealthResponse
from ocrs_parser.core.config import get_settings

router = APIRouter()

SERVICE_VERSION = "1.0.0"


@router.get("/health", response_model=HealthResponse, tags=["health"])
async def health_check():
    """Liveness: the process is up and serving requests."""
    return HealthResponse(
        status="healthy",
        service=get_settings().APP_NAME,
        version=SERVICE_VERSION,
    )


@router.get("/ready", response_model=HealthResponse, tags=["health"])
async def readiness_check(request: Request):
    """Readiness: a pipeline was built at startup."""
    pipeline = getattr(request.app.state, "pipeline", None)
    ready = pipeline is not None

    return JSONResponse(
        status_code=200 if ready else 503,
        content=HealthResponse(
            status="healthy" if ready else "unhealthy",
            service=get_settings().APP_NAME,
            version=SERVICE_VERSION,
            max_attempts=pipeline.max_attempts if ready else None,
        ).model_dump(exclude_none=True),
    )
