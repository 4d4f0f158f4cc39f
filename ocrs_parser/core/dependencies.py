"""FastAPI dependency injection functions."""

from fastapi import HTTPException, Request, status

from ocrs_parser.domain.pipeline.orchestrator import Pipeline


async def get_pipeline(request: Request) -> Pipeline:
    """Get the parsing pipeline built at startup.

    Raises:
        HTTPException: 503 if the pipeline is unavailable
    """
    pipeline = getattr(request.app.state, "pipeline", None)

    if pipeline is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Pipeline unavailable",
        )

    return pipeline
