import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ocrs_parser.api.schemas import ParseRequest, ProblemDetail
from ocrs_parser.core.dependencies import get_pipeline
from ocrs_parser.domain.models import PipelineFailure, PipelineSuccess
from ocrs_parser.domain.pipeline.orchestrator import Pipeline

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/recipes")


@router.post(
    "/parse",
    response_model=PipelineSuccess,
    tags=["recipes"],
    summary="Parse recipe text into an OCRS record",
    responses={
        400: {"model": ProblemDetail, "description": "Empty input"},
        413: {"model": ProblemDetail, "description": "Input too large"},
        422: {"model": PipelineFailure, "description": "All extraction attempts failed"},
    },
)
async def parse_recipe(body: ParseRequest, pipeline: Pipeline = Depends(get_pipeline)):
    """Run the extraction pipeline over the submitted text.

    InputErrors propagate to the application error handler and become
    Problem Details responses.
    """
    result = await pipeline.run(body.text)

    # by_alias keeps the record in its wire casing (milkType, yield, ...)
    content = result.model_dump(mode="json", by_alias=True, exclude_none=True)
    status_code = 200 if result.success else 422
    return JSONResponse(status_code=status_code, content=content)
