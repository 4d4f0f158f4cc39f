"""OCRS recipe parser.

Turns free-form cheesemaking recipe text into records conforming to the
Open Cheesemaking Recipe Standard (OCRS/1.0).
"""

from ocrs_parser.domain.models import FormatTier, PipelineFailure, PipelineSuccess
from ocrs_parser.domain.pipeline.orchestrator import Pipeline
from ocrs_parser.domain.pipeline.preprocessor import preprocess
from ocrs_parser.domain.pipeline.schema_strict import to_strict
from ocrs_parser.domain.pipeline.semantic import evaluate
from ocrs_parser.domain.pipeline.structural import validate_structure
from ocrs_parser.domain.recipe import OCRSRecipe

__all__ = [
    "FormatTier",
    "OCRSRecipe",
    "Pipeline",
    "PipelineFailure",
    "PipelineSuccess",
    "evaluate",
    "preprocess",
    "to_strict",
    "validate_structure",
]
