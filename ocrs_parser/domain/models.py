"""Domain models for the parsing pipeline.

Per-run values (preprocessed text, provider results, findings, final result)
are owned by a single run and never shared between runs.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from ocrs_parser.domain.recipe import OCRSRecipe


class FormatTier(str, Enum):
    """How much explicit section structure the source text exhibits."""

    STRUCTURED = "structured"
    SEMI_STRUCTURED = "semi-structured"
    UNSTRUCTURED = "unstructured"


class PreprocessedText(BaseModel):
    """Normalized input text with its detected format tier."""

    model_config = ConfigDict(frozen=True)

    text: str
    format: FormatTier


class TokenUsage(BaseModel):
    input_tokens: int = 0
    output_tokens: int = 0


class ParseResult(BaseModel):
    """One provider call: the extracted record plus call metadata.

    ``parsed_json`` is the raw record as returned by the backend, before
    null-stripping and validation.
    """

    parsed_json: Any
    provider: str
    model: str
    usage: TokenUsage = Field(default_factory=TokenUsage)


class ValidationIssue(BaseModel):
    """Structural error at a dotted field path (always fail severity)."""

    path: str
    message: str


class Severity(str, Enum):
    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"


class SemanticFinding(BaseModel):
    rule: str
    severity: Severity
    message: str


class PipelineSuccess(BaseModel):
    success: Literal[True] = True
    data: OCRSRecipe
    warnings: list[str] = Field(default_factory=list)
    attempts: int = 1


class PipelineFailure(BaseModel):
    """Every attempt failed; ``errors`` come from the last attempt only."""

    success: Literal[False] = False
    errors: list[str]
    warnings: list[str] = Field(default_factory=list)
    attempts: int


PipelineResult = Union[PipelineSuccess, PipelineFailure]
