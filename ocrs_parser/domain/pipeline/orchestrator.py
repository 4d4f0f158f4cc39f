"""
Parsing pipeline orchestrator.

Runs preprocessing once, then up to ``1 + max_retries`` extraction attempts.
Each attempt goes through structural and semantic validation; any failure
becomes the correction feedback for the next attempt. The first fully valid
attempt ends the run.

States: PREPROCESSING -> EXTRACTING -> STRUCTURAL_VALIDATING ->
SEMANTIC_VALIDATING -> SUCCEEDED | FAILED, with a retry edge from either
validating state (and from a failed provider call) back to EXTRACTING.
"""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ocrs_parser.core.const import DEFAULT_MAX_RETRIES
from ocrs_parser.core.exceptions import (
    AttemptError,
    ConfigurationError,
    InputError,
    ProviderError,
    SemanticError,
    StructuralError,
)
from ocrs_parser.domain.models import (
    ParseResult,
    PipelineFailure,
    PipelineResult,
    PipelineSuccess,
    PreprocessedText,
    Severity,
)
from ocrs_parser.domain.pipeline.preprocessor import preprocess
from ocrs_parser.domain.pipeline.semantic import evaluate
from ocrs_parser.domain.pipeline.structural import validate_structure
from ocrs_parser.domain.ports.extractor_port import Extractor, FeedbackExtractor
from ocrs_parser.observability.metrics import record_attempt, record_run

logger = logging.getLogger(__name__)


class PipelineState(str, Enum):
    PREPROCESSING = "preprocessing"
    EXTRACTING = "extracting"
    STRUCTURAL_VALIDATING = "structural_validating"
    SEMANTIC_VALIDATING = "semantic_validating"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class RunState:
    """Mutable state of one run; never shared between runs."""

    run_id: str
    state: PipelineState = PipelineState.PREPROCESSING
    attempt: int = 0
    last_errors: list[str] = field(default_factory=list)
    t0: float = field(default_factory=time.perf_counter)

    @property
    def elapsed_ms(self) -> int:
        return int((time.perf_counter() - self.t0) * 1000)


def _attempt_outcome(exc: AttemptError) -> str:
    if isinstance(exc, ProviderError):
        return "provider_error"
    if isinstance(exc, StructuralError):
        return "structural_error"
    if isinstance(exc, SemanticError):
        return "semantic_error"
    return "error"


class Pipeline:
    """Turns free-form recipe text into a validated OCRS record."""

    def __init__(self, extractor: Extractor, *, max_retries: int = DEFAULT_MAX_RETRIES) -> None:
        if not isinstance(extractor, Extractor):
            raise TypeError(f"{type(extractor).__name__} does not implement Extractor.parse")
        if max_retries < 0:
            raise ConfigurationError(
                f"max_retries must be >= 0, got {max_retries}",
                details={"max_retries": max_retries},
            )
        self._extractor = extractor
        self._feedback_extractor: Optional[FeedbackExtractor] = (
            extractor if isinstance(extractor, FeedbackExtractor) else None
        )
        self.max_retries = max_retries

    @property
    def max_attempts(self) -> int:
        return 1 + self.max_retries

    async def _extract(self, pre: PreprocessedText, run: RunState) -> ParseResult:
        if run.attempt == 0 or self._feedback_extractor is None:
            return await self._extractor.parse(pre.text, pre.format)
        return await self._feedback_extractor.parse_with_feedback(
            pre.text, pre.format, list(run.last_errors)
        )

    async def run(self, raw_text: str) -> PipelineResult:
        """Parse ``raw_text`` into a PipelineSuccess or PipelineFailure.

        Raises:
            InputError: Empty or oversized input. No provider call is made.
        """
        run = RunState(run_id=uuid.uuid4().hex)

        try:
            pre = preprocess(raw_text)
        except InputError as exc:
            logger.warning(
                "input_rejected",
                extra={"run_id": run.run_id, "error_code": exc.error_code},
            )
            record_run("input_error")
            raise

        while run.attempt < self.max_attempts:
            run.state = PipelineState.EXTRACTING
            try:
                parsed = await self._extract(pre, run)

                run.state = PipelineState.STRUCTURAL_VALIDATING
                record = validate_structure(parsed.parsed_json)

                run.state = PipelineState.SEMANTIC_VALIDATING
                findings = evaluate(record)
                failures = [f for f in findings if f.severity is Severity.FAIL]
                if failures:
                    raise SemanticError(failures)
            except AttemptError as exc:
                run.last_errors = exc.messages
                record_attempt(_attempt_outcome(exc))
                logger.warning(
                    "attempt_failed",
                    extra={
                        "run_id": run.run_id,
                        "attempt": run.attempt + 1,
                        "max_attempts": self.max_attempts,
                        "error_code": exc.error_code,
                        "error_count": len(exc.messages),
                    },
                )
                run.attempt += 1
                continue

            warnings = [f.message for f in findings if f.severity is Severity.WARN]
            run.state = PipelineState.SUCCEEDED
            record_attempt("success")
            record_run("success", run.elapsed_ms / 1000)
            logger.info(
                "pipeline_succeeded",
                extra={
                    "run_id": run.run_id,
                    "attempt": run.attempt + 1,
                    "format_tier": pre.format.value,
                    "warning_count": len(warnings),
                    "duration_ms": run.elapsed_ms,
                },
            )
            return PipelineSuccess(data=record, warnings=warnings, attempts=run.attempt + 1)

        run.state = PipelineState.FAILED
        record_run("failure", run.elapsed_ms / 1000)
        logger.error(
            "pipeline_exhausted",
            extra={
                "run_id": run.run_id,
                "max_attempts": self.max_attempts,
                "error_count": len(run.last_errors),
                "duration_ms": run.elapsed_ms,
            },
        )
        # Warnings of a record that never validated are dropped
        return PipelineFailure(errors=run.last_errors, warnings=[], attempts=run.attempt)
