"""Extraction provider ports.

Two separate capabilities: every provider is an ``Extractor``; a provider
that can take correction feedback is additionally a ``FeedbackExtractor``.
Both protocols are runtime-checkable so the orchestrator can ask a provider
instance which capabilities it has.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from ocrs_parser.domain.models import FormatTier, ParseResult


@runtime_checkable
class Extractor(Protocol):  # pragma: no cover - contract
    """Converts recipe text into a candidate record."""

    async def parse(self, text: str, format_hint: FormatTier) -> ParseResult: ...


@runtime_checkable
class FeedbackExtractor(Protocol):  # pragma: no cover - contract
    """Re-extracts with the previous attempt's errors as correction instructions."""

    async def parse_with_feedback(
        self,
        text: str,
        format_hint: FormatTier,
        prior_errors: Sequence[str],
    ) -> ParseResult: ...
