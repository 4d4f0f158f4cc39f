"""
Input normalization and format classification.

Bounds and cleans raw recipe text before extraction and classifies how much
explicit structure it has. The format tier only steers the extraction
prompt; it never affects validation.
"""

from __future__ import annotations

import logging
import re
import unicodedata

from ocrs_parser.core.const import MAX_INPUT_LENGTH, MIN_TITLED_PARAGRAPHS, TITLE_MAX_LENGTH
from ocrs_parser.core.exceptions import EmptyInputError, InputTooLargeError
from ocrs_parser.domain.models import FormatTier, PreprocessedText

logger = logging.getLogger(__name__)

SECTION_MARKERS = (
    re.compile(r"\bingredients?\s*:", re.IGNORECASE),
    re.compile(r"\binstructions?\s*:", re.IGNORECASE),
    re.compile(r"\bdirections?\s*:", re.IGNORECASE),
    re.compile(r"\bmethod\s*:", re.IGNORECASE),
    re.compile(r"\bsteps?\s*:", re.IGNORECASE),
    re.compile(r"\bprocedure\s*:", re.IGNORECASE),
)

_BULLET_LINE = re.compile(r"^\s*[-*•]\s+", re.MULTILINE)
_NUMBERED_LINE = re.compile(r"^\s*\d+[.)]\s+", re.MULTILINE)
_PARAGRAPH_BREAK = re.compile(r"\n\n+")
_EXCESS_NEWLINES = re.compile(r"\n{3,}")
_EXCESS_SPACES = re.compile(r"[ \t]{2,}")

_QUOTES = str.maketrans(
    {
        "\u201c": '"',
        "\u201d": '"',
        "\u201e": '"',
        "\u201f": '"',
        "\u2018": "'",
        "\u2019": "'",
        "\u201a": "'",
        "\u201b": "'",
    }
)


def normalize_text(text: str) -> str:
    """Apply the normalization chain to already-trimmed text.

    Order matters: quotes are mapped after NFC composition, and spaces are
    collapsed after newline runs so single newlines survive untouched.
    """
    text = unicodedata.normalize("NFC", text)
    text = text.translate(_QUOTES)
    text = _EXCESS_NEWLINES.sub("\n\n", text)
    text = _EXCESS_SPACES.sub(" ", text)
    return text.strip()


def detect_format(text: str) -> FormatTier:
    """Classify normalized text; first matching tier wins."""
    marker_count = sum(1 for marker in SECTION_MARKERS if marker.search(text))

    # Clear section headers like "Ingredients:" AND "Instructions:"
    if marker_count >= 2:
        return FormatTier.STRUCTURED

    has_lists = bool(_BULLET_LINE.search(text) or _NUMBERED_LINE.search(text))
    if marker_count >= 1 or has_lists:
        return FormatTier.SEMI_STRUCTURED

    # Prose recipe broken into paragraphs under a short title-like first line
    paragraphs = _PARAGRAPH_BREAK.split(text)
    if len(paragraphs) >= MIN_TITLED_PARAGRAPHS:
        first = paragraphs[0].strip()
        if len(first) < TITLE_MAX_LENGTH and "." not in first:
            return FormatTier.SEMI_STRUCTURED

    return FormatTier.UNSTRUCTURED


def preprocess(raw: str) -> PreprocessedText:
    """Normalize raw input and detect its format tier.

    Raises:
        EmptyInputError: Trimmed input is empty.
        InputTooLargeError: Trimmed input is longer than MAX_INPUT_LENGTH.
    """
    text = raw.strip()

    if not text:
        raise EmptyInputError()

    if len(text) > MAX_INPUT_LENGTH:
        raise InputTooLargeError(max_length=MAX_INPUT_LENGTH, actual_length=len(text))

    text = normalize_text(text)
    tier = detect_format(text)
    logger.debug("input_preprocessed", extra={"format_tier": tier.value})
    return PreprocessedText(text=text, format=tier)
