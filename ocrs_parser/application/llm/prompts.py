"""
Prompt assembly for the extraction backend.

The format-hint paragraph and the correction-feedback block are part of the
contract with the provider; keep their wording stable.
"""

from __future__ import annotations

from typing import Sequence

from ocrs_parser.domain.models import FormatTier

FORMAT_HINTS: dict[FormatTier, str] = {
    FormatTier.STRUCTURED: (
        "This input has clear section headers — extract from each section accordingly."
    ),
    FormatTier.SEMI_STRUCTURED: (
        "Some sections may be identifiable by headers, but instructions may be mixed with narrative."
    ),
    FormatTier.UNSTRUCTURED: (
        "Pay extra attention to extracting implicit ingredients and step boundaries from the narrative."
    ),
}

RETRY_ACK = "Let me re-parse with corrections."


def build_system_prompt(base_prompt: str, format_hint: FormatTier) -> str:
    return (
        f"{base_prompt}\n\n## Input Format Detection\n"
        f"This input appears to be {format_hint.value}. {FORMAT_HINTS[format_hint]}"
    )


def build_feedback_message(errors: Sequence[str]) -> str:
    bullets = "\n".join(f"- {e}" for e in errors)
    return (
        f"Your previous output had these errors:\n{bullets}\n"
        "Please fix these specific issues and re-output."
    )


def build_messages(
    base_prompt: str,
    text: str,
    format_hint: FormatTier,
    prior_errors: Sequence[str] | None = None,
) -> list[dict[str, str]]:
    messages = [
        {"role": "system", "content": build_system_prompt(base_prompt, format_hint)},
        {"role": "user", "content": text},
    ]
    if prior_errors:
        messages.append({"role": "assistant", "content": RETRY_ACK})
        messages.append({"role": "user", "content": build_feedback_message(prior_errors)})
    return messages
