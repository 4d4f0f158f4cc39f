from __future__ import annotations

import json
from typing import Any

from ocrs_parser.core.exceptions import ProviderError
from ocrs_parser.domain.models import TokenUsage


def extract_message_content(data: dict[str, Any]) -> str | None:
    """Return choices[0].message.content, or None when absent or blank."""
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return None
    message = choices[0].get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    if isinstance(content, str) and content.strip():
        return content
    return None


def parse_record(content: str | None, *, provider_label: str = "OpenAI") -> dict[str, Any]:
    """Decode the assistant content into the extracted record.

    Raises:
        ProviderError: Empty content, or content that is not a JSON object.
    """
    if content is None:
        raise ProviderError(f"{provider_label} returned empty response", error_type="empty_response")
    try:
        obj = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ProviderError(
            f"{provider_label} returned malformed JSON: {exc.msg}",
            error_type="malformed_response",
        ) from exc
    if not isinstance(obj, dict):
        raise ProviderError(
            f"{provider_label} returned malformed JSON: expected object, got {type(obj).__name__}",
            error_type="malformed_response",
        )
    return obj


def parse_usage(data: dict[str, Any]) -> TokenUsage:
    usage = data.get("usage")
    if not isinstance(usage, dict):
        return TokenUsage()
    return TokenUsage(
        input_tokens=int(usage.get("prompt_tokens") or 0),
        output_tokens=int(usage.get("completion_tokens") or 0),
    )
