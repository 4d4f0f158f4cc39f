"""
Loading of the packaged extraction resources.

The instruction template lives under ``ocrs_parser/prompts/extractor/`` and
is versioned as ``{version}.prompt.txt``; the canonical record schema lives
under ``ocrs_parser/schemas/``. Both can be overridden with explicit paths.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ocrs_parser.core.const import DEFAULT_PROMPT_VERSION, PROMPT_FILE, SCHEMA_FILE
from ocrs_parser.core.exceptions import ConfigurationError

PACKAGE_ROOT = Path(__file__).resolve().parents[2]
PROMPTS_DIR = PACKAGE_ROOT / "prompts" / "extractor"
SCHEMAS_DIR = PACKAGE_ROOT / "schemas"


def _read_text(path: Path, what: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(
            f"Cannot read {what} at {path}", details={"detail": str(exc)}
        ) from exc


def load_system_prompt(path: str | Path | None = None, version: str = DEFAULT_PROMPT_VERSION) -> str:
    prompt_path = Path(path) if path else PROMPTS_DIR / PROMPT_FILE.format(version=version)
    prompt = _read_text(prompt_path, "system prompt").strip()
    if not prompt:
        raise ConfigurationError(f"System prompt at {prompt_path} is empty")
    return prompt


def load_schema(path: str | Path | None = None) -> dict[str, Any]:
    """Read the canonical record schema; the root must be an object schema."""
    schema_path = Path(path) if path else SCHEMAS_DIR / SCHEMA_FILE
    raw = _read_text(schema_path, "schema")
    try:
        schema = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(
            f"Schema at {schema_path} is not valid JSON", details={"detail": exc.msg}
        ) from exc
    if not isinstance(schema, dict) or schema.get("type") != "object":
        raise ConfigurationError(f"Schema at {schema_path} must have an object root")
    return schema
