"""
Structural validation of extracted records.

Strict-schema providers return ``null`` for every optional field they could
not fill. Those nulls are removed first, so "null" and "absent" are the same
thing from here on, and the record is then validated against the canonical
OCRS model in one full pass that collects every violation.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from ocrs_parser.core.exceptions import StructuralError
from ocrs_parser.domain.models import ValidationIssue
from ocrs_parser.domain.recipe import OCRSRecipe


def strip_nulls(value: Any) -> Any:
    """Recursively drop null-valued keys from mappings.

    Lists keep their length; a null element stays in place so that the
    validator reports it at its index.
    """
    if isinstance(value, dict):
        return {key: strip_nulls(item) for key, item in value.items() if item is not None}
    if isinstance(value, list):
        return [strip_nulls(item) for item in value]
    return value


def _format_path(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc)


def issues_from_error(exc: ValidationError) -> list[ValidationIssue]:
    return [
        ValidationIssue(path=_format_path(err["loc"]), message=err["msg"])
        for err in exc.errors(include_url=False)
    ]


def validate_structure(extracted: Any) -> OCRSRecipe:
    """Strip nulls and validate ``extracted`` as an OCRS record.

    Raises:
        StructuralError: With one issue per violation found.
    """
    cleaned = strip_nulls(extracted)
    if not isinstance(cleaned, dict):
        raise StructuralError(
            [ValidationIssue(path="", message=f"Expected object, received {type(cleaned).__name__}")]
        )
    try:
        return OCRSRecipe.model_validate(cleaned)
    except ValidationError as exc:
        raise StructuralError(issues_from_error(exc)) from exc
