"""
Strict structured-output schema transformation.

Strict structured-output contracts require every object to list all of its
properties as required and to forbid additional properties. Optional
properties are therefore expressed as ``anyOf: [<schema>, {"type": "null"}]``;
the nulls this produces are stripped again before structural validation.
"""

from __future__ import annotations

from typing import Any

NULL_SCHEMA: dict[str, Any] = {"type": "null"}

# Provider-specific key ordering hint; carries no validation meaning.
ORDERING_HINT = "propertyOrdering"


def _is_nullable(node: dict[str, Any]) -> bool:
    variants = node.get("anyOf")
    return isinstance(variants, list) and len(variants) == 2 and variants[1] == NULL_SCHEMA


def to_strict(node: dict[str, Any]) -> dict[str, Any]:
    """Return the strict variant of ``node`` without mutating it.

    - object: all keys required, optional ones wrapped as nullable,
      ``additionalProperties: false``, description kept
    - array: items transformed, description kept
    - anything else: copied with the ordering hint removed

    Applying it to an already strict schema returns an equal schema.
    """
    if node.get("type") == "object" and isinstance(node.get("properties"), dict):
        properties: dict[str, dict[str, Any]] = node["properties"]
        required = set(node.get("required") or ())

        new_properties: dict[str, Any] = {}
        for key, prop in properties.items():
            if _is_nullable(prop):
                # Already wrapped by a previous pass
                new_properties[key] = {"anyOf": [to_strict(prop["anyOf"][0]), NULL_SCHEMA]}
                continue
            strict_prop = to_strict(prop)
            if key in required:
                new_properties[key] = strict_prop
            else:
                new_properties[key] = {"anyOf": [strict_prop, NULL_SCHEMA]}

        result: dict[str, Any] = {
            "type": "object",
            "properties": new_properties,
            "required": list(properties),
            "additionalProperties": False,
        }
        if node.get("description"):
            result["description"] = node["description"]
        return result

    if node.get("type") == "array" and isinstance(node.get("items"), dict):
        result = {"type": "array", "items": to_strict(node["items"])}
        if node.get("description"):
            result["description"] = node["description"]
        return result

    return {key: value for key, value in node.items() if key != ORDERING_HINT}
