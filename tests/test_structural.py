from __future__ import annotations

from typing import Any

import pytest

from ocrs_parser.core.exceptions import StructuralError
from ocrs_parser.domain.pipeline.structural import strip_nulls, validate_structure
from ocrs_parser.domain.recipe import OCRSRecipe


def _paths(exc: StructuralError) -> set[str]:
    return {issue.path for issue in exc.issues}


def test_strip_nulls_removes_null_keys_recursively() -> None:
    value = {"a": None, "b": {"c": None, "d": 1}, "e": [{"f": None, "g": 2}]}
    assert strip_nulls(value) == {"b": {"d": 1}, "e": [{"g": 2}]}


def test_strip_nulls_keeps_list_positions() -> None:
    assert strip_nulls([1, None, {"x": None}]) == [1, None, {}]


def test_strip_nulls_does_not_mutate_input() -> None:
    value = {"a": None, "b": [None]}
    strip_nulls(value)
    assert value == {"a": None, "b": [None]}


def test_valid_record_with_nulls_is_accepted(valid_recipe: dict[str, Any]) -> None:
    record = validate_structure(valid_recipe)
    assert isinstance(record, OCRSRecipe)
    assert record.recipe.milk_type == "COW"
    assert record.recipe.yield_ is not None
    assert record.recipe.source is not None and record.recipe.source.reference is None
    assert [s.step_number for s in record.steps] == [1, 2, 3]
    assert [i.name for i in record.ingredients][0] == "Whole milk"


def test_null_optional_section_equals_absent(valid_recipe: dict[str, Any]) -> None:
    valid_recipe["aging"] = None
    assert validate_structure(valid_recipe).aging is None


def test_unknown_keys_are_ignored(valid_recipe: dict[str, Any]) -> None:
    valid_recipe["notes"] = "extra"
    valid_recipe["recipe"]["rating"] = 5
    validate_structure(valid_recipe)


def test_missing_top_level_fields_are_reported(valid_recipe: dict[str, Any]) -> None:
    del valid_recipe["recipe"]
    del valid_recipe["steps"]
    with pytest.raises(StructuralError) as exc_info:
        validate_structure(valid_recipe)
    assert _paths(exc_info.value) == {"recipe", "steps"}
    assert "Schema error at recipe: Field required" in exc_info.value.messages


def test_required_field_set_to_null_is_missing(valid_recipe: dict[str, Any]) -> None:
    valid_recipe["recipe"]["name"] = None
    with pytest.raises(StructuralError) as exc_info:
        validate_structure(valid_recipe)
    assert _paths(exc_info.value) == {"recipe.name"}


def test_all_violations_collected_in_one_pass(valid_recipe: dict[str, Any]) -> None:
    valid_recipe["recipe"]["style"] = "CRUMBLY"
    valid_recipe["steps"][1]["stepNumber"] = "2"
    valid_recipe["steps"][2]["temperature"] = {"target": "hot", "unit": "K"}
    valid_recipe["safety"]["allergens"] = ["MILK", "DAIRY"]
    with pytest.raises(StructuralError) as exc_info:
        validate_structure(valid_recipe)
    assert _paths(exc_info.value) == {
        "recipe.style",
        "steps.1.stepNumber",
        "steps.2.temperature.target",
        "steps.2.temperature.unit",
        "safety.allergens.1",
    }
    assert len(exc_info.value.messages) == 5
    assert all(m.startswith("Schema error at ") for m in exc_info.value.messages)


def test_fractional_float_for_integer_field_is_rejected(valid_recipe: dict[str, Any]) -> None:
    valid_recipe["steps"][0]["stepNumber"] = 1.5
    valid_recipe["recipe"]["totalTime"] = 360.5
    with pytest.raises(StructuralError) as exc_info:
        validate_structure(valid_recipe)
    assert _paths(exc_info.value) == {"steps.0.stepNumber", "recipe.totalTime"}


def test_integral_float_for_integer_field_is_accepted(valid_recipe: dict[str, Any]) -> None:
    valid_recipe["steps"][0]["stepNumber"] = 1.0
    valid_recipe["steps"][0]["duration"]["value"] = 20.0
    valid_recipe["recipe"]["totalTime"] = 360.0
    valid_recipe["aging"]["duration"] = {"min": 3.0, "max": 12.0, "unit": "months"}

    record = validate_structure(valid_recipe)

    assert record.steps[0].step_number == 1
    assert type(record.steps[0].step_number) is int
    assert record.steps[0].duration.value == 20
    assert record.recipe.total_time == 360
    assert record.aging.duration.min == 3 and record.aging.duration.max == 12


def test_bool_for_integer_field_is_rejected(valid_recipe: dict[str, Any]) -> None:
    valid_recipe["recipe"]["prepTime"] = True
    with pytest.raises(StructuralError) as exc_info:
        validate_structure(valid_recipe)
    assert _paths(exc_info.value) == {"recipe.prepTime"}


def test_null_list_element_is_reported_at_its_index(valid_recipe: dict[str, Any]) -> None:
    valid_recipe["ingredients"].append(None)
    with pytest.raises(StructuralError) as exc_info:
        validate_structure(valid_recipe)
    assert _paths(exc_info.value) == {"ingredients.4"}


def test_wrong_spec_tag_is_rejected(valid_recipe: dict[str, Any]) -> None:
    valid_recipe["spec"] = "OCRS/2.0"
    with pytest.raises(StructuralError) as exc_info:
        validate_structure(valid_recipe)
    assert _paths(exc_info.value) == {"spec"}


def test_non_object_root_is_rejected() -> None:
    with pytest.raises(StructuralError) as exc_info:
        validate_structure(["not", "a", "record"])
    assert exc_info.value.messages == ["Schema error at : Expected object, received list"]


def test_empty_steps_are_structurally_valid(valid_recipe: dict[str, Any]) -> None:
    valid_recipe["steps"] = []
    assert validate_structure(valid_recipe).steps == []
