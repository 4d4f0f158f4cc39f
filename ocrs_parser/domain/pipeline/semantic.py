"""
Semantic (domain) rules for structurally valid OCRS records.

Each rule is a pure function registered under its id. Every rule returns at
least one finding: a single ``pass`` when it found nothing wrong, otherwise
one finding per violation, so an empty result never stands for success.
"""

from __future__ import annotations

from functools import wraps
from typing import Callable, Iterator

from ocrs_parser.core.const import MAX_PLAUSIBLE_TEMP_C, PH_MAX, PH_MIN, REQUIRED_ALLERGENS
from ocrs_parser.domain.models import SemanticFinding, Severity
from ocrs_parser.domain.recipe import OCRSRecipe, Step

Rule = Callable[[OCRSRecipe], list[SemanticFinding]]

RULES: dict[str, Rule] = {}


def rule(rule_id: str, pass_message: str) -> Callable[[Callable[[OCRSRecipe], Iterator[str]]], Rule]:
    """Register a rule that yields one failure message per violation."""

    def deco(fn: Callable[[OCRSRecipe], Iterator[str]]) -> Rule:
        @wraps(fn)
        def wrapper(recipe: OCRSRecipe) -> list[SemanticFinding]:
            findings = [
                SemanticFinding(rule=rule_id, severity=Severity.FAIL, message=message)
                for message in fn(recipe)
            ]
            if not findings:
                findings.append(
                    SemanticFinding(rule=rule_id, severity=Severity.PASS, message=pass_message)
                )
            return findings

        RULES[rule_id] = wrapper
        return wrapper

    return deco


def _num(value: float) -> str:
    return f"{value:g}"


def _label(step: Step) -> str:
    return f'Step {step.step_number} "{step.title}"'


@rule("step-sequencing", "Step numbers are sequential")
def step_sequencing(recipe: OCRSRecipe) -> Iterator[str]:
    """stepNumber must equal the 1-based position of the step."""
    for position, step in enumerate(recipe.steps, start=1):
        if step.step_number != position:
            yield f"Step {position} has stepNumber {step.step_number}, expected {position}"


@rule("temperature-plausibility", "All temperatures plausible")
def temperature_plausibility(recipe: OCRSRecipe) -> Iterator[str]:
    for step in recipe.steps:
        temp = step.temperature
        if temp is not None and temp.unit == "C" and temp.target > MAX_PLAUSIBLE_TEMP_C:
            yield (
                f"{_label(step)}: temperature {_num(temp.target)}°C is implausible, "
                "likely unconverted Fahrenheit"
            )
    aging_temp = recipe.aging.temperature if recipe.aging else None
    if aging_temp is not None and aging_temp.unit == "C" and aging_temp.value > MAX_PLAUSIBLE_TEMP_C:
        yield (
            f"Aging temperature {_num(aging_temp.value)}°C is implausible, "
            "likely unconverted Fahrenheit"
        )


@rule("ph-range", "All pH values in range")
def ph_range(recipe: OCRSRecipe) -> Iterator[str]:
    for step in recipe.steps:
        if step.ph is not None and not PH_MIN <= step.ph <= PH_MAX:
            yield (
                f"{_label(step)}: pH {_num(step.ph)} is outside cheesemaking range "
                f"({_num(PH_MIN)}-{_num(PH_MAX)})"
            )


@rule("duration-sanity", "All durations valid")
def duration_sanity(recipe: OCRSRecipe) -> Iterator[str]:
    for step in recipe.steps:
        duration = step.duration
        if duration is not None and duration.value is not None and duration.value <= 0:
            yield f"{_label(step)}: duration {duration.value} is invalid (must be positive)"


@rule("required-allergens", "Required allergens present")
def required_allergens(recipe: OCRSRecipe) -> Iterator[str]:
    """Dairy recipes must declare MILK and LACTOSE; one finding lists all missing tags."""
    declared = set((recipe.safety.allergens if recipe.safety else None) or ())
    missing = [tag for tag in REQUIRED_ALLERGENS if tag not in declared]
    if missing:
        yield f"Missing required allergens for dairy recipe: {', '.join(missing)}"


@rule("unit-consistency", "All units consistent")
def unit_consistency(recipe: OCRSRecipe) -> Iterator[str]:
    for step in recipe.steps:
        if step.temperature is not None and step.temperature.unit != "C":
            yield f"{_label(step)}: temperature must be in Celsius, got {step.temperature.unit}"
    aging_temp = recipe.aging.temperature if recipe.aging else None
    if aging_temp is not None and aging_temp.unit != "C":
        yield f"Aging temperature must be in Celsius, got {aging_temp.unit}"


def evaluate(recipe: OCRSRecipe) -> list[SemanticFinding]:
    """Run every registered rule in registration order and concatenate findings."""
    findings: list[SemanticFinding] = []
    for check in RULES.values():
        findings.extend(check(recipe))
    return findings
