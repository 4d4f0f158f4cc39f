"""
Canonical cheesemaking recipe record (OCRS/1.0).

Field names are snake_case in Python and camelCase on the wire; error paths
reported by validation use the wire names. Models run in strict mode so that
a string where a number is expected is an error instead of being coerced.
Integral floats such as 1.0 are accepted for integer fields. Unknown keys
are ignored.
"""

from __future__ import annotations

from typing import Annotated, Any, List, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel


CheeseStyle = Literal["FRESH", "SOFT", "SEMI_SOFT", "SEMI_HARD", "HARD", "BLUE", "BRINED"]
MilkType = Literal["COW", "GOAT", "SHEEP", "BUFFALO", "MIXED"]
Difficulty = Literal["BEGINNER", "INTERMEDIATE", "ADVANCED", "EXPERT"]
IngredientType = Literal["PRIMARY", "CULTURE", "COAGULANT", "ADDITIVE", "SEASONING", "OTHER"]
StepCategory = Literal[
    "HEATING",
    "COAGULATION",
    "CUTTING",
    "DRAINING",
    "SALTING",
    "PRESSING",
    "AGING",
    "OTHER",
]
DurationType = Literal["FIXED", "UNTIL_CONDITION", "RANGE"]
TempUnit = Literal["C", "F"]
BatchUnit = Literal["liters", "gallons"]
YieldUnit = Literal["kg", "lbs", "grams", "oz"]
DurationUnit = Literal["seconds", "minutes", "hours"]
AgingDurationUnit = Literal["days", "weeks", "months"]
SourceType = Literal["BOOK", "WEBSITE", "ORIGINAL", "TRADITIONAL", "COURSE", "OTHER"]
Allergen = Literal["MILK", "LACTOSE", "NUTS", "SOY", "GLUTEN", "EGGS"]
Moisture = Literal["HIGH", "MEDIUM", "LOW"]


def _integral_float_to_int(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


# JSON does not tell 1 from 1.0; fractional values still fail the strict int check
WholeNumber = Annotated[int, BeforeValidator(_integral_float_to_int)]


class _Model(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        strict=True,
        extra="ignore",
    )


class BatchSize(_Model):
    milk_volume: float
    unit: BatchUnit


class Yield(_Model):
    amount: float
    unit: YieldUnit


class Source(_Model):
    type: SourceType
    reference: Optional[str] = None


class RecipeInfo(_Model):
    name: str
    style: CheeseStyle
    milk_type: MilkType
    origin: Optional[str] = None
    difficulty: Difficulty
    batch_size: BatchSize
    yield_: Optional[Yield] = Field(default=None, alias="yield")
    total_time: Optional[WholeNumber] = None
    prep_time: Optional[WholeNumber] = None
    source: Optional[Source] = None


class Ingredient(_Model):
    name: str
    type: IngredientType
    amount: float
    unit: str
    preparation: Optional[str] = None


class Temperature(_Model):
    target: float
    unit: TempUnit


class Duration(_Model):
    type: DurationType
    value: Optional[WholeNumber] = None
    unit: Optional[DurationUnit] = None
    condition: Optional[str] = None


class StepValidation(_Model):
    expected_result: Optional[str] = None


class Step(_Model):
    step_number: WholeNumber
    title: str
    category: StepCategory
    instructions: str
    temperature: Optional[Temperature] = None
    ph: Optional[float] = None
    duration: Optional[Duration] = None
    validation: Optional[StepValidation] = None


class AgingDuration(_Model):
    min: WholeNumber
    max: Optional[WholeNumber] = None
    unit: AgingDurationUnit


class AgingTemperature(_Model):
    value: float
    unit: TempUnit


class Aging(_Model):
    required: bool
    duration: Optional[AgingDuration] = None
    temperature: Optional[AgingTemperature] = None
    humidity: Optional[str] = None


class FinalProduct(_Model):
    texture: Optional[str] = None
    flavor: Optional[str] = None
    moisture: Optional[Moisture] = None
    color: Optional[str] = None


class EquipmentItem(_Model):
    name: str


class SpecialEquipment(_Model):
    name: str
    purpose: Optional[str] = None
    alternatives: Optional[str] = None


class Equipment(_Model):
    required: Optional[List[EquipmentItem]] = None
    special_equipment: Optional[List[SpecialEquipment]] = None


class ShelfLife(_Model):
    fresh: Optional[str] = None
    aged: Optional[str] = None


class Safety(_Model):
    allergens: Optional[List[Allergen]] = None
    shelf_life: Optional[ShelfLife] = None
    storage_instructions: Optional[str] = None


class OCRSRecipe(_Model):
    """Validated recipe. ``ingredients`` and ``steps`` keep source order."""

    spec: Literal["OCRS/1.0"]
    recipe: RecipeInfo
    ingredients: List[Ingredient]
    steps: List[Step]
    aging: Optional[Aging] = None
    final_product: Optional[FinalProduct] = None
    equipment: Optional[Equipment] = None
    safety: Optional[Safety] = None
