from __future__ import annotations

import copy
from typing import Any

import pytest

VALID_RECIPE: dict[str, Any] = {
    "spec": "OCRS/1.0",
    "recipe": {
        "name": "Farmhouse Cheddar",
        "style": "HARD",
        "milkType": "COW",
        "origin": "England",
        "difficulty": "INTERMEDIATE",
        "batchSize": {"milkVolume": 8, "unit": "liters"},
        "yield": {"amount": 0.8, "unit": "kg"},
        "totalTime": 360,
        "prepTime": 30,
        "source": {"type": "TRADITIONAL", "reference": None},
    },
    "ingredients": [
        {"name": "Whole milk", "type": "PRIMARY", "amount": 8, "unit": "liters", "preparation": None},
        {"name": "Mesophilic culture", "type": "CULTURE", "amount": 0.25, "unit": "tsp"},
        {"name": "Liquid rennet", "type": "COAGULANT", "amount": 2.5, "unit": "ml"},
        {"name": "Cheese salt", "type": "SEASONING", "amount": 2, "unit": "tbsp"},
    ],
    "steps": [
        {
            "stepNumber": 1,
            "title": "Heat milk",
            "category": "HEATING",
            "instructions": "Warm the milk to 31°C.",
            "temperature": {"target": 31, "unit": "C"},
            "ph": 6.6,
            "duration": {"type": "FIXED", "value": 20, "unit": "minutes", "condition": None},
            "validation": None,
        },
        {
            "stepNumber": 2,
            "title": "Add rennet",
            "category": "COAGULATION",
            "instructions": "Stir in rennet and wait for a clean break.",
            "temperature": {"target": 31, "unit": "C"},
            "duration": {"type": "UNTIL_CONDITION", "condition": "clean break"},
            "validation": {"expectedResult": "Curd splits cleanly"},
        },
        {
            "stepNumber": 3,
            "title": "Salt and press",
            "category": "PRESSING",
            "instructions": "Mill the curd, salt it and press overnight.",
            "duration": {"type": "FIXED", "value": 12, "unit": "hours"},
        },
    ],
    "aging": {
        "required": True,
        "duration": {"min": 3, "max": 12, "unit": "months"},
        "temperature": {"value": 12, "unit": "C"},
        "humidity": "85%",
    },
    "finalProduct": {"texture": "Firm", "flavor": "Nutty", "moisture": "LOW", "color": None},
    "equipment": {
        "required": [{"name": "Stockpot"}, {"name": "Cheese press"}],
        "specialEquipment": [{"name": "pH meter", "purpose": "Track acidity", "alternatives": None}],
    },
    "safety": {
        "allergens": ["MILK", "LACTOSE"],
        "shelfLife": {"fresh": None, "aged": "12 months"},
        "storageInstructions": "Keep refrigerated once cut.",
    },
}

STRUCTURED_TEXT = """Farmhouse Cheddar

Ingredients:
- 8 liters whole milk
- 1/4 tsp mesophilic culture

Instructions:
1. Heat the milk to 31°C.
2. Add rennet and wait for a clean break.
"""


@pytest.fixture
def valid_recipe() -> dict[str, Any]:
    return copy.deepcopy(VALID_RECIPE)


@pytest.fixture
def structured_text() -> str:
    return STRUCTURED_TEXT
