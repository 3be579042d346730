"""
Meal catalog with calorie totals computed from the packaged ingredient table.
"""

import json
import logging
from pathlib import Path
from typing import Any

from .schemas import Meal, MealIngredient
from .workout.summary import round_half_away_from_zero

DATA_DIR = Path(__file__).parent / "data"


def parse_grams(quantity: str) -> float:
    """``"120g"`` -> ``120.0``."""
    return float(quantity.strip().removesuffix("g"))


class MealCatalog:
    """Meals and ingredients loaded from local JSON files."""

    def __init__(self, data_dir: Path = DATA_DIR):
        self.data_dir = data_dir
        self.ingredients = {i["id"]: i for i in self._load("ingredients.json")}
        self.meals_data = self._load("meals.json")

    def _load(self, file_name: str) -> list[dict[str, Any]]:
        try:
            with open(self.data_dir / file_name, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logging.error("Failed to load %s: %s", file_name, e)
            return []

    def _ingredient(self, ref: dict[str, Any]) -> MealIngredient:
        ingredient = self.ingredients.get(ref["id"])
        if ingredient is None:
            raise ValueError(f"Unknown ingredient: {ref['id']}")
        quantity_grams = parse_grams(ref["quantity"])
        portion_grams = parse_grams(ingredient["energy"]["portion"])
        kcal = round_half_away_from_zero(ingredient["energy"]["kcal"] * quantity_grams / portion_grams)
        return MealIngredient(
            id=ingredient["id"], name=ingredient["name"], quantity=ref["quantity"], kcal=kcal
        )

    def get_meals(self) -> list[Meal]:
        meals = []
        for meal in self.meals_data:
            ingredients = [self._ingredient(ref) for ref in meal["ingredients"]]
            meals.append(
                Meal(
                    id=meal["id"],
                    name=meal["name"],
                    kcal=sum(i.kcal for i in ingredients),
                    ingredients=ingredients,
                )
            )
        return meals
