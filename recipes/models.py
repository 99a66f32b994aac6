"""
Recipe data model - ingredients, steps and calorie totals
"""
import math
from dataclasses import dataclass, field, replace
from typing import Dict, List

from .errors import DuplicateNameError, InvalidInputError


@dataclass(frozen=True)
class IngredientRecord:
    """Quantity, unit, calories per unit and food group of one ingredient"""
    quantity: float
    unit: str
    calories: float
    food_group: str

    @property
    def total_calories(self) -> float:
        return self.quantity * self.calories

    def scaled(self, factor: float) -> "IngredientRecord":
        return replace(self, quantity=self.quantity * factor)


@dataclass
class Recipe:
    """Named collection of ingredients and ordered preparation steps"""
    name: str = ""
    ingredients: Dict[str, IngredientRecord] = field(default_factory=dict)
    steps: List[str] = field(default_factory=list)

    def add_ingredient(
        self,
        name: str,
        quantity: float,
        unit: str,
        calories: float,
        food_group: str
    ) -> IngredientRecord:
        """Add an ingredient to the recipe

        Args:
            name: Ingredient name, unique within this recipe
            quantity: Amount in ``unit``; must be positive and finite
            unit: Free-text unit ("grams", "cups", ...)
            calories: Calories per unit; must be positive and finite
            food_group: Free-text food group

        Raises:
            DuplicateNameError: an ingredient with this name already exists
            InvalidInputError: quantity or calories is not a positive finite number
        """
        if name in self.ingredients:
            raise DuplicateNameError("ingredient", name)
        if not math.isfinite(quantity) or quantity <= 0:
            raise InvalidInputError(f"Quantity for '{name}' must be positive, got {quantity}")
        if not math.isfinite(calories) or calories <= 0:
            raise InvalidInputError(f"Calories for '{name}' must be positive, got {calories}")

        record = IngredientRecord(
            quantity=float(quantity),
            unit=unit,
            calories=float(calories),
            food_group=food_group
        )
        self.ingredients[name] = record
        return record

    def add_step(self, text: str) -> None:
        """Append a preparation step"""
        if not text or not text.strip():
            raise InvalidInputError("Step text must not be empty")
        self.steps.append(text)

    def total_calories(self) -> float:
        """Sum of quantity * calories over all ingredients"""
        return sum((record.total_calories for record in self.ingredients.values()), 0.0)

    def scale(self, factor: float) -> None:
        # Only quantities change; unit, calories and food group are kept.
        for name, record in self.ingredients.items():
            self.ingredients[name] = record.scaled(factor)
