"""
Recipe Management - in-memory recipe registry with calorie threshold notifications
"""
import logging
from typing import Callable, Dict, List, Optional

from .errors import DuplicateNameError, RecipeNotFoundError
from .models import Recipe

logger = logging.getLogger(__name__)

# Total calories above which subscribers are notified
CALORIE_THRESHOLD = 300.0

# Called with the recipe name when a recipe exceeds the threshold
RecipeNotification = Callable[[str], None]


class RecipeManager:
    """Owns the recipes of one session and notifies subscribers about high-calorie recipes"""

    def __init__(self, calorie_threshold: float = CALORIE_THRESHOLD):
        self.calorie_threshold = calorie_threshold
        self._recipes: Dict[str, Recipe] = {}
        self._subscribers: List[RecipeNotification] = []

    def __len__(self) -> int:
        return len(self._recipes)

    def __contains__(self, name: object) -> bool:
        return name in self._recipes

    def subscribe(self, callback: RecipeNotification) -> None:
        """Register a callback fired when an added recipe exceeds the threshold"""
        self._subscribers.append(callback)

    def unsubscribe(self, callback: RecipeNotification) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def add_recipe(self, name: str, recipe: Recipe) -> float:
        """Register a recipe and return its total calories

        Subscribers are called synchronously, in subscription order, when the
        total exceeds the calorie threshold.

        Raises:
            DuplicateNameError: a recipe with this name is already registered
        """
        if name in self._recipes:
            raise DuplicateNameError("recipe", name)

        if not recipe.name:
            recipe.name = name
        self._recipes[name] = recipe

        total_calories = recipe.total_calories()
        logger.info(f"Total Calories for {name}: {total_calories}")

        if total_calories > self.calorie_threshold:
            logger.info(
                f"Recipe '{name}' exceeds {self.calorie_threshold} calories, "
                f"notifying {len(self._subscribers)} subscriber(s)"
            )
            # Copy so a callback that unsubscribes does not skip the next one
            for callback in list(self._subscribers):
                callback(name)

        return total_calories

    def remove_recipe(self, name: str) -> bool:
        """Remove a recipe; removing an unknown name is a no-op"""
        if self._recipes.pop(name, None) is None:
            logger.debug(f"Recipe '{name}' not registered, nothing removed")
            return False
        logger.info(f"Removed recipe '{name}'")
        return True

    def list_names_sorted(self) -> List[str]:
        """All recipe names in ascending order"""
        return sorted(self._recipes)

    def get_recipe(self, name: str) -> Optional[Recipe]:
        return self._recipes.get(name)

    def require_recipe(self, name: str) -> Recipe:
        recipe = self._recipes.get(name)
        if recipe is None:
            raise RecipeNotFoundError(name)
        return recipe

    def scale_recipe(self, name: str, factor: float) -> bool:
        """Multiply every ingredient quantity of a recipe by ``factor``

        Returns False without changing anything when the recipe is unknown.
        The factor is applied as given; callers decide what is acceptable.
        """
        recipe = self._recipes.get(name)
        if recipe is None:
            logger.debug(f"Recipe '{name}' not registered, nothing scaled")
            return False

        if factor <= 0:
            logger.warning(f"Scaling recipe '{name}' by non-positive factor {factor}")

        recipe.scale(factor)
        logger.info(f"Scaled recipe '{name}' by {factor}")
        return True
