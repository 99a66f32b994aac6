"""
Interactive menu shell - prompts, validation of raw input and colorized output
"""
import logging
import math
from typing import Callable, Optional

from config import ShellConfig
from recipe_types import FoodGroup, MenuOption
from recipes import Recipe, RecipeError, RecipeManager

logger = logging.getLogger(__name__)

RESET = "\033[0m"
RED = "\033[31m"
CLEAR_SCREEN = "\033[2J\033[H"

# Background colors of the menu lines
MENU_COLORS = {
    MenuOption.ADD_RECIPE: "\033[46m",
    MenuOption.REMOVE_RECIPE: "\033[43m",
    MenuOption.DISPLAY_RECIPES: "\033[42m",
    MenuOption.SCALE_RECIPE: "\033[41m",
}


def format_number(value: float) -> str:
    """Render 20000.0 as '20000' and 2.5 as '2.5'"""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


class RecipeShell:
    """Menu-driven front end over a RecipeManager"""

    def __init__(
        self,
        manager: RecipeManager,
        settings: Optional[ShellConfig] = None,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None
    ):
        self.manager = manager
        self.settings = settings or ShellConfig()
        self._input = input_func or input
        self._output = output_func or print

        self.manager.subscribe(self._on_recipe_exceeds_calories)

    def run(self) -> int:
        """Run the main menu loop until the user exits; returns the exit status"""
        actions = {
            MenuOption.ADD_RECIPE: self.add_recipe,
            MenuOption.REMOVE_RECIPE: self.remove_recipe,
            MenuOption.DISPLAY_RECIPES: self.display_recipe,
            MenuOption.SCALE_RECIPE: self.scale_recipe,
        }

        while True:
            try:
                self._show_menu()
                choice = self._input("").strip()

                try:
                    option = MenuOption(choice)
                except ValueError:
                    self._output("Invalid choice. Please try again.")
                    self._go_back()
                    continue

                if option is MenuOption.EXIT:
                    break

                try:
                    actions[option]()
                except RecipeError as e:
                    logger.debug(f"{option.label} failed: {e}")
                    self._output(f"Error: {e}")
                self._go_back()
            except EOFError:
                break

        self._output("Exiting...")
        return 0

    # Menu actions

    def add_recipe(self) -> None:
        recipe_name = self._input("Enter recipe name: ").strip()
        if not recipe_name:
            self._output("Invalid input for recipe name.")
            return
        if recipe_name in self.manager:
            self._output(f"Recipe '{recipe_name}' already exists.")
            return

        recipe = Recipe(name=recipe_name)

        num_ingredients = self._read_positive_int("Enter number of ingredients: ", "number of ingredients")
        if num_ingredients is None:
            return

        food_groups = ", ".join(group.value for group in FoodGroup)
        for i in range(num_ingredients):
            ingredient_name = self._input(f"Enter ingredient {i + 1} name: ").strip()
            quantity = self._read_positive_float(f"Enter quantity for {ingredient_name}: ", "quantity")
            if quantity is None:
                return
            unit = self._input(f"Enter unit for {ingredient_name}: ").strip()
            calories = self._read_positive_float(f"Enter calories for {ingredient_name}: ", "calories")
            if calories is None:
                return
            food_group = self._input(f"Enter food group for {ingredient_name} (e.g. {food_groups}): ").strip()

            recipe.add_ingredient(ingredient_name, quantity, unit, calories, food_group)

        num_steps = self._read_positive_int("Enter number of steps: ", "number of steps")
        if num_steps is None:
            return
        for i in range(num_steps):
            recipe.add_step(self._input(f"Enter step {i + 1}: ").strip())

        # The total is reported before any threshold warning from add_recipe
        self._output(f"Total Calories for {recipe_name}: {format_number(recipe.total_calories())}")
        self.manager.add_recipe(recipe_name, recipe)

    def remove_recipe(self) -> None:
        recipe_name = self._input("Enter the name of the recipe to remove: ").strip()
        self.manager.remove_recipe(recipe_name)
        self._output(f"Recipe '{recipe_name}' removed.")

    def display_recipe(self) -> None:
        self._list_recipes()
        recipe_name = self._input("Enter the name of the recipe to display: ").strip()

        recipe = self.manager.get_recipe(recipe_name)
        if recipe is None:
            self._output(f"Recipe '{recipe_name}' not found.")
            return

        self._output(f"Recipe: {recipe.name}")
        self._output("Ingredients:")
        for ingredient_name, record in recipe.ingredients.items():
            self._output(f"- {ingredient_name}: {format_number(record.quantity)} {record.unit}")
        self._output(f"Total Calories: {format_number(recipe.total_calories())}")
        self._output("Steps:")
        for number, step in enumerate(recipe.steps, start=1):
            self._output(f"{number}. {step}")

    def scale_recipe(self) -> None:
        self._list_recipes()
        recipe_name = self._input("Enter the name of the recipe to scale: ").strip()
        if recipe_name not in self.manager:
            self._output(f"Recipe '{recipe_name}' not found.")
            return

        factor = self._read_positive_float("Enter scale factor: ", "scale factor")
        if factor is None:
            return

        self.manager.scale_recipe(recipe_name, factor)
        self._output(f"Recipe '{recipe_name}' scaled by a factor of {format_number(factor)}.")

    # Helpers

    def _on_recipe_exceeds_calories(self, recipe_name: str) -> None:
        threshold = format_number(self.manager.calorie_threshold)
        self._output(self._paint(f"Warning: Recipe '{recipe_name}' exceeds {threshold} calories!", RED))

    def _show_menu(self) -> None:
        if self.settings.clear_screen:
            self._output(CLEAR_SCREEN)
        self._output("Choose an option:")
        for option in MenuOption:
            line = f"{option.value}. {option.label}"
            self._output(self._paint(line, MENU_COLORS[option]) if option in MENU_COLORS else line)

    def _list_recipes(self) -> None:
        self._output("Recipes (Alphabetical Order):")
        for name in self.manager.list_names_sorted():
            self._output(f"- {name}")

    def _read_positive_int(self, prompt: str, field_name: str) -> Optional[int]:
        try:
            value = int(self._input(prompt).strip())
        except ValueError:
            value = 0
        if value <= 0:
            self._output(f"Invalid input for {field_name}.")
            return None
        return value

    def _read_positive_float(self, prompt: str, field_name: str) -> Optional[float]:
        try:
            value = float(self._input(prompt).strip())
        except ValueError:
            value = 0.0
        if not math.isfinite(value) or value <= 0:
            self._output(f"Invalid input for {field_name}.")
            return None
        return value

    def _paint(self, text: str, color: str) -> str:
        if not self.settings.use_color:
            return text
        return f"{color}{text}{RESET}"

    def _go_back(self) -> None:
        if not self.settings.pause_after_action:
            return
        self._output("\nPress Enter to go back to the main menu...")
        self._input("")
