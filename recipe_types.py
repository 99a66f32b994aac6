"""
Type definitions for the recipe book
"""
from enum import Enum


class MenuOption(Enum):
    """Main menu choices, keyed by what the user types"""
    ADD_RECIPE = "1"
    REMOVE_RECIPE = "2"
    DISPLAY_RECIPES = "3"
    SCALE_RECIPE = "4"
    EXIT = "5"

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


class FoodGroup(Enum):
    """Common food groups offered as hints when entering ingredients"""
    GRAIN = "grain"
    VEGETABLE = "vegetable"
    FRUIT = "fruit"
    PROTEIN = "protein"
    DAIRY = "dairy"
    FAT = "fat"
    SUGAR = "sugar"
    STARCH = "starch"
    WATER = "water"
