"""
Recipe Management Module
"""
from .errors import RecipeError, InvalidInputError, DuplicateNameError, RecipeNotFoundError
from .manager import RecipeManager, RecipeNotification, CALORIE_THRESHOLD
from .models import Recipe, IngredientRecord

__all__ = [
    'RecipeManager', 'RecipeNotification', 'CALORIE_THRESHOLD',
    'Recipe', 'IngredientRecord',
    'RecipeError', 'InvalidInputError', 'DuplicateNameError', 'RecipeNotFoundError'
]
