"""
Recipe book error types
"""


class RecipeError(Exception):
    """Base class for recoverable recipe book errors"""


class InvalidInputError(RecipeError, ValueError):
    """A value is non-numeric or non-positive where a positive number is required"""


class DuplicateNameError(RecipeError, ValueError):
    """An ingredient or recipe name is already taken"""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"{kind.capitalize()} '{name}' already exists")


class RecipeNotFoundError(RecipeError, LookupError):
    """No recipe is registered under the requested name"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Recipe '{name}' not found")
