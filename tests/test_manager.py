"""
Recipe manager tests
Registration, threshold notifications, listing, lookup and scaling
"""
import logging

import pytest

from recipes import (
    CALORIE_THRESHOLD,
    DuplicateNameError,
    Recipe,
    RecipeManager,
    RecipeNotFoundError,
)


def make_recipe(name, *ingredients):
    """Build a recipe from (name, quantity, unit, calories, food_group) tuples"""
    recipe = Recipe(name=name)
    for ingredient in ingredients:
        recipe.add_ingredient(*ingredient)
    recipe.add_step("Cook")
    return recipe


@pytest.fixture
def manager():
    return RecipeManager()


@pytest.fixture
def heavy_recipe():
    """20000 calories"""
    return make_recipe(
        "Heavy",
        ("Ingredient 1", 100, "grams", 50, "Food Group 1"),
        ("Ingredient 2", 200, "grams", 75, "Food Group 2"),
    )


@pytest.fixture
def light_recipe():
    """Exactly 300 calories"""
    return make_recipe("Light", ("Apple", 3, "pieces", 100, "fruit"))


class TestAddRecipe:
    """add_recipe tests"""

    def test_default_threshold(self, manager):
        assert CALORIE_THRESHOLD == 300
        assert manager.calorie_threshold == 300

    def test_returns_total_calories(self, manager, heavy_recipe):
        assert manager.add_recipe("Heavy", heavy_recipe) == 20000

    def test_registers_recipe(self, manager, heavy_recipe):
        manager.add_recipe("Heavy", heavy_recipe)
        assert "Heavy" in manager
        assert len(manager) == 1
        assert manager.get_recipe("Heavy") is heavy_recipe

    def test_fills_in_missing_name(self, manager):
        recipe = Recipe()
        recipe.add_ingredient("Oats", 1, "cup", 150, "grain")
        manager.add_recipe("Porridge", recipe)
        assert recipe.name == "Porridge"

    def test_duplicate_name_rejected(self, manager, heavy_recipe, light_recipe):
        """The first recipe stays registered"""
        manager.add_recipe("Dinner", heavy_recipe)

        with pytest.raises(DuplicateNameError):
            manager.add_recipe("Dinner", light_recipe)

        assert manager.get_recipe("Dinner") is heavy_recipe
        assert len(manager) == 1

    def test_logs_total_calories(self, manager, heavy_recipe, caplog):
        with caplog.at_level(logging.INFO, logger="recipes.manager"):
            manager.add_recipe("Heavy", heavy_recipe)
        assert "Total Calories for Heavy: 20000" in caplog.text


class TestThresholdNotification:
    """Subscribers are notified when a recipe exceeds the threshold"""

    def test_every_subscriber_called_once_in_order(self, manager, heavy_recipe):
        calls = []
        manager.subscribe(lambda name: calls.append(("first", name)))
        manager.subscribe(lambda name: calls.append(("second", name)))
        manager.subscribe(lambda name: calls.append(("third", name)))

        manager.add_recipe("Heavy", heavy_recipe)

        assert calls == [("first", "Heavy"), ("second", "Heavy"), ("third", "Heavy")]

    def test_delivered_before_add_returns(self, manager, heavy_recipe):
        """The callback already sees the recipe registered"""
        seen = []
        manager.subscribe(lambda name: seen.append(manager.get_recipe(name)))

        manager.add_recipe("Heavy", heavy_recipe)

        assert seen == [heavy_recipe]

    def test_not_fired_at_threshold(self, manager, light_recipe):
        calls = []
        manager.subscribe(calls.append)

        assert manager.add_recipe("Light", light_recipe) == 300
        assert calls == []

    def test_not_fired_for_duplicate(self, manager, heavy_recipe):
        manager.add_recipe("Heavy", heavy_recipe)
        calls = []
        manager.subscribe(calls.append)

        with pytest.raises(DuplicateNameError):
            manager.add_recipe("Heavy", heavy_recipe)

        assert calls == []

    def test_no_subscribers(self, manager, heavy_recipe):
        assert manager.add_recipe("Heavy", heavy_recipe) == 20000

    def test_custom_threshold(self, light_recipe):
        manager = RecipeManager(calorie_threshold=100)
        calls = []
        manager.subscribe(calls.append)

        manager.add_recipe("Light", light_recipe)

        assert calls == ["Light"]

    def test_unsubscribe(self, manager, heavy_recipe):
        calls = []
        manager.subscribe(calls.append)
        manager.unsubscribe(calls.append)
        manager.unsubscribe(calls.append)  # unknown callback is ignored

        manager.add_recipe("Heavy", heavy_recipe)

        assert calls == []

    def test_subscriber_error_propagates(self, manager, heavy_recipe):
        def broken(name):
            raise RuntimeError(f"cannot warn about {name}")

        manager.subscribe(broken)

        with pytest.raises(RuntimeError):
            manager.add_recipe("Heavy", heavy_recipe)

    def test_subscribers_are_per_instance(self, heavy_recipe):
        calls = []
        RecipeManager().subscribe(calls.append)

        RecipeManager().add_recipe("Heavy", heavy_recipe)

        assert calls == []


class TestListAndLookup:
    """list_names_sorted, get_recipe, require_recipe and remove_recipe tests"""

    def test_names_sorted_regardless_of_insertion_order(self, manager):
        for name in ["Banana Bread", "Apple Pie", "Carrot Soup"]:
            manager.add_recipe(name, make_recipe(name, ("Thing", 1, "g", 1, "other")))

        assert manager.list_names_sorted() == ["Apple Pie", "Banana Bread", "Carrot Soup"]
        assert manager.list_names_sorted() == ["Apple Pie", "Banana Bread", "Carrot Soup"]

    def test_empty_listing(self, manager):
        assert manager.list_names_sorted() == []

    def test_get_recipe_absent(self, manager):
        assert manager.get_recipe("Missing") is None
        assert "Missing" not in manager
        assert len(manager) == 0

    def test_require_recipe(self, manager, light_recipe):
        manager.add_recipe("Light", light_recipe)
        assert manager.require_recipe("Light") is light_recipe

        with pytest.raises(RecipeNotFoundError) as exc_info:
            manager.require_recipe("Missing")
        assert str(exc_info.value) == "Recipe 'Missing' not found"

    def test_remove_recipe(self, manager, light_recipe):
        manager.add_recipe("Light", light_recipe)

        assert manager.remove_recipe("Light") is True
        assert manager.get_recipe("Light") is None
        assert manager.list_names_sorted() == []

    def test_remove_absent_is_noop(self, manager, light_recipe):
        manager.add_recipe("Light", light_recipe)

        assert manager.remove_recipe("Missing") is False
        assert manager.list_names_sorted() == ["Light"]

    def test_name_reusable_after_remove(self, manager, heavy_recipe, light_recipe):
        manager.add_recipe("Meal", heavy_recipe)
        manager.remove_recipe("Meal")
        manager.add_recipe("Meal", light_recipe)
        assert manager.get_recipe("Meal") is light_recipe


class TestScaleRecipe:
    """scale_recipe tests"""

    @pytest.fixture
    def registered(self, manager, heavy_recipe):
        manager.add_recipe("Heavy", heavy_recipe)
        return heavy_recipe

    def test_multiplies_quantities(self, manager, registered):
        assert manager.scale_recipe("Heavy", 3) is True

        assert registered.ingredients["Ingredient 1"].quantity == 300
        assert registered.ingredients["Ingredient 2"].quantity == 600

    def test_other_fields_unchanged(self, manager, registered):
        before = {name: record for name, record in registered.ingredients.items()}

        manager.scale_recipe("Heavy", 2.5)

        for name, record in registered.ingredients.items():
            assert record.unit == before[name].unit
            assert record.calories == before[name].calories
            assert record.food_group == before[name].food_group
        assert registered.steps == ["Cook"]

    def test_identity(self, manager, registered):
        before = dict(registered.ingredients)
        manager.scale_recipe("Heavy", 1.0)
        assert registered.ingredients == before

    def test_scaling_twice_equals_product(self, manager, heavy_recipe):
        other = make_recipe(
            "Other",
            ("Ingredient 1", 100, "grams", 50, "Food Group 1"),
            ("Ingredient 2", 200, "grams", 75, "Food Group 2"),
        )
        manager.add_recipe("Heavy", heavy_recipe)
        manager.add_recipe("Other", other)

        manager.scale_recipe("Heavy", 1.5)
        manager.scale_recipe("Heavy", 0.4)
        manager.scale_recipe("Other", 1.5 * 0.4)

        for name in heavy_recipe.ingredients:
            assert heavy_recipe.ingredients[name].quantity == pytest.approx(other.ingredients[name].quantity)

    def test_absent_recipe_is_noop(self, manager, registered):
        assert manager.scale_recipe("Missing", 2) is False
        assert "Missing" not in manager
        assert registered.ingredients["Ingredient 1"].quantity == 100

    def test_non_positive_factor_applied_with_warning(self, manager, registered, caplog):
        with caplog.at_level(logging.WARNING, logger="recipes.manager"):
            assert manager.scale_recipe("Heavy", 0) is True

        assert registered.ingredients["Ingredient 1"].quantity == 0
        assert "non-positive factor" in caplog.text
