from __future__ import annotations

from typing import Any, Iterable, Protocol

from ..search.errors import CorpusUnavailableError
from ..search.models import Ingredient, Recipe


class CorpusStore(Protocol):
    """Read interface over recipes and the ingredient catalog."""

    async def get_all_recipes(self) -> list[Recipe]: ...

    async def get_all_ingredients(self) -> list[Ingredient]: ...

    async def get_recipe_by_id(self, recipe_id: str) -> Recipe | None: ...


class InMemoryCorpusStore:
    """
    Corpus held in process memory.

    Recipes are keyed by ``id`` and ingredients by ``name``; adding an
    existing key replaces the record in place. Reads return new lists, so
    each call is a consistent snapshot.
    """

    def __init__(
        self,
        recipes: Iterable[Recipe | dict[str, Any]] | None = None,
        ingredients: Iterable[Ingredient | dict[str, Any]] | None = None,
    ) -> None:
        self._recipes: dict[str, Recipe] = {}
        self._ingredients: dict[str, Ingredient] = {}
        self._closed = False
        for recipe in recipes or []:
            self.add_recipe(recipe)
        for ingredient in ingredients or []:
            self.add_ingredient(ingredient)

    def _ensure_open(self) -> None:
        if self._closed:
            raise CorpusUnavailableError("Corpus store is closed")

    async def get_all_recipes(self) -> list[Recipe]:
        self._ensure_open()
        return list(self._recipes.values())

    async def get_all_ingredients(self) -> list[Ingredient]:
        self._ensure_open()
        return list(self._ingredients.values())

    async def get_recipe_by_id(self, recipe_id: str) -> Recipe | None:
        self._ensure_open()
        return self._recipes.get(recipe_id)

    def add_recipe(self, recipe: Recipe | dict[str, Any]) -> Recipe:
        if not isinstance(recipe, Recipe):
            recipe = Recipe.model_validate(recipe)
        self._recipes[recipe.id] = recipe
        return recipe

    def add_ingredient(self, ingredient: Ingredient | dict[str, Any]) -> Ingredient:
        if not isinstance(ingredient, Ingredient):
            ingredient = Ingredient.model_validate(ingredient)
        self._ingredients[ingredient.name] = ingredient
        return ingredient

    def clear(self) -> None:
        self._recipes.clear()
        self._ingredients.clear()

    def close(self) -> None:
        self._closed = True

    def __len__(self) -> int:
        return len(self._recipes)
