from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from ..ingredients.normalizer import normalize
from .config import DEFAULT_SEARCH_CONFIG

# Python attributes are snake_case; payloads use camelCase keys.
_RECORD_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("must be a non-empty string")
    return value


Text = Annotated[str, AfterValidator(_require_text)]


class Difficulty(str, Enum):
    easy = "easy"
    medium = "medium"
    hard = "hard"


class Ingredient(BaseModel):
    model_config = _RECORD_CONFIG

    name: Text
    normalized_name: str = ""
    category: Text
    variations: list[str] = Field(default_factory=list)
    synonyms: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _derive_normalized_name(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        given = data.get("normalizedName") or data.get("normalized_name")
        if given and str(given).strip():
            return data
        name = data.get("name")
        if isinstance(name, str):
            data = {k: v for k, v in data.items() if k not in ("normalizedName", "normalized_name")}
            data["normalized_name"] = normalize(name) or name.strip().lower()
        return data


class IngredientMatch(Ingredient):
    match_score: float = Field(..., gt=0.0, le=1.0)


class Recipe(BaseModel):
    model_config = _RECORD_CONFIG

    id: Text
    title: Text
    description: Text
    image: str | None = None
    cooking_time: int = Field(..., gt=0, description="Minutes")
    difficulty: Difficulty
    ingredients: list[Text] = Field(..., min_length=1)
    instructions: list[Text] = Field(..., min_length=1)


class ScoredRecipe(Recipe):
    match_score: float = Field(..., gt=0.0, le=1.0)


class SearchQuery(BaseModel):
    """
    Ingredients to search for plus a pagination window.

    ``ingredients`` may be given as a comma-separated string. Entries are
    trimmed and blanks dropped, so an all-blank list becomes empty.
    Pagination bounds are checked by the engine, not here.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    ingredients: list[str] = Field(default_factory=list)
    limit: int = DEFAULT_SEARCH_CONFIG.default_limit
    offset: int = 0

    @field_validator("ingredients", mode="before")
    @classmethod
    def _split_text(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return value.split(",")
        return value

    @field_validator("ingredients")
    @classmethod
    def _sanitize(cls, value: list[str]) -> list[str]:
        return [item.strip() for item in value if item.strip()]


class SearchResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    recipes: list[ScoredRecipe] = Field(default_factory=list)
    total_count: int = Field(default=0, ge=0)
    has_more: bool = False

    @classmethod
    def empty(cls) -> SearchResult:
        return cls(recipes=[], total_count=0, has_more=False)


class SearchRequest(SearchQuery):
    """HTTP search body; unlike the engine, the API requires at least one ingredient."""

    @model_validator(mode="after")
    def _require_ingredients(self) -> SearchRequest:
        if not self.ingredients:
            raise ValueError("Ingredients array cannot be empty")
        return self


class RecipeResponse(BaseModel):
    recipe: Recipe


class PopularRecipesResponse(BaseModel):
    recipes: list[Recipe]


class SuggestionsResponse(BaseModel):
    suggestions: list[Ingredient]
