from __future__ import annotations

import logging
import re
import time

import pandas as pd

from ..corpus.store import CorpusStore
from ..ingredients.fuzzy import find_matches
from ..ingredients.normalizer import normalize
from .config import DEFAULT_SCORING_CONFIG, DEFAULT_SEARCH_CONFIG, ScoringConfig, SearchConfig
from .errors import QueryValidationError
from .models import Ingredient, Recipe, ScoredRecipe, SearchQuery, SearchResult
from .scoring import calculate_score

logger = logging.getLogger(__name__)

_RECIPE_ID = re.compile(r"[A-Za-z0-9_-]+")


class SearchEngine:
    """
    Ingredient-driven recipe search over a corpus store.

    Every search is a single read of the corpus followed by a linear
    scoring pass; the engine keeps no state between calls.
    """

    def __init__(
        self,
        store: CorpusStore,
        config: SearchConfig = DEFAULT_SEARCH_CONFIG,
        scoring: ScoringConfig = DEFAULT_SCORING_CONFIG,
    ) -> None:
        self.store = store
        self.config = config
        self.scoring = scoring

    def _validate_limit(self, limit: int) -> None:
        if not 1 <= limit <= self.config.max_limit:
            logger.warning("Rejected limit %s", limit)
            raise QueryValidationError(f"Limit must be between 1 and {self.config.max_limit}")

    def validate_query(self, query: SearchQuery) -> None:
        self._validate_limit(query.limit)
        if query.offset < 0:
            logger.warning("Rejected offset %s", query.offset)
            raise QueryValidationError("Offset must be a non-negative number")

    async def search_recipes(self, query: SearchQuery) -> SearchResult:
        start_time = time.time()
        self.validate_query(query)

        if not query.ingredients:
            return SearchResult.empty()

        recipes = await self.store.get_all_recipes()
        if not recipes:
            return SearchResult.empty()

        # --- Scoring ---
        scores = pd.Series(
            [calculate_score(r, query.ingredients, self.scoring) for r in recipes],
            dtype="float64",
        )

        # --- Filter and rank (stable, so ties keep corpus order) ---
        ranked = scores[scores > 0].sort_values(ascending=False, kind="stable")
        total_count = len(ranked)

        page = ranked.iloc[query.offset : query.offset + query.limit]
        items = [
            ScoredRecipe(**recipes[idx].model_dump(), match_score=float(score))
            for idx, score in page.items()
        ]

        elapsed_ms = round((time.time() - start_time) * 1000, 1)
        logger.info(
            "Searched %d ingredients over %d recipes: %d matches, %d returned in %.1f ms",
            len(query.ingredients), len(recipes), total_count, len(items), elapsed_ms,
        )
        return SearchResult(
            recipes=items,
            total_count=total_count,
            has_more=query.offset + len(items) < total_count,
        )

    async def get_ingredient_suggestions(self, partial: str) -> list[Ingredient]:
        """Autocomplete: best catalog ingredients for a partially typed name."""
        if len((partial or "").strip()) < self.config.suggestion_min_length:
            return []

        term = normalize(partial)
        catalog = await self.store.get_all_ingredients()
        matches = find_matches(term, catalog)
        return [
            Ingredient(**m.model_dump(exclude={"match_score"}))
            for m in matches[: self.config.suggestion_limit]
        ]

    async def get_popular_recipes(self, limit: int | None = None) -> list[Recipe]:
        """Quickest recipes first; cooking time stands in for popularity."""
        limit = self.config.popular_limit if limit is None else limit
        self._validate_limit(limit)
        recipes = await self.store.get_all_recipes()
        return sorted(recipes, key=lambda r: r.cooking_time)[:limit]

    async def get_recipe_by_id(self, recipe_id: str) -> Recipe | None:
        if not recipe_id or not _RECIPE_ID.fullmatch(recipe_id):
            raise QueryValidationError("Recipe ID contains invalid characters")
        return await self.store.get_recipe_by_id(recipe_id)
