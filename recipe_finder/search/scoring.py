from __future__ import annotations

import logging
import re

from .config import DEFAULT_SCORING_CONFIG, ScoringConfig
from .models import Recipe

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[,&]")
_WHITESPACE = re.compile(r"\s+")


def _simplify(text: str) -> str:
    text = _SEPARATORS.sub(" ", text.lower().strip())
    return _WHITESPACE.sub(" ", text).strip()


def _has_plural_match(recipe_words: list[str], search: str, config: ScoringConfig) -> bool:
    for singular, plural in config.plural_pairs:
        if search == plural:
            return any(w.startswith(singular) for w in recipe_words)
        if search == singular:
            return any(w.startswith(plural) for w in recipe_words)
    return False


def _has_word_boundary_match(recipe_lower: str, search_lower: str, config: ScoringConfig) -> bool:
    """Whole-word hit, word-prefix hit, or a known singular/plural counterpart."""
    if re.search(rf"\b{re.escape(search_lower)}\b", recipe_lower):
        return True
    recipe_words = recipe_lower.split(" ")
    if any(w.startswith(search_lower) for w in recipe_words):
        return True
    return _has_plural_match(recipe_words, search_lower, config)


def _is_vegetable_match(recipe_lower: str, search_lower: str, config: ScoringConfig) -> bool:
    return search_lower == config.vegetable_query and recipe_lower in config.vegetables


def _ingredient_score(recipe_ingredient: str, search: str, config: ScoringConfig) -> float:
    recipe_lower = recipe_ingredient.lower().strip()
    search_lower = search.lower().strip()
    recipe_simple = _simplify(recipe_ingredient)
    search_simple = _simplify(search)

    # Independent checks; the best one wins
    score = 0.0
    if recipe_simple == search_simple:
        score = max(score, config.exact_score)
    if search_lower in recipe_lower or recipe_lower in search_lower:
        score = max(score, config.substring_score)
    if search_simple in recipe_simple or recipe_simple in search_simple:
        score = max(score, config.normalized_substring_score)
    if _has_word_boundary_match(recipe_lower, search_lower, config):
        score = max(score, config.word_boundary_score)
    if _is_vegetable_match(recipe_lower, search_lower, config):
        score = max(score, config.vegetable_score)
    return score


def best_ingredient_match(
    search: str,
    recipe_ingredients: list[str],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> float:
    """Return the best score of one search ingredient against any recipe ingredient."""
    if not search.strip():
        return 0.0
    best = 0.0
    for recipe_ingredient in recipe_ingredients:
        best = max(best, _ingredient_score(recipe_ingredient, search, config))
        if best >= config.exact_score:
            break
    return best


def _band_weight(value: int, bands: tuple[tuple[int, float], ...], fallback: float) -> float:
    for upper, weight in bands:
        if value <= upper:
            return weight
    return fallback


def calculate_score(
    recipe: Recipe,
    search_ingredients: list[str],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> float:
    """
    Relevance of *recipe* for the searched ingredients, in [0, 1].

    The base score is the share of search ingredients that match any
    recipe ingredient. It is then weighted towards quick, easy recipes
    with short ingredient lists and capped at ``config.max_score``.
    """
    if not search_ingredients or not recipe.ingredients:
        return 0.0

    matched = 0
    match_quality = 0.0
    for search in search_ingredients:
        best = best_ingredient_match(search, recipe.ingredients, config)
        if best > 0:
            matched += 1
            match_quality += best

    if matched == 0:
        return 0.0

    base_score = matched / len(search_ingredients)
    weighted = (
        base_score
        * _band_weight(recipe.cooking_time, config.cooking_time_weights, config.cooking_time_fallback)
        * config.difficulty_weights[recipe.difficulty.value]
        * _band_weight(len(recipe.ingredients), config.ingredient_count_weights, config.ingredient_count_fallback)
    )
    logger.debug(
        "Scored recipe %s: matched %d/%d (quality %.2f) -> %.4f",
        recipe.id, matched, len(search_ingredients), match_quality, weighted,
    )
    return min(weighted, config.max_score)
