from __future__ import annotations

import re
from typing import Iterable

from rapidfuzz.distance import Levenshtein

from ..search.models import Ingredient, IngredientMatch
from .config import DEFAULT_MATCHER_CONFIG, MatcherConfig

_SEPARATORS = re.compile(r"[,&]")
_WHITESPACE = re.compile(r"\s+")


def canonicalize(text: str) -> str:
    """Lightweight comparison form: lowercase, no separators, single spaces."""
    text = _SEPARATORS.sub(" ", text.lower().strip())
    return _WHITESPACE.sub(" ", text).strip()


def levenshtein(a: str, b: str) -> int:
    """Edit distance with unit cost insertions, deletions and substitutions."""
    return Levenshtein.distance(a, b)


def _typo_score(query: str, candidate: str, weight: float, max_distance: int) -> float:
    longest = max(len(query), len(candidate))
    if longest == 0:
        return 0.0
    distance = Levenshtein.distance(query, candidate, score_cutoff=max_distance)
    if distance > max_distance:
        return 0.0
    return weight * (1 - distance / longest)


def _any_equal(query: str, values: Iterable[str]) -> bool:
    return any(query == canonicalize(v) for v in values)


def score_ingredient(
    query: str,
    ingredient: Ingredient,
    config: MatcherConfig = DEFAULT_MATCHER_CONFIG,
) -> float:
    """Return the best tier score for *query* (already canonical) against one ingredient."""
    normalized_name = canonicalize(ingredient.normalized_name)

    if query == normalized_name:
        return config.normalized_name_score
    if query == canonicalize(ingredient.name):
        return config.name_score
    if _any_equal(query, ingredient.variations):
        return config.variation_score
    if _any_equal(query, ingredient.synonyms):
        return config.synonym_score
    if normalized_name and (query in normalized_name or normalized_name in query):
        return config.substring_score

    best = _typo_score(query, normalized_name, config.typo_weight, config.max_edit_distance)
    for variation in ingredient.variations:
        best = max(
            best,
            _typo_score(
                query,
                canonicalize(variation),
                config.variation_typo_weight,
                config.max_edit_distance,
            ),
        )
    return best


def find_matches(
    query: str,
    catalog: list[Ingredient],
    config: MatcherConfig = DEFAULT_MATCHER_CONFIG,
) -> list[IngredientMatch]:
    """
    Match a free-text query against the ingredient catalog.

    Returns every ingredient scoring above zero, best first. Ties keep
    catalog order.
    """
    term = canonicalize(query or "")
    if not term or not catalog:
        return []

    matches: list[IngredientMatch] = []
    for ingredient in catalog:
        score = score_ingredient(term, ingredient, config)
        if score > 0:
            matches.append(
                IngredientMatch(**ingredient.model_dump(), match_score=score)
            )

    matches.sort(key=lambda m: m.match_score, reverse=True)
    return matches
