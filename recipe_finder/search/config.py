from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_BUNDLED_DATA_DIR = Path(__file__).resolve().parent.parent / "corpus" / "data"


@dataclass(frozen=True)
class ScoringConfig:
    """
    Tier scores and recipe weights for the relevance scorer.

    ``plural_pairs`` maps a singular word to its plural; either form in a
    search term matches the other at the start of a recipe word.
    """

    exact_score: float = 1.0
    substring_score: float = 0.9
    normalized_substring_score: float = 0.8
    word_boundary_score: float = 0.7
    vegetable_score: float = 0.6

    plural_pairs: tuple[tuple[str, str], ...] = (
        ("vegetable", "vegetables"),
        ("tomato", "tomatoes"),
        ("potato", "potatoes"),
        ("onion", "onions"),
        ("pepper", "peppers"),
        ("lettuce", "lettuces"),
        ("carrot", "carrots"),
        ("celery", "celeries"),
    )
    vegetable_query: str = "vegetables"
    # Whole recipe-ingredient strings that count as a vegetable
    vegetables: frozenset[str] = field(
        default_factory=lambda: frozenset({
            "lettuce", "tomatoes", "tomato", "carrots", "carrot", "celery",
            "onion", "onions", "potatoes", "potato", "peppers", "pepper",
            "bell peppers", "bell pepper", "broccoli", "spinach", "cabbage",
            "cauliflower", "zucchini", "eggplant", "cucumber", "radish",
        })
    )
    # (upper bound inclusive, multiplier); anything above the last bound
    # falls through to the ``*_fallback`` multiplier.
    cooking_time_weights: tuple[tuple[int, float], ...] = ((15, 1.1), (30, 1.0), (60, 0.9))
    cooking_time_fallback: float = 0.8
    difficulty_weights: Mapping[str, float] = field(
        default_factory=lambda: MappingProxyType({"easy": 1.1, "medium": 1.0, "hard": 0.9})
    )
    ingredient_count_weights: tuple[tuple[int, float], ...] = ((5, 1.05), (10, 1.0))
    ingredient_count_fallback: float = 0.95
    max_score: float = 1.0


@dataclass(frozen=True)
class SearchConfig:
    default_limit: int = 20
    max_limit: int = 100
    popular_limit: int = 10
    suggestion_min_length: int = 2
    suggestion_limit: int = 10
    search_timeout: float = float(os.getenv("RECIPE_SEARCH_TIMEOUT", "5.0"))
    data_dir: Path = Path(os.getenv("RECIPE_DATA_DIR", str(_BUNDLED_DATA_DIR)))


DEFAULT_SCORING_CONFIG = ScoringConfig()
DEFAULT_SEARCH_CONFIG = SearchConfig()
