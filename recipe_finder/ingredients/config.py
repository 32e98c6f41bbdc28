from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


def _frozen(mapping: dict[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class NormalizerConfig:
    """
    Lookup tables for the ingredient normalizer.

    Terms and phrases are removed as whole words, in the order listed.
    """

    abbreviations: Mapping[str, str] = field(
        default_factory=lambda: _frozen({
            "tbsp": "tablespoon",
            "tsp": "teaspoon",
            "oz": "ounce",
            "lb": "pound",
        })
    )
    cooking_terms: tuple[str, ...] = (
        "minced",
        "diced",
        "chopped",
        "fresh",
        "ground",
        "boneless",
        "skinless",
    )
    descriptors: tuple[str, ...] = (
        "extra virgin",
        "cold pressed",
        "organic",
        "from italy",
    )


@dataclass(frozen=True)
class MatcherConfig:
    normalized_name_score: float = 1.0
    name_score: float = 0.95
    variation_score: float = 0.8
    synonym_score: float = 0.7
    substring_score: float = 0.5
    # Edit-distance fallback, scaled by (1 - distance / longest length)
    typo_weight: float = 0.3
    variation_typo_weight: float = 0.2
    max_edit_distance: int = 2


DEFAULT_NORMALIZER_CONFIG = NormalizerConfig()
DEFAULT_MATCHER_CONFIG = MatcherConfig()
