from __future__ import annotations

import logging
import math
import threading
from pathlib import Path
from typing import Any

import pandas as pd

from ..search.config import DEFAULT_SEARCH_CONFIG
from ..search.errors import CorpusUnavailableError
from .store import InMemoryCorpusStore

logger = logging.getLogger(__name__)

RECIPES_FILENAME = "recipes.json"
INGREDIENTS_FILENAME = "ingredients.json"

_store: InMemoryCorpusStore | None = None
_store_lock = threading.Lock()


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def _read_records(path: Path) -> list[dict[str, Any]]:
    """Read a JSON array of objects, dropping fields that are absent for a row."""
    if not path.is_file():
        raise CorpusUnavailableError(f"Corpus file not found: {path}")
    try:
        df = pd.read_json(path, orient="records", dtype=False, convert_dates=False)
    except ValueError as exc:
        raise CorpusUnavailableError(f"Corpus file is not a JSON record list: {path}") from exc

    return [
        {key: value for key, value in row.items() if not _is_missing(value)}
        for row in df.to_dict(orient="records")
    ]


def load_corpus(data_dir: Path = DEFAULT_SEARCH_CONFIG.data_dir) -> InMemoryCorpusStore:
    """
    Build an in-memory corpus from ``recipes.json`` and ``ingredients.json``.

    Ingredient records without a ``normalizedName`` get one derived from
    their name.
    """
    data_dir = Path(data_dir)
    recipes = _read_records(data_dir / RECIPES_FILENAME)
    ingredients = _read_records(data_dir / INGREDIENTS_FILENAME)
    store = InMemoryCorpusStore(recipes=recipes, ingredients=ingredients)
    logger.info(
        "Loaded corpus from %s: %d recipes, %d ingredients",
        data_dir, len(recipes), len(ingredients),
    )
    return store


def load_sample_corpus() -> InMemoryCorpusStore:
    """Return the shared corpus built from the configured data directory, loading it on first call."""
    global _store
    if _store is None:
        with _store_lock:
            if _store is None:
                _store = load_corpus(DEFAULT_SEARCH_CONFIG.data_dir)
    return _store


def reset_sample_corpus() -> None:
    global _store
    with _store_lock:
        _store = None
