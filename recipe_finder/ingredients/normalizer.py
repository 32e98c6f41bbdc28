from __future__ import annotations

import re

from .config import DEFAULT_NORMALIZER_CONFIG, NormalizerConfig

_PARENTHESES = re.compile(r"[()\[\]]")
_SEPARATORS = re.compile(r"[,&]")
_WHITESPACE = re.compile(r"\s+")
_NUMBER_TOKEN = re.compile(r"^\d+(?:[./]\d+)?%?$")

_ACCENTS = str.maketrans({
    **dict.fromkeys("àáâãäå", "a"),
    **dict.fromkeys("èéêë", "e"),
    **dict.fromkeys("ìíîï", "i"),
    **dict.fromkeys("òóôõöø", "o"),
    **dict.fromkeys("ùúûü", "u"),
    **dict.fromkeys("ýÿ", "y"),
    "ç": "c",
    "ñ": "n",
})


def _collapse(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def depluralize(word: str) -> str:
    """Reduce a single lowercase word to its singular form using suffix rules."""
    if len(word) > 3 and word.endswith("ies"):
        return word[:-3] + "y"
    if len(word) > 3 and word.endswith("ves"):
        return word[:-3] + "f"
    if len(word) > 3 and word.endswith("es"):
        stem = word[:-2]
        # "cheeses" -> "cheese", "glasses" -> "glass"
        if stem.endswith("s") and not stem.endswith("ss"):
            return word[:-1]
        return stem
    if len(word) > 2 and word.endswith("s") and not word.endswith("ss"):
        return word[:-1]
    return word


def fold_accents(text: str) -> str:
    return text.translate(_ACCENTS)


def _strip_phrase(text: str, phrase: str) -> str:
    """Remove *phrase* as whole words, unless nothing would be left."""
    pattern = re.compile(rf"(?<!\S){re.escape(phrase)}(?!\S)")
    if not pattern.search(text):
        return text
    remainder = _collapse(pattern.sub(" ", text))
    if not remainder:
        return text
    return remainder


def normalize(raw: str, config: NormalizerConfig = DEFAULT_NORMALIZER_CONFIG) -> str:
    """
    Canonicalize a free-text ingredient phrase into a comparable key.

    The rewrites run in a fixed order:
    parentheses, separators, plurals, abbreviations, cooking terms,
    descriptors, numbers, accents. Each removal step works on the text
    produced by the previous one.

    >>> normalize("Tomatoes (fresh), diced")
    'tomato'
    """
    if not raw or not raw.strip():
        return ""

    text = raw.lower().strip()
    text = _PARENTHESES.sub(" ", text)
    text = _SEPARATORS.sub(" ", text)
    text = _collapse(text)

    words = [depluralize(w) for w in text.split(" ")]
    words = [config.abbreviations.get(w, w) for w in words]
    text = " ".join(words)

    for term in config.cooking_terms:
        text = _strip_phrase(text, term)
    for phrase in config.descriptors:
        text = _strip_phrase(text, phrase)

    text = " ".join(w for w in text.split(" ") if not _NUMBER_TOKEN.match(w))
    text = fold_accents(text)
    return _collapse(text)
