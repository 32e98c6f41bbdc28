"""
Ingredient text handling.

Responsibilities:
- Reduce free-text ingredient phrases to a comparable canonical key.
- Match a query term against the ingredient catalog (names, variations,
  synonyms, substrings and small typos).
- Power ingredient autocomplete for the search engine.
"""
