"""
Corpus access layer.

Responsibilities:
- Define the read interface the search engine depends on.
- Hold an in-memory snapshot of recipes and the ingredient catalog.
- Load the bundled sample corpus from JSON records.
"""
