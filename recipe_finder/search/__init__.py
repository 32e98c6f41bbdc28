"""
Recipe search engine.

Responsibilities:
- Validate search queries (pagination bounds, ingredient sanitization).
- Score every recipe in the corpus against the searched ingredients.
- Filter, rank and paginate the scored recipes into a result envelope.
- Serve ingredient suggestions and the quick-recipes ("popular") list.
"""
