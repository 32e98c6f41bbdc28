from __future__ import annotations


class QueryValidationError(ValueError):
    """A search request was rejected before any corpus access."""


class CorpusUnavailableError(RuntimeError):
    """The corpus store could not be read."""
