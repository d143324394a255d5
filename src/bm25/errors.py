"""Exceptions raised by the BM25 weighting engine."""


class InvalidInput(ValueError):
    """Raised when a Corpus cannot be built from the given input or options."""
