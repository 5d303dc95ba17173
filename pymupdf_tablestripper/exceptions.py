"""Exceptions raised by the table stripper."""


class ExtractionError(RuntimeError):
    """Raised when a page cannot be turned into a table."""
