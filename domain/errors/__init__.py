"""Exceptions raised by the SearchServer core."""
from __future__ import annotations


class SearchServerError(Exception):
    """Base class for all search server failures."""


class InvalidArgumentError(SearchServerError, ValueError):
    """Bad document id, control characters in text, or a malformed minus word."""


class InvalidWordError(InvalidArgumentError):
    """A stop word supplied at construction contains control characters."""


class OutOfRangeError(SearchServerError, IndexError):
    """Lookup of a document position or id that does not exist."""


__all__ = [
    "SearchServerError",
    "InvalidArgumentError",
    "InvalidWordError",
    "OutOfRangeError",
]
