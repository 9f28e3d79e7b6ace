"""Domain entities for the SearchServer system."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class DocumentStatus(Enum):
    """Статус документа в поисковой системе."""

    ACTUAL = "actual"
    IRRELEVANT = "irrelevant"
    BANNED = "banned"
    REMOVED = "removed"


@dataclass(slots=True)
class Document:
    """Projection of an indexed document returned by a search query."""

    id: int = 0
    relevance: float = 0.0
    rating: int = 0

    def __str__(self) -> str:
        return f"{{ document_id = {self.id}, relevance = {self.relevance:g}, rating = {self.rating} }}"


@dataclass(slots=True, frozen=True)
class DocumentRecord:
    """Metadata stored once per document at insertion time."""

    rating: int
    status: DocumentStatus


@dataclass(slots=True)
class QueryWord:
    """Одно слово запроса после разбора."""

    data: str
    is_minus: bool = False
    is_stop: bool = False


@dataclass(slots=True)
class Query:
    """A parsed query: required (plus) words and excluded (minus) words."""

    plus_words: set[str] = field(default_factory=set)
    minus_words: set[str] = field(default_factory=set)


@dataclass(slots=True)
class RequestRecord:
    """Результат одного запроса с временной меткой."""

    timestamp: int
    results: int


__all__ = [
    "DocumentStatus",
    "Document",
    "DocumentRecord",
    "QueryWord",
    "Query",
    "RequestRecord",
]
