"""Abstract interfaces for the SearchServer system."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Union

from domain.entities import Document, DocumentRecord, DocumentStatus

DocumentPredicate = Callable[[int, DocumentStatus, int], bool]
StatusOrPredicate = Union[DocumentStatus, DocumentPredicate]


class DocumentRepository(ABC):
    """Keeps per-document metadata and the order in which ids were added."""

    @abstractmethod
    def add(self, document_id: int, record: DocumentRecord) -> None:
        """Store a record for a new document id."""

    @abstractmethod
    def get(self, document_id: int) -> DocumentRecord:
        """Return the record of a stored document or raise OutOfRangeError."""

    @abstractmethod
    def contains(self, document_id: int) -> bool:
        """Return True if the id was already added."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored documents."""

    @abstractmethod
    def id_at(self, index: int) -> int:
        """Return the id added at the given position."""


class SearchEngine(ABC):
    """Anything that answers ranked top-K queries."""

    @abstractmethod
    def find_top_documents(
        self,
        raw_query: str,
        status_or_predicate: StatusOrPredicate = DocumentStatus.ACTUAL,
    ) -> list[Document]:
        """Return the best documents for the query, best first."""


class LineReader(ABC):
    """Line-oriented text input (console, files)."""

    @abstractmethod
    def read_line(self) -> str:
        """Return the next line without its terminator, or "" at the end of input."""

    @abstractmethod
    def read_line_with_number(self) -> int:
        """Read an integer from the next line, discarding the rest of it."""


__all__ = [
    "DocumentPredicate",
    "StatusOrPredicate",
    "DocumentRepository",
    "SearchEngine",
    "LineReader",
]
