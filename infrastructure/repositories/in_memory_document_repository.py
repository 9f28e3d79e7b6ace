"""Хранилище метаданных документов в памяти."""
from __future__ import annotations

from domain.entities import DocumentRecord
from domain.errors import InvalidArgumentError, OutOfRangeError
from domain.interfaces import DocumentRepository


class InMemoryDocumentRepository(DocumentRepository):
    """Хранит записи документов в словаре и порядок добавления id в списке."""

    def __init__(self) -> None:
        self._records: dict[int, DocumentRecord] = {}
        self._document_ids: list[int] = []

    def add(self, document_id: int, record: DocumentRecord) -> None:
        if document_id in self._records:
            raise InvalidArgumentError(f"Document id {document_id} already exists")
        self._records[document_id] = record
        self._document_ids.append(document_id)

    def get(self, document_id: int) -> DocumentRecord:
        try:
            return self._records[document_id]
        except KeyError as exc:
            raise OutOfRangeError(f"Unknown document id {document_id}") from exc

    def contains(self, document_id: int) -> bool:
        return document_id in self._records

    def count(self) -> int:
        return len(self._document_ids)

    def id_at(self, index: int) -> int:
        if not 0 <= index < len(self._document_ids):
            raise OutOfRangeError(f"Document index {index} is out of range")
        return self._document_ids[index]


__all__ = ["InMemoryDocumentRepository"]
