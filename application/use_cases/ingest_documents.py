"""Use case for loading a corpus into the search server."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from application.services.search_server import SearchServer
from domain.entities import DocumentStatus
from domain.errors import InvalidArgumentError
from domain.interfaces import LineReader

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DocumentEntry:
    id: int
    text: str
    status: DocumentStatus = DocumentStatus.ACTUAL
    ratings: list[int] = field(default_factory=list)


@dataclass(slots=True)
class IngestError:
    document_id: int
    reason: str


@dataclass(slots=True)
class IngestReport:
    total: int
    indexed: int
    errors: list[IngestError] = field(default_factory=list)


def ingest_documents(entries: Iterable[DocumentEntry], *, server: SearchServer) -> IngestReport:
    """Добавить документы в сервер; некорректные документы попадают в отчёт, а не прерывают загрузку."""

    report = IngestReport(total=0, indexed=0)
    for entry in entries:
        report.total += 1
        try:
            server.add_document(entry.id, entry.text, entry.status, entry.ratings)
        except InvalidArgumentError as exc:
            logger.warning("Документ %d пропущен: %s", entry.id, exc)
            report.errors.append(IngestError(document_id=entry.id, reason=str(exc)))
            continue
        report.indexed += 1
    return report


def read_documents(reader: LineReader, *, first_id: int = 0) -> list[DocumentEntry]:
    """Read a corpus in console format.

    The first line holds the number of documents; each document is a text line
    followed by a ratings line ``"<count> r1 r2 ..."``. Ids are assigned in
    reading order starting from ``first_id``.
    """

    document_count = reader.read_line_with_number()
    entries: list[DocumentEntry] = []
    for offset in range(document_count):
        text = reader.read_line()
        entries.append(
            DocumentEntry(id=first_id + offset, text=text, ratings=_parse_ratings(reader.read_line()))
        )
    return entries


def _parse_ratings(line: str) -> list[int]:
    try:
        values = [int(value) for value in line.split()]
    except ValueError as exc:
        raise ValueError(f"Malformed ratings line {line!r}") from exc
    if not values:
        return []
    count, ratings = values[0], values[1:]
    if count != len(ratings):
        raise ValueError(f"Expected {count} ratings, got {len(ratings)} in line {line!r}")
    return ratings


__all__ = ["DocumentEntry", "IngestError", "IngestReport", "ingest_documents", "read_documents"]
