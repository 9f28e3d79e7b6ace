"""Use cases that run queries against the search server."""
from __future__ import annotations

from dataclasses import dataclass

from application.services.request_queue import RequestQueue
from application.services.search_server import SearchServer
from domain.entities import Document, DocumentStatus
from domain.interfaces import StatusOrPredicate


@dataclass(slots=True)
class MatchReport:
    document_id: int
    matched_words: list[str]
    status: DocumentStatus


def search(
    query_text: str,
    *,
    request_queue: RequestQueue,
    status_or_predicate: StatusOrPredicate = DocumentStatus.ACTUAL,
) -> list[Document]:
    """Search through the request queue so that empty results are tracked."""

    return request_queue.add_find_request(query_text, status_or_predicate)


def match_documents(query_text: str, *, server: SearchServer) -> list[MatchReport]:
    """Match the query against every document in insertion order."""

    reports: list[MatchReport] = []
    for index in range(server.get_document_count()):
        document_id = server.get_document_id(index)
        words, status = server.match_document(query_text, document_id)
        reports.append(MatchReport(document_id=document_id, matched_words=words, status=status))
    return reports


__all__ = ["MatchReport", "search", "match_documents"]
