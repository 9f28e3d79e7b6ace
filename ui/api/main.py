"""FastAPI layer that exposes document and search operations."""
from __future__ import annotations

from fastapi import FastAPI, HTTPException, Query as FastAPIQuery
from pydantic import BaseModel, Field

from application.use_cases.search import search
from domain.entities import Document, DocumentStatus
from domain.errors import InvalidArgumentError, OutOfRangeError
from infrastructure.config import Container, build_default_container


class DocumentPayload(BaseModel):
    id: int
    text: str
    status: DocumentStatus = DocumentStatus.ACTUAL
    ratings: list[int] = Field(default_factory=list)


class DocumentsResponse(BaseModel):
    count: int
    ids: list[int]


class DocumentResult(BaseModel):
    id: int
    relevance: float
    rating: int


class SearchResponse(BaseModel):
    query: str
    results: list[DocumentResult]


class MatchResponse(BaseModel):
    document_id: int
    words: list[str]
    status: DocumentStatus


class StatsResponse(BaseModel):
    documents: int
    no_result_requests: int


def _serialize(document: Document) -> DocumentResult:
    return DocumentResult(id=document.id, relevance=document.relevance, rating=document.rating)


def create_app(container: Container | None = None) -> FastAPI:
    container = container or build_default_container()
    app = FastAPI(title="SearchServer API")

    @app.post("/documents", response_model=DocumentsResponse, status_code=201)
    def add_document_endpoint(payload: DocumentPayload) -> DocumentsResponse:
        server = container.search_server
        try:
            server.add_document(payload.id, payload.text, payload.status, payload.ratings)
        except InvalidArgumentError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return documents_endpoint()

    @app.get("/documents", response_model=DocumentsResponse)
    def documents_endpoint() -> DocumentsResponse:
        server = container.search_server
        ids = [server.get_document_id(index) for index in range(server.get_document_count())]
        return DocumentsResponse(count=len(ids), ids=ids)

    @app.get("/search", response_model=SearchResponse)
    def search_endpoint(
        q: str = FastAPIQuery(..., description="Query with optional -minus words"),
        status: DocumentStatus = FastAPIQuery(DocumentStatus.ACTUAL),
    ) -> SearchResponse:
        try:
            results = search(q, request_queue=container.request_queue, status_or_predicate=status)
        except InvalidArgumentError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return SearchResponse(query=q, results=[_serialize(document) for document in results])

    @app.get("/documents/{document_id}/match", response_model=MatchResponse)
    def match_endpoint(document_id: int, q: str = FastAPIQuery(...)) -> MatchResponse:
        try:
            words, status = container.search_server.match_document(q, document_id)
        except InvalidArgumentError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except OutOfRangeError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return MatchResponse(document_id=document_id, words=words, status=status)

    @app.get("/stats", response_model=StatsResponse)
    def stats_endpoint() -> StatsResponse:
        return StatsResponse(
            documents=container.search_server.get_document_count(),
            no_result_requests=container.request_queue.get_no_result_requests(),
        )

    return app


app = create_app()
