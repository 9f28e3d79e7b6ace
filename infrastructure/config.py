"""Dependency wiring for the SearchServer application."""
from __future__ import annotations

from dataclasses import dataclass

from application.services.request_queue import MINUTES_IN_DAY, RequestQueue
from application.services.search_server import MAX_RESULT_DOCUMENT_COUNT, SearchServer


@dataclass(slots=True)
class Container:
    """Simple container bundling the search server and its collaborators."""

    search_server: SearchServer
    request_queue: RequestQueue
    page_size: int


@dataclass(slots=True)
class ContainerConfig:
    """Stop words and limits for the search server."""

    stop_words: str | tuple[str, ...] = ""
    max_result_document_count: int = MAX_RESULT_DOCUMENT_COUNT
    request_window: int = MINUTES_IN_DAY
    page_size: int = 2


def build_default_container(config: ContainerConfig | None = None) -> Container:
    """Instantiate the default in-memory stack."""

    cfg = config or ContainerConfig()
    if cfg.max_result_document_count <= 0:
        raise ValueError("max_result_document_count must be positive")
    if cfg.page_size <= 0:
        raise ValueError("page_size must be positive")

    search_server = SearchServer(
        cfg.stop_words,
        max_result_document_count=cfg.max_result_document_count,
    )
    request_queue = RequestQueue(search_server, window=cfg.request_window)

    return Container(
        search_server=search_server,
        request_queue=request_queue,
        page_size=cfg.page_size,
    )


__all__ = ["Container", "ContainerConfig", "build_default_container"]
