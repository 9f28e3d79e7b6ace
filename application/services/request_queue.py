"""Очередь запросов: статистика запросов без результатов за последние сутки."""
from __future__ import annotations

import logging
from collections import deque

from domain.entities import Document, DocumentStatus, RequestRecord
from domain.interfaces import SearchEngine, StatusOrPredicate

logger = logging.getLogger(__name__)

MINUTES_IN_DAY = 1440


class RequestQueue:
    """Wraps a search engine and remembers the outcome of the last ``window`` requests.

    Every request is one tick of the clock. Records whose age reaches ``window``
    ticks are dropped before the new one is stored.
    """

    def __init__(self, search_server: SearchEngine, window: int = MINUTES_IN_DAY) -> None:
        if window <= 0:
            raise ValueError("Request window must be positive")
        self._search_server = search_server
        self._window = window
        self._requests: deque[RequestRecord] = deque()
        self._no_results_requests = 0
        self._current_time = 0

    @property
    def window(self) -> int:
        return self._window

    def add_find_request(
        self,
        raw_query: str,
        status_or_predicate: StatusOrPredicate = DocumentStatus.ACTUAL,
    ) -> list[Document]:
        result = self._search_server.find_top_documents(raw_query, status_or_predicate)
        self._add_request(len(result))
        return result

    def get_no_result_requests(self) -> int:
        return self._no_results_requests

    def __len__(self) -> int:
        return len(self._requests)

    def _add_request(self, results_num: int) -> None:
        self._current_time += 1

        while self._requests and self._window <= self._current_time - self._requests[0].timestamp:
            if self._requests[0].results == 0:
                self._no_results_requests -= 1
            self._requests.popleft()

        self._requests.append(RequestRecord(timestamp=self._current_time, results=results_num))
        if results_num == 0:
            self._no_results_requests += 1
            logger.debug("Запрос без результатов, всего за окно: %d", self._no_results_requests)


__all__ = ["RequestQueue", "MINUTES_IN_DAY"]
