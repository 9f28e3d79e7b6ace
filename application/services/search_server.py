"""Поисковый сервер: TF-IDF ранжирование с минус-словами и стоп-словами."""
from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Iterable, Sequence

import numpy as np

from application.services.inverted_index import InvertedIndex
from application.services.text_processing import (
    is_valid_word,
    make_unique_non_empty_strings,
    split_into_words,
)
from domain.entities import Document, DocumentRecord, DocumentStatus, Query, QueryWord
from domain.errors import InvalidArgumentError, InvalidWordError
from domain.interfaces import DocumentPredicate, DocumentRepository, SearchEngine, StatusOrPredicate
from infrastructure.repositories.in_memory_document_repository import InMemoryDocumentRepository

logger = logging.getLogger(__name__)

MAX_RESULT_DOCUMENT_COUNT = 5
RELEVANCE_EPSILON = float(np.finfo(np.float64).eps)


class SearchServer(SearchEngine):
    """In-memory search engine over short documents.

    Stop words are fixed at construction. Documents are add-only; each one is
    tokenized once, its words (minus stop words) go to the inverted index and its
    average rating and status go to the document repository.
    """

    def __init__(
        self,
        stop_words: str | Iterable[str] = "",
        *,
        max_result_document_count: int = MAX_RESULT_DOCUMENT_COUNT,
    ) -> None:
        if isinstance(stop_words, str):
            stop_words = split_into_words(stop_words)
        unique_stop_words = make_unique_non_empty_strings(stop_words)
        for word in unique_stop_words:
            if not is_valid_word(word):
                raise InvalidWordError(f"Invalid stop word {word!r}")
        self._stop_words = frozenset(unique_stop_words)
        self._index = InvertedIndex()
        self._documents: DocumentRepository = InMemoryDocumentRepository()
        self._max_result_document_count = max_result_document_count

    @property
    def stop_words(self) -> frozenset[str]:
        return self._stop_words

    @property
    def max_result_document_count(self) -> int:
        return self._max_result_document_count

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus,
        ratings: Sequence[int],
    ) -> None:
        """Добавить документ; при любой ошибке индекс и хранилище не меняются."""

        if document_id < 0 or self._documents.contains(document_id):
            raise InvalidArgumentError("Document id less than zero or already exists")

        words = self._split_into_words_no_stop(document)
        record = DocumentRecord(rating=self.compute_average_rating(ratings), status=status)
        self._documents.add(document_id, record)
        self._index.add_document(document_id, words)
        logger.debug("Документ %d добавлен: %d слов, рейтинг %d", document_id, len(words), record.rating)

    def find_top_documents(
        self,
        raw_query: str,
        status_or_predicate: StatusOrPredicate = DocumentStatus.ACTUAL,
    ) -> list[Document]:
        """Return at most ``max_result_document_count`` documents, best first.

        The second argument is either a status to filter on or a predicate
        ``(document_id, status, rating) -> bool``.
        """

        self._ensure_valid_query(raw_query, "find_top_documents")
        predicate = self._as_predicate(status_or_predicate)
        query = self.parse_query(raw_query)

        matched_documents = self.find_all_documents(query, predicate)
        matched_documents.sort(key=cmp_to_key(_compare_documents))
        logger.debug("Запрос %r: найдено %d документов", raw_query, len(matched_documents))
        return matched_documents[: self._max_result_document_count]

    def find_all_documents(self, query: Query, predicate: DocumentPredicate) -> list[Document]:
        """Score every document matching the query, unsorted and uncapped."""

        document_count = self.get_document_count()
        document_to_relevance: dict[int, float] = {}
        for word in query.plus_words:
            if word not in self._index:
                continue
            inverse_document_freq = self._index.inverse_document_freq(word, document_count)
            for document_id, term_freq in self._index.iter_postings(word):
                record = self._documents.get(document_id)
                if predicate(document_id, record.status, record.rating):
                    document_to_relevance[document_id] = (
                        document_to_relevance.get(document_id, 0.0) + term_freq * inverse_document_freq
                    )

        for word in query.minus_words:
            for document_id, _ in self._index.iter_postings(word):
                document_to_relevance.pop(document_id, None)

        return [
            Document(id=document_id, relevance=relevance, rating=self._documents.get(document_id).rating)
            for document_id, relevance in sorted(document_to_relevance.items())
        ]

    def get_document_count(self) -> int:
        return self._documents.count()

    def __len__(self) -> int:
        return self.get_document_count()

    def get_document_id(self, index: int) -> int:
        """Id of the document added at position ``index`` (OutOfRangeError otherwise)."""

        return self._documents.id_at(index)

    def match_document(self, raw_query: str, document_id: int) -> tuple[list[str], DocumentStatus]:
        """Плюс-слова запроса, найденные в документе, и статус документа.

        Если документ содержит хотя бы одно минус-слово, список слов пуст.
        """

        self._ensure_valid_query(raw_query, "match_document")
        query = self.parse_query(raw_query)
        status = self._documents.get(document_id).status

        if any(self._index.contains_document(word, document_id) for word in query.minus_words):
            return [], status
        matched_words = [
            word for word in sorted(query.plus_words) if self._index.contains_document(word, document_id)
        ]
        return matched_words, status

    def is_stop_word(self, word: str) -> bool:
        return word in self._stop_words

    def parse_query(self, text: str) -> Query:
        query = Query()
        for word in split_into_words(text):
            query_word = self._parse_query_word(word)
            if query_word.is_stop:
                continue
            if query_word.is_minus:
                query.minus_words.add(query_word.data)
            else:
                query.plus_words.add(query_word.data)
        return query

    def _parse_query_word(self, text: str) -> QueryWord:
        is_minus = False
        if text.startswith("-"):
            is_minus = True
            text = text[1:]
        if not is_valid_word(text):
            raise InvalidArgumentError(f"Invalid word {text!r} in query")
        if not text or text.startswith("-"):
            raise InvalidArgumentError(f"Invalid minus word {'-' + text!r} in query")
        return QueryWord(data=text, is_minus=is_minus, is_stop=self.is_stop_word(text))

    def _split_into_words_no_stop(self, text: str) -> list[str]:
        words: list[str] = []
        for word in split_into_words(text):
            if not is_valid_word(word):
                raise InvalidArgumentError(f"Invalid word {word!r} in document")
            if not self.is_stop_word(word):
                words.append(word)
        return words

    @staticmethod
    def compute_average_rating(ratings: Sequence[int]) -> int:
        """Средний рейтинг с отбрасыванием дробной части (к нулю); 0 для пустого списка."""

        if not ratings:
            return 0
        total = sum(ratings)
        average = abs(total) // len(ratings)
        return average if total >= 0 else -average

    @staticmethod
    def _ensure_valid_query(raw_query: str, operation: str) -> None:
        if not is_valid_word(raw_query):
            raise InvalidArgumentError(f"Invalid word in {operation}")

    @staticmethod
    def _as_predicate(status_or_predicate: StatusOrPredicate) -> DocumentPredicate:
        if isinstance(status_or_predicate, DocumentStatus):
            expected = status_or_predicate
            return lambda _document_id, status, _rating: status == expected
        return status_or_predicate


def _compare_documents(lhs: Document, rhs: Document) -> int:
    # Relevance descending; within epsilon the higher rating goes first.
    if abs(lhs.relevance - rhs.relevance) < RELEVANCE_EPSILON:
        return rhs.rating - lhs.rating
    return -1 if lhs.relevance > rhs.relevance else 1


__all__ = ["SearchServer", "MAX_RESULT_DOCUMENT_COUNT", "RELEVANCE_EPSILON"]
