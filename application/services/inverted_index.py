"""Инвертированный индекс: слово -> {id документа: частота слова в документе}."""
from __future__ import annotations

import math
from typing import Iterator, Sequence


class InvertedIndex:
    """Maps each indexed word to the documents containing it, weighted by term frequency.

    The index is append-only: a document is added exactly once, with all of its
    words at the same time, and entries are never rebuilt or removed.
    """

    def __init__(self) -> None:
        self._word_to_document_freqs: dict[str, dict[int, float]] = {}

    def add_document(self, document_id: int, words: Sequence[str]) -> None:
        """Register the (already filtered) words of one document."""

        if not words:
            return
        inv_word_count = 1.0 / len(words)
        for word in words:
            freqs = self._word_to_document_freqs.setdefault(word, {})
            freqs[document_id] = freqs.get(document_id, 0.0) + inv_word_count

    def __contains__(self, word: object) -> bool:
        return word in self._word_to_document_freqs

    def __len__(self) -> int:
        return len(self._word_to_document_freqs)

    def iter_postings(self, word: str) -> Iterator[tuple[int, float]]:
        yield from self._word_to_document_freqs.get(word, {}).items()

    def document_frequency(self, word: str) -> int:
        return len(self._word_to_document_freqs.get(word, ()))

    def contains_document(self, word: str, document_id: int) -> bool:
        return document_id in self._word_to_document_freqs.get(word, ())

    def inverse_document_freq(self, word: str, document_count: int) -> float:
        """IDF = ln(document_count / documents containing the word).

        Only meaningful for words present in the index.
        """

        return math.log(document_count / self.document_frequency(word))


__all__ = ["InvertedIndex"]
