"""Разбиение текста на слова и проверка слов на допустимость."""
from __future__ import annotations

import re
from typing import Iterable

_WHITESPACE = re.compile(r"[ \t\n\v\f\r]+")


def split_into_words(text: str) -> list[str]:
    """Split text on runs of ASCII whitespace; empty input gives an empty list."""

    return [word for word in _WHITESPACE.split(text) if word]


def is_valid_word(word: str) -> bool:
    """Слово недопустимо, если содержит управляющие символы (коды 0x00-0x1F)."""

    return not any(ord(char) < 0x20 for char in word)


def make_unique_non_empty_strings(strings: Iterable[str]) -> set[str]:
    return {string for string in strings if string}


__all__ = ["split_into_words", "is_valid_word", "make_unique_non_empty_strings"]
