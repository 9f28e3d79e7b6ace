"""Разбиение упорядоченной последовательности на страницы фиксированного размера."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Sequence, TypeVar

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class Page(Generic[T]):
    """A contiguous slice of the paginated sequence."""

    items: tuple[T, ...]

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        return "".join(str(item) for item in self.items)


class Paginator(Generic[T]):
    """Split a sequence into pages of at most ``page_size`` items."""

    def __init__(self, items: Sequence[T], page_size: int) -> None:
        if page_size <= 0:
            raise ValueError("Page size must be positive")
        self._pages: list[Page[T]] = [
            Page(tuple(items[start : start + page_size])) for start in range(0, len(items), page_size)
        ]

    def __iter__(self) -> Iterator[Page[T]]:
        return iter(self._pages)

    def __len__(self) -> int:
        return len(self._pages)

    def __getitem__(self, index: int) -> Page[T]:
        return self._pages[index]


def paginate(container: Sequence[T], page_size: int) -> Paginator[T]:
    return Paginator(container, page_size)


__all__ = ["Page", "Paginator", "paginate"]
