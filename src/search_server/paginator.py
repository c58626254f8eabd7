"""Splitting ranked results into fixed-size pages for display."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class Page(Generic[T]):
    """A contiguous slice of results."""

    def __init__(self, items: Sequence[T]):
        self._items = list(items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __str__(self) -> str:
        return "".join(str(item) for item in self._items)


class Paginator(Generic[T]):
    """
    Pages of ``page_size`` items; the last page may be shorter.

    Raises:
        ValueError: If ``page_size`` is not positive.
    """

    def __init__(self, items: Sequence[T], page_size: int):
        if page_size <= 0:
            raise ValueError(f"Page size must be positive, got {page_size}")
        self.page_size = page_size
        self._pages = [
            Page(items[start : start + page_size]) for start in range(0, len(items), page_size)
        ]

    def __iter__(self) -> Iterator[Page[T]]:
        return iter(self._pages)

    def __len__(self) -> int:
        return len(self._pages)

    def __getitem__(self, index: int) -> Page[T]:
        return self._pages[index]


def paginate(items: Sequence[T], page_size: int) -> Paginator[T]:
    return Paginator(items, page_size)
