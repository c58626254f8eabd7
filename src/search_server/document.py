"""
Document model and the in-memory document store.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from itertools import islice


class DocumentStatus(Enum):
    ACTUAL = "actual"
    IRRELEVANT = "irrelevant"
    BANNED = "banned"
    REMOVED = "removed"


def compute_average_rating(ratings: list[int]) -> int:
    """
    Average of the ratings, truncated toward zero; 0 for no ratings.

    Examples:
        [1, 2, 3] -> 2, [-3, -2, -1] -> -2, [-1, -2] -> -1
    """
    if not ratings:
        return 0
    total = sum(int(r) for r in ratings)
    quotient = abs(total) // len(ratings)
    return -quotient if total < 0 else quotient


@dataclass(frozen=True)
class DocumentRecord:
    """A stored document: raw text plus the metadata used for filtering."""

    id: int
    text: str
    rating: int
    status: DocumentStatus


@dataclass(frozen=True)
class ScoredDocument:
    """A search hit. Never stored, only returned by ranking."""

    id: int
    relevance: float
    rating: int

    def __str__(self) -> str:
        return (
            f"{{ document_id = {self.id}, relevance = {self.relevance:g}, "
            f"rating = {self.rating} }}"
        )


class DocumentStore:
    """
    Documents keyed by id, iterated in insertion order.

    The store does not validate ids; callers check ``in`` before ``add``.
    """

    def __init__(self):
        # dict keeps insertion order, which doubles as the id registry
        self._records: dict[int, DocumentRecord] = {}

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._records))

    def add(self, record: DocumentRecord) -> None:
        self._records[record.id] = record

    def get(self, document_id: int) -> DocumentRecord | None:
        return self._records.get(document_id)

    def remove(self, document_id: int) -> DocumentRecord | None:
        return self._records.pop(document_id, None)

    def id_at(self, index: int) -> int:
        """Id of the document at ``index`` in insertion order."""
        if index < 0 or index >= len(self._records):
            raise IndexError(f"Document index {index} out of range")
        return next(islice(self._records, index, None))
