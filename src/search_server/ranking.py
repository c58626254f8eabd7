"""
TF-IDF ranking over the inverted index.

Pipeline for one query:
1. Per plus-word, score every accepted posting as tf * idf (numpy vectorized)
2. Merge per-word scores into a relevance accumulator, in sorted word order
3. Drop every document that contains a minus-word
4. Sort by relevance, breaking near-ties (< epsilon) by rating
5. Keep the top-k
"""

from __future__ import annotations

from collections.abc import Callable
from functools import cmp_to_key
from typing import TYPE_CHECKING

import numpy as np

from search_server.config import MAX_RESULT_DOCUMENT_COUNT, RELEVANCE_EPSILON
from search_server.document import DocumentStatus, DocumentStore, ScoredDocument
from search_server.execution import ExecutionPolicy, parallel_map
from search_server.index import InvertedIndex
from search_server.query import Query

if TYPE_CHECKING:
    from numpy.typing import NDArray

# (document_id, status, rating) -> keep?
DocumentPredicate = Callable[[int, DocumentStatus, int], bool]


def status_predicate(status: DocumentStatus) -> DocumentPredicate:
    def predicate(document_id: int, document_status: DocumentStatus, rating: int) -> bool:
        return document_status == status

    return predicate


# =============================================================================
# Scoring
# =============================================================================


def inverse_document_frequency(document_count: int, document_frequency: int) -> float:
    """idf(t) = ln(N / df(t))"""
    return float(np.log(document_count / document_frequency))


def score_term(
    term: str,
    index: InvertedIndex,
    store: DocumentStore,
    predicate: DocumentPredicate,
) -> tuple[NDArray[np.int64], NDArray[np.float64]]:
    """
    Scores the documents of one plus-word accepted by the predicate.

    Returns:
        (document_ids, tf * idf) for the accepted documents
    """
    postings = index.postings(term)
    if not postings:
        return np.array([], dtype=np.int64), np.array([], dtype=np.float64)

    idf = inverse_document_frequency(len(store), len(postings))
    accepted = [
        (document_id, frequency)
        for document_id, frequency in postings.items()
        if _accepts(predicate, store, document_id)
    ]
    if not accepted:
        return np.array([], dtype=np.int64), np.array([], dtype=np.float64)

    document_ids = np.array([document_id for document_id, _ in accepted], dtype=np.int64)
    frequencies = np.array([frequency for _, frequency in accepted], dtype=np.float64)
    return document_ids, frequencies * idf


def _accepts(predicate: DocumentPredicate, store: DocumentStore, document_id: int) -> bool:
    record = store.get(document_id)
    return record is not None and predicate(document_id, record.status, record.rating)


def accumulate_relevance(
    query: Query,
    index: InvertedIndex,
    store: DocumentStore,
    predicate: DocumentPredicate,
    policy: ExecutionPolicy = ExecutionPolicy.SEQUENTIAL,
) -> dict[int, float]:
    """
    Relevance of every document matching at least one plus-word and no minus-word.

    Per-word scoring may fan out; merging is always done in sorted word order
    so both policies sum in the same order.
    """
    per_term = parallel_map(
        policy,
        lambda term: score_term(term, index, store, predicate),
        sorted(query.plus_words),
    )

    relevance: dict[int, float] = {}
    for document_ids, scores in per_term:
        for document_id, score in zip(document_ids.tolist(), scores.tolist()):
            relevance[document_id] = relevance.get(document_id, 0.0) + score

    for term in query.minus_words:
        for document_id in index.postings(term):
            relevance.pop(document_id, None)

    return relevance


# =============================================================================
# Ordering
# =============================================================================


def compare_documents(
    lhs: ScoredDocument,
    rhs: ScoredDocument,
    epsilon: float = RELEVANCE_EPSILON,
) -> int:
    """Orders by relevance descending; within epsilon, by rating descending."""
    if abs(lhs.relevance - rhs.relevance) < epsilon:
        return rhs.rating - lhs.rating
    return -1 if lhs.relevance > rhs.relevance else 1


def sort_documents(
    documents: list[ScoredDocument],
    epsilon: float = RELEVANCE_EPSILON,
) -> list[ScoredDocument]:
    return sorted(documents, key=cmp_to_key(lambda a, b: compare_documents(a, b, epsilon)))


def select_top_k(
    documents: list[ScoredDocument],
    top_k: int | None = MAX_RESULT_DOCUMENT_COUNT,
) -> list[ScoredDocument]:
    """Truncates an already sorted result list; ``None`` keeps everything."""
    if top_k is None:
        return list(documents)
    return documents[:top_k]


# =============================================================================
# Full ranking
# =============================================================================


def rank_documents(
    query: Query,
    index: InvertedIndex,
    store: DocumentStore,
    predicate: DocumentPredicate,
    top_k: int | None = MAX_RESULT_DOCUMENT_COUNT,
    epsilon: float = RELEVANCE_EPSILON,
    policy: ExecutionPolicy = ExecutionPolicy.SEQUENTIAL,
) -> list[ScoredDocument]:
    relevance = accumulate_relevance(query, index, store, predicate, policy)
    matched = [
        ScoredDocument(document_id, score, store.get(document_id).rating)
        for document_id, score in relevance.items()
    ]
    return select_top_k(sort_documents(matched, epsilon), top_k)


__all__ = [
    "DocumentPredicate",
    "status_predicate",
    "inverse_document_frequency",
    "score_term",
    "accumulate_relevance",
    "compare_documents",
    "sort_documents",
    "select_top_k",
    "rank_documents",
]
