"""
Batch query evaluation.

Each query is ranked independently against a shared, read-only server, so
batches run in parallel over a ThreadPoolExecutor. Small batches run
sequentially.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from itertools import chain

from search_server.config import DEFAULT_NUM_WORKERS, MIN_QUERIES_FOR_PARALLEL
from search_server.document import ScoredDocument
from search_server.server import SearchServer


def process_queries(
    search_server: SearchServer,
    queries: list[str],
    num_workers: int = DEFAULT_NUM_WORKERS,
    min_queries_for_parallel: int = MIN_QUERIES_FOR_PARALLEL,
) -> list[list[ScoredDocument]]:
    """
    Top documents (ACTUAL status) for every query, in query order.

    Raises:
        InvalidQueryError: If any query is malformed.
    """
    if not queries:
        return []

    def rank_single(query: str) -> list[ScoredDocument]:
        return search_server.find_top_documents(query)

    if len(queries) < min_queries_for_parallel:
        return [rank_single(query) for query in queries]

    with ThreadPoolExecutor(max_workers=num_workers) as executor:
        return list(executor.map(rank_single, queries))


def process_queries_joined(
    search_server: SearchServer,
    queries: list[str],
    num_workers: int = DEFAULT_NUM_WORKERS,
    min_queries_for_parallel: int = MIN_QUERIES_FOR_PARALLEL,
) -> list[ScoredDocument]:
    """Results of ``process_queries`` concatenated, without re-sorting or deduplication."""
    results = process_queries(search_server, queries, num_workers, min_queries_for_parallel)
    return list(chain.from_iterable(results))
