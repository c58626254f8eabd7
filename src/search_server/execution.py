"""
Execution policies for fan-out inside a single operation.

SEQUENTIAL runs everything on the calling thread. PARALLEL maps independent
per-item work over a ThreadPoolExecutor. Both return identical results in
input order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import TypeVar

from search_server.config import DEFAULT_NUM_WORKERS

T = TypeVar("T")
R = TypeVar("R")


class ExecutionPolicy(Enum):
    SEQUENTIAL = "seq"
    PARALLEL = "par"


def parallel_map(
    policy: ExecutionPolicy,
    func: Callable[[T], R],
    items: Iterable[T],
    num_workers: int = DEFAULT_NUM_WORKERS,
) -> list[R]:
    """Applies ``func`` to every item, preserving order."""
    items = list(items)
    if policy is ExecutionPolicy.SEQUENTIAL or len(items) < 2:
        return [func(item) for item in items]

    with ThreadPoolExecutor(max_workers=min(num_workers, len(items))) as executor:
        return list(executor.map(func, items))


def parallel_any(
    policy: ExecutionPolicy,
    predicate: Callable[[T], bool],
    items: Iterable[T],
    num_workers: int = DEFAULT_NUM_WORKERS,
) -> bool:
    if policy is ExecutionPolicy.SEQUENTIAL:
        return any(predicate(item) for item in items)
    return any(parallel_map(policy, predicate, items, num_workers))


def parallel_filter(
    policy: ExecutionPolicy,
    predicate: Callable[[T], bool],
    items: Iterable[T],
    num_workers: int = DEFAULT_NUM_WORKERS,
) -> list[T]:
    """Keeps the items accepted by ``predicate``, preserving order."""
    items = list(items)
    keep = parallel_map(policy, predicate, items, num_workers)
    return [item for item, accepted in zip(items, keep) if accepted]
