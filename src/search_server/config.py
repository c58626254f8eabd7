"""
Runtime configuration for the search server.

Defaults can be overridden through environment variables, read once at import:

    SEARCH_SERVER_MAX_RESULTS=5
    SEARCH_SERVER_RELEVANCE_EPSILON=1e-6
    SEARCH_SERVER_NUM_WORKERS=0  # 0 = auto (cpu count)
    SEARCH_SERVER_MIN_QUERIES_FOR_PARALLEL=2
"""

from __future__ import annotations

import os

# =============================================================================
# Ranking
# =============================================================================

# Number of documents returned by a top-documents search
MAX_RESULT_DOCUMENT_COUNT = int(os.environ.get("SEARCH_SERVER_MAX_RESULTS", "5"))

# Relevances closer than this are considered equal and ordered by rating
RELEVANCE_EPSILON = float(os.environ.get("SEARCH_SERVER_RELEVANCE_EPSILON", "1e-6"))

# =============================================================================
# Parallelism
# =============================================================================

DEFAULT_NUM_WORKERS = int(os.environ.get("SEARCH_SERVER_NUM_WORKERS", "0")) or (os.cpu_count() or 4)

# Minimum queries in a batch before enabling parallelism
MIN_QUERIES_FOR_PARALLEL = int(os.environ.get("SEARCH_SERVER_MIN_QUERIES_FOR_PARALLEL", "2"))
