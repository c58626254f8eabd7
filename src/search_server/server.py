"""
The search server: document store, inverted index and query evaluation.

Reads (search, match, frequencies, iteration) are safe to run concurrently
with each other. Mutations (add, remove) must not overlap any other call on
the same instance.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping

from search_server.config import MAX_RESULT_DOCUMENT_COUNT, RELEVANCE_EPSILON
from search_server.document import (
    DocumentRecord,
    DocumentStatus,
    DocumentStore,
    ScoredDocument,
    compute_average_rating,
)
from search_server.exceptions import (
    DuplicateIdError,
    InvalidIdError,
    InvalidInputError,
    UnknownDocumentError,
)
from search_server.execution import ExecutionPolicy, parallel_any, parallel_filter
from search_server.index import InvertedIndex
from search_server.query import Query, parse_query
from search_server.ranking import DocumentPredicate, rank_documents, status_predicate
from search_server.tokenizer import StopWords, is_valid_word, split_into_words

logger = logging.getLogger(__name__)


class SearchServer:
    """
    In-memory TF-IDF search over short documents.

    Args:
        stop_words: Words excluded from indexing and querying, either a
            space-separated string or an iterable of words.
        max_results: Number of documents returned by ``find_top_documents``.
        epsilon: Relevances closer than this are ordered by rating instead.

    Raises:
        InvalidInputError: If a stop word contains a control character.
    """

    def __init__(
        self,
        stop_words: str | Iterable[str] = (),
        *,
        max_results: int = MAX_RESULT_DOCUMENT_COUNT,
        epsilon: float = RELEVANCE_EPSILON,
    ):
        self.stop_words = stop_words if isinstance(stop_words, StopWords) else StopWords(stop_words)
        self.max_results = max_results
        self.epsilon = epsilon
        self._documents = DocumentStore()
        self._index = InvertedIndex()

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_document(
        self,
        document_id: int,
        text: str,
        status: DocumentStatus,
        ratings: list[int],
    ) -> None:
        """
        Adds a document. Nothing is stored unless every check passes.

        Raises:
            InvalidIdError: If ``document_id`` is negative.
            DuplicateIdError: If ``document_id`` is already present.
            InvalidInputError: If any word contains a control character.
        """
        if document_id < 0:
            raise InvalidIdError(document_id)
        if document_id in self._documents:
            raise DuplicateIdError(document_id)

        words = split_into_words(text)
        for word in words:
            if not is_valid_word(word):
                raise InvalidInputError(word, document_id)

        record = DocumentRecord(document_id, text, compute_average_rating(ratings), status)
        self._documents.add(record)
        self._index.add(document_id, self.stop_words.filter(words))
        logger.debug(f"Added document {document_id} ({status.name}, rating {record.rating})")

    def remove_document(
        self,
        document_id: int,
        policy: ExecutionPolicy = ExecutionPolicy.SEQUENTIAL,
    ) -> None:
        """Removes a document and its index entries. Unknown ids are ignored."""
        if document_id not in self._documents:
            return
        self._index.remove(document_id, policy)
        self._documents.remove(document_id)
        logger.debug(f"Removed document {document_id}")

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def parse_query(self, raw_query: str) -> Query:
        return parse_query(raw_query, self.stop_words)

    def find_top_documents(
        self,
        raw_query: str,
        filter_by: DocumentStatus | DocumentPredicate = DocumentStatus.ACTUAL,
        policy: ExecutionPolicy = ExecutionPolicy.SEQUENTIAL,
    ) -> list[ScoredDocument]:
        """
        Best matching documents, most relevant first.

        Args:
            raw_query: Space-separated words; ``-word`` excludes documents.
            filter_by: A status to match exactly, or a predicate called as
                ``predicate(document_id, status, rating)``.
            policy: Fan-out strategy for per-word scoring.

        Raises:
            InvalidQueryError: If the query is malformed.
        """
        predicate = (
            status_predicate(filter_by) if isinstance(filter_by, DocumentStatus) else filter_by
        )
        query = self.parse_query(raw_query)
        return rank_documents(
            query,
            self._index,
            self._documents,
            predicate,
            top_k=self.max_results,
            epsilon=self.epsilon,
            policy=policy,
        )

    def match_document(
        self,
        raw_query: str,
        document_id: int,
        policy: ExecutionPolicy = ExecutionPolicy.SEQUENTIAL,
    ) -> tuple[list[str], DocumentStatus]:
        """
        Plus-words of the query that the document contains, sorted.

        A single minus-word present in the document empties the list.

        Raises:
            UnknownDocumentError: If the document does not exist.
            InvalidQueryError: If the query is malformed.
        """
        record = self._documents.get(document_id)
        if record is None:
            raise UnknownDocumentError(document_id)

        query = self.parse_query(raw_query)

        def contains(word: str) -> bool:
            return self._index.contains(word, document_id)

        if parallel_any(policy, contains, sorted(query.minus_words)):
            return [], record.status
        return parallel_filter(policy, contains, sorted(query.plus_words)), record.status

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    def get_word_frequencies(self, document_id: int) -> Mapping[str, float]:
        """Term frequencies of a document; empty mapping if unknown."""
        return self._index.word_frequencies(document_id)

    def get_document_count(self) -> int:
        return len(self._documents)

    def get_document_id(self, index: int) -> int:
        """Id of the ``index``-th live document in insertion order."""
        return self._documents.id_at(index)

    def get_document(self, document_id: int) -> DocumentRecord | None:
        return self._documents.get(document_id)

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def __iter__(self) -> Iterator[int]:
        """Live document ids in insertion order."""
        return iter(self._documents)
