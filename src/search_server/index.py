"""
Inverted index with two mirrored views.

    term -> {document id -> term frequency}
    document id -> {term -> term frequency}

The doc-keyed view makes removal touch only the terms of the removed
document. Both views are updated together by ``add`` and ``remove``; a term
whose last document is removed is pruned from the term-keyed view.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Mapping
from types import MappingProxyType

from search_server.execution import ExecutionPolicy, parallel_map

logger = logging.getLogger(__name__)

_EMPTY: Mapping = MappingProxyType({})


class InvertedIndex:
    def __init__(self):
        self._term_to_docs: dict[str, dict[int, float]] = {}
        self._doc_to_terms: dict[int, dict[str, float]] = {}

    def __contains__(self, term: object) -> bool:
        return term in self._term_to_docs

    @property
    def vocabulary_size(self) -> int:
        return len(self._term_to_docs)

    def add(self, document_id: int, words: list[str]) -> None:
        """
        Indexes a document's (already stop-word filtered) words.

        Term frequency is occurrences / len(words). A document without words
        gets an empty entry and contributes no terms.
        """
        if document_id in self._doc_to_terms:
            raise KeyError(document_id)

        frequencies: dict[str, float] = {}
        if words:
            total = len(words)
            frequencies = {term: count / total for term, count in Counter(words).items()}

        self._doc_to_terms[document_id] = frequencies
        for term, frequency in frequencies.items():
            self._term_to_docs.setdefault(term, {})[document_id] = frequency

        logger.debug(f"Indexed document {document_id}: {len(frequencies)} unique terms")

    def remove(
        self,
        document_id: int,
        policy: ExecutionPolicy = ExecutionPolicy.SEQUENTIAL,
    ) -> None:
        """Drops a document from both views. Unknown ids are ignored."""
        frequencies = self._doc_to_terms.get(document_id)
        if frequencies is None:
            return

        # Gather is read-only and may fan out; draining mutates shared maps
        terms = parallel_map(policy, lambda item: item[0], frequencies.items())
        for term in terms:
            postings = self._term_to_docs[term]
            del postings[document_id]
            if not postings:
                del self._term_to_docs[term]
        del self._doc_to_terms[document_id]

        logger.debug(f"Removed document {document_id}: {len(terms)} terms affected")

    def word_frequencies(self, document_id: int) -> Mapping[str, float]:
        """Read-only term frequencies of a document; empty if unknown."""
        frequencies = self._doc_to_terms.get(document_id)
        if frequencies is None:
            return _EMPTY
        return MappingProxyType(frequencies)

    def postings(self, term: str) -> Mapping[int, float]:
        """Read-only {document id -> term frequency} for a term; empty if unindexed."""
        postings = self._term_to_docs.get(term)
        if postings is None:
            return _EMPTY
        return MappingProxyType(postings)

    def document_frequency(self, term: str) -> int:
        """Number of documents containing the term."""
        return len(self._term_to_docs.get(term, ()))

    def contains(self, term: str, document_id: int) -> bool:
        postings = self._term_to_docs.get(term)
        return postings is not None and document_id in postings
