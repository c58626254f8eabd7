"""Removal of documents whose indexed word sets are identical."""

from __future__ import annotations

import logging

from search_server.server import SearchServer

logger = logging.getLogger(__name__)


def find_duplicates(search_server: SearchServer) -> list[int]:
    """
    Ids of documents whose set of distinct words equals that of an earlier
    document, in increasing order. Frequencies are ignored.
    """
    first_seen: dict[frozenset[str], int] = {}
    duplicates: set[int] = set()
    for document_id in search_server:
        words = frozenset(search_server.get_word_frequencies(document_id))
        if words in first_seen:
            duplicates.add(document_id)
        else:
            first_seen[words] = document_id
    return sorted(duplicates)


def remove_duplicates(search_server: SearchServer) -> list[int]:
    """Removes every duplicate found by ``find_duplicates`` and returns their ids."""
    duplicates = find_duplicates(search_server)
    for document_id in duplicates:
        logger.info(f"Found duplicate document id {document_id}")
        search_server.remove_document(document_id)
    return duplicates
