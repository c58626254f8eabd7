"""
Query parsing.

A raw query is a space-separated list of words. A word prefixed with a single
``-`` is a minus-word: documents containing it are excluded. Stop words are
dropped whether or not they carry the prefix.
"""

from __future__ import annotations

from dataclasses import dataclass

from search_server.exceptions import InvalidQueryError
from search_server.tokenizer import StopWords, is_valid_word, split_into_words


@dataclass(frozen=True)
class QueryWord:
    data: str
    is_minus: bool
    is_stop: bool


@dataclass(frozen=True)
class Query:
    plus_words: frozenset[str] = frozenset()
    minus_words: frozenset[str] = frozenset()

    def __str__(self) -> str:
        """Canonical text form; parsing it yields an equal Query."""
        words = sorted(self.plus_words) + [f"-{word}" for word in sorted(self.minus_words)]
        return " ".join(words)


def parse_query_word(text: str, stop_words: StopWords) -> QueryWord:
    is_minus = text.startswith("-")
    word = text[1:] if is_minus else text

    if not word:
        raise InvalidQueryError(text, "no text after '-'")
    if word.startswith("-"):
        raise InvalidQueryError(text, "double '-' is not allowed")
    if not is_valid_word(word):
        raise InvalidQueryError(text, "invalid characters")

    return QueryWord(word, is_minus, word in stop_words)


def parse_query(raw_query: str, stop_words: StopWords) -> Query:
    """
    Parses a raw query into deduplicated plus- and minus-word sets.

    Raises:
        InvalidQueryError: On the first malformed word.
    """
    plus_words: set[str] = set()
    minus_words: set[str] = set()
    for text in split_into_words(raw_query):
        query_word = parse_query_word(text, stop_words)
        if query_word.is_stop:
            continue
        if query_word.is_minus:
            minus_words.add(query_word.data)
        else:
            plus_words.add(query_word.data)
    return Query(frozenset(plus_words), frozenset(minus_words))
