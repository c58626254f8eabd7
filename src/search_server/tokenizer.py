"""
Whitespace tokenization, word validation and the stop-word set.

Words are maximal runs of non-space characters. Only the space character
separates words; other whitespace is part of the word and, being a control
character, makes it invalid.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from search_server.exceptions import InvalidInputError

_WORD_PATTERN = re.compile(r"[^ ]+")
_CONTROL_CHARS = re.compile(r"[\x00-\x1f]")


def split_into_words(text: str) -> list[str]:
    """Splits text on runs of spaces; never yields empty words."""
    return _WORD_PATTERN.findall(text)


def is_valid_word(word: str) -> bool:
    """A word is valid when it contains no character below U+0020."""
    return _CONTROL_CHARS.search(word) is None


def make_unique_non_empty_strings(strings: Iterable[str]) -> frozenset[str]:
    return frozenset(s for s in strings if s)


class StopWords:
    """
    Immutable set of words excluded from indexing and querying.

    Args:
        words: Either a space-separated string or an iterable of words.

    Raises:
        InvalidInputError: If any stop word contains a control character.
    """

    def __init__(self, words: str | Iterable[str] = ()):
        if isinstance(words, str):
            words = split_into_words(words)
        words = list(words)
        for word in words:
            if not is_valid_word(word):
                raise InvalidInputError(word)
        self._words = make_unique_non_empty_strings(words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"StopWords({sorted(self._words)!r})"

    def filter(self, words: Iterable[str]) -> list[str]:
        """Returns the words that are not stop words, in order."""
        return [word for word in words if word not in self._words]
