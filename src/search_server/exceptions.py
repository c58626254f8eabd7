"""Errors raised by the search server."""

from __future__ import annotations


class SearchServerError(ValueError):
    """Base class for all search server errors."""


class InvalidIdError(SearchServerError):
    def __init__(self, document_id: int):
        super().__init__(f"Forbidden to add a document with negative id {document_id}")
        self.document_id = document_id


class DuplicateIdError(SearchServerError):
    def __init__(self, document_id: int):
        super().__init__(f"Forbidden to add a document with the same id {document_id}")
        self.document_id = document_id


class InvalidInputError(SearchServerError):
    """A document, stop word or query word contains a control character."""

    def __init__(self, word: str, document_id: int | None = None):
        where = f" in document {document_id}" if document_id is not None else ""
        super().__init__(f"Word {word!r}{where} contains invalid characters")
        self.word = word
        self.document_id = document_id


class InvalidQueryError(InvalidInputError):
    """A query word is malformed: invalid characters, a bare '-' or a double '-'."""

    def __init__(self, word: str, reason: str):
        SearchServerError.__init__(self, f"Query word {word!r} is invalid: {reason}")
        self.word = word
        self.document_id = None
        self.reason = reason


class UnknownDocumentError(SearchServerError):
    def __init__(self, document_id: int):
        super().__init__(f"Document id {document_id} doesn't exist")
        self.document_id = document_id
