"""In-memory TF-IDF document search server."""

from search_server.document import DocumentRecord, DocumentStatus, ScoredDocument
from search_server.duplicates import find_duplicates, remove_duplicates
from search_server.exceptions import (
    DuplicateIdError,
    InvalidIdError,
    InvalidInputError,
    InvalidQueryError,
    SearchServerError,
    UnknownDocumentError,
)
from search_server.execution import ExecutionPolicy
from search_server.paginator import Paginator, paginate
from search_server.process_queries import process_queries, process_queries_joined
from search_server.query import Query, parse_query
from search_server.server import SearchServer
from search_server.tokenizer import StopWords, is_valid_word, split_into_words

__all__ = [
    "DocumentRecord",
    "DocumentStatus",
    "DuplicateIdError",
    "ExecutionPolicy",
    "InvalidIdError",
    "InvalidInputError",
    "InvalidQueryError",
    "Paginator",
    "Query",
    "ScoredDocument",
    "SearchServer",
    "SearchServerError",
    "StopWords",
    "UnknownDocumentError",
    "find_duplicates",
    "is_valid_word",
    "paginate",
    "parse_query",
    "process_queries",
    "process_queries_joined",
    "remove_duplicates",
    "split_into_words",
]
