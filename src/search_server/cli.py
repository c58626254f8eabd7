"""
Command line interface.

Usage:
    search-server documents.txt -q "curly dog" -q "cat -city"
    search-server - --remove-duplicates --parallel -q "funny pet" < documents.txt
"""

from __future__ import annotations

import argparse
import logging
import sys

from search_server.document import DocumentStatus
from search_server.duplicates import remove_duplicates
from search_server.paginator import paginate
from search_server.process_queries import process_queries
from search_server.reader import read_input
from search_server.server import SearchServer


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {number}")
    return number


def build_server(stream) -> SearchServer:
    server_input = read_input(stream)
    search_server = SearchServer(server_input.stop_words)
    for document in server_input.documents:
        search_server.add_document(
            document.id, document.text, DocumentStatus.ACTUAL, document.ratings
        )
    return search_server


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="In-memory TF-IDF document search")
    parser.add_argument(
        "input",
        type=argparse.FileType("r", encoding="utf-8"),
        help="Documents in line-based format ('-' for stdin)",
    )
    parser.add_argument(
        "-q",
        "--query",
        action="append",
        default=[],
        help="Query to run (repeatable)",
    )
    parser.add_argument(
        "--page-size",
        type=positive_int,
        default=2,
        help="Results per printed page (default: 2)",
    )
    parser.add_argument(
        "--remove-duplicates",
        action="store_true",
        help="Remove documents with identical word sets before searching",
    )
    parser.add_argument(
        "--parallel",
        action="store_true",
        help="Evaluate queries in parallel",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        with args.input:
            search_server = build_server(args.input)
        if args.remove_duplicates:
            for document_id in remove_duplicates(search_server):
                print(f"Found duplicate document id {document_id}")

        if args.parallel:
            results = process_queries(search_server, args.query)
        else:
            results = process_queries(
                search_server, args.query, min_queries_for_parallel=len(args.query) + 1
            )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for query, documents in zip(args.query, results):
        print(f"Results for request: {query}")
        for page in paginate(documents, args.page_size):
            print(page)
            print("Page break")
    return 0


if __name__ == "__main__":
    sys.exit(main())
