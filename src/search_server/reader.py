"""
Line-based input format.

    <stop words, space separated>
    <document count>
    <document text>            \
    <rating count> <r1> <r2>   / repeated per document

Documents get ids 0, 1, 2, ... in file order and ACTUAL status.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TextIO


@dataclass
class DocumentInput:
    id: int
    text: str
    ratings: list[int] = field(default_factory=list)


@dataclass
class ServerInput:
    stop_words: str
    documents: list[DocumentInput]


def read_line(lines: Iterator[str]) -> str:
    """Next line without its line terminator."""
    try:
        return next(lines).rstrip("\r\n")
    except StopIteration:
        raise ValueError("Unexpected end of input") from None


def read_line_with_number(lines: Iterator[str]) -> int:
    line = read_line(lines)
    try:
        return int(line.strip())
    except ValueError:
        raise ValueError(f"Expected a number, got {line!r}") from None


def read_ratings(lines: Iterator[str]) -> list[int]:
    line = read_line(lines)
    try:
        count, *ratings = (int(value) for value in line.split())
    except ValueError:
        raise ValueError(f"Expected '<count> <ratings...>', got {line!r}") from None
    if count != len(ratings):
        raise ValueError(f"Rating count {count} does not match {len(ratings)} ratings")
    return ratings


def read_input(stream: TextIO) -> ServerInput:
    lines = iter(stream)
    stop_words = read_line(lines)
    document_count = read_line_with_number(lines)
    documents = []
    for document_id in range(document_count):
        text = read_line(lines)
        documents.append(DocumentInput(document_id, text, read_ratings(lines)))
    return ServerInput(stop_words, documents)
