# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Input framing for an HRML run.

An input stream starts with two non-negative integers, the number of
structure lines and the number of query lines, followed by exactly that
many lines of each kind::

    4 2
    <tag1 value = "hello">
    <tag2 name = "world">
    </tag2>
    </tag1>
    tag1~value
    tag1.tag2~missing

run() builds the whole tree first, then writes one answer per query, in
order: the attribute value or 'Not Found!'.
"""

from __future__ import annotations

import logging
from typing import Iterator, TextIO

from .builder import TagTreeBuilder
from .document import NOT_FOUND
from .exceptions import HeaderError, ParseError

logger = logging.getLogger(__name__)


def read_header(source: TextIO) -> tuple[int, int]:
    """Read the structure and query line counts.

    The two integers may share a line or be spread over several; reading
    stops at the end of the line holding the second one.

    Raises:
        HeaderError: If the counts are missing, not integers or negative.
    """
    numbers: list[int] = []
    line_number = 0
    while len(numbers) < 2:
        line = source.readline()
        if not line:
            raise HeaderError(f"Expected 2 line counts, found {len(numbers)}")
        line_number += 1
        where = dict(line_number=line_number, line=line.rstrip('\r\n'), block='header')
        for token in line.split():
            if len(numbers) == 2:
                raise HeaderError(f"Unexpected token {token!r} after line counts", **where)
            try:
                value = int(token)
            except ValueError:
                raise HeaderError(f"Line count {token!r} is not an integer", **where) from None
            if value < 0:
                raise HeaderError(f"Line count {value} is negative", **where)
            numbers.append(value)
    return numbers[0], numbers[1]


def take_lines(source: TextIO, count: int, what: str = 'lines') -> Iterator[str]:
    """Yield exactly count lines from source without line terminators.

    Raises:
        ParseError: If source ends early.
    """
    for index in range(count):
        line = source.readline()
        if not line:
            raise ParseError(f"Expected {count} {what}, got {index}")
        yield line.rstrip('\r\n')


def run(
    source: TextIO,
    sink: TextIO,
    not_found: str = NOT_FOUND,
    strict_closing: bool = False,
) -> int:
    """Parse the structure block of source, then answer its query block.

    Args:
        source: Input stream with header, structure lines and query lines.
        sink: Output stream, one line per query.
        not_found: Text written for queries that do not resolve.
        strict_closing: Check closing tag names against open tags.

    Returns:
        Number of queries answered.

    Raises:
        ParseError: On malformed header, structure or query lines.
    """
    structure_count, query_count = read_header(source)
    logger.debug("Reading %d structure lines and %d queries", structure_count, query_count)

    builder = TagTreeBuilder(strict_closing=strict_closing)
    document = builder.build(take_lines(source, structure_count, 'structure lines'))

    answered = 0
    for line in take_lines(source, query_count, 'query lines'):
        try:
            answer = document.answer(line, not_found)
        except ParseError as exc:
            exc.line_number = answered + 1
            exc.block = 'query'
            raise
        sink.write(answer + '\n')
        answered += 1
    logger.debug("Answered %d queries", answered)
    return answered
