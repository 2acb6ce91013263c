# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TagTreeBuilder - build an HrmlDocument from structure lines.

Each opening line creates a TagNode under the currently open tag and makes
it the current one; each closing line returns to the enclosing tag. The
builder keeps open tags on an explicit stack, so nodes never point back at
their parents. After the last line the stack must be back to the root.

Example:
    >>> builder = TagTreeBuilder()
    >>> doc = builder.build(['<a x = "1">', '</a>'])
    >>> doc['a~x']
    '1'

The parse() function is the non-raising entry point: it returns a
ParseResult holding either the document or the ParseError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import islice
from typing import Any, Iterable

from .document import HrmlDocument
from .exceptions import (
    MalformedTagError,
    MismatchedTagError,
    ParseError,
    UnbalancedTagsError,
)
from .node import TagNode
from .tokenizer import closing_name, is_closing_line, tokenize_tag

logger = logging.getLogger(__name__)

STRUCTURE_BLOCK = 'structure'


def make_tag(line: str) -> TagNode:
    """Create a TagNode from an opening line.

    Raises:
        MalformedTagError: If the line does not yield a name followed by
            complete key/value pairs.
    """
    tokens = tokenize_tag(line)
    if not tokens or len(tokens) % 2 != 1:
        raise MalformedTagError(
            f"Expected a tag name and key/value pairs, got {len(tokens)} tokens",
            line=line,
        )
    if not tokens[0]:
        raise MalformedTagError("Tag name is empty", line=line)
    node = TagNode(tokens[0])
    for key, value in zip(tokens[1::2], tokens[2::2]):
        node.attr[key] = value
    return node


class TagTreeBuilder:
    """Incremental builder for an HRML tag tree.

    Feed lines one at a time with feed(), then call close() to check the
    nesting and get the document. build() does both for a block of lines.

    Args:
        strict_closing: If True, a closing line must name the tag it closes
            (MismatchedTagError otherwise). By default closing names are
            not checked.
    """

    __slots__ = ('root', '_stack', '_line_number', 'strict_closing')

    def __init__(self, strict_closing: bool = False) -> None:
        self.root = TagNode('')
        self._stack: list[TagNode] = [self.root]
        self._line_number = 0
        self.strict_closing = strict_closing

    @property
    def current(self) -> TagNode:
        """The currently open tag (the root when nothing is open)."""
        return self._stack[-1]

    @property
    def depth(self) -> int:
        """Number of tags currently open."""
        return len(self._stack) - 1

    def feed(self, line: str) -> None:
        """Consume one structure line.

        Raises:
            ParseError: On a malformed line or a closing line with no open tag.
        """
        line = line.rstrip('\r\n')
        self._line_number += 1
        try:
            if is_closing_line(line):
                self._close_tag(line)
            else:
                self._open_tag(line)
        except ParseError as exc:
            if exc.line_number is None:
                exc.line_number = self._line_number
            exc.line = line
            exc.block = STRUCTURE_BLOCK
            raise

    def _open_tag(self, line: str) -> None:
        node = make_tag(line)
        replaced = self.current.add_child(node)
        if replaced is not None:
            logger.debug("Tag '%s' replaces a previous sibling with the same name", node.name)
        self._stack.append(node)
        logger.debug("Opened tag '%s' at depth %d with %d attributes",
                     node.name, self.depth, len(node.attr))

    def _close_tag(self, line: str) -> None:
        if self.depth == 0:
            raise UnbalancedTagsError(f"Closing tag {line!r} has no matching opening tag")
        if self.strict_closing:
            name = closing_name(line)
            if name != self.current.name:
                raise MismatchedTagError(
                    f"Closing tag '{name}' does not match open tag '{self.current.name}'"
                )
        self._stack.pop()

    def close(self) -> HrmlDocument:
        """Finish the build and return the document.

        Raises:
            UnbalancedTagsError: If some tags are still open.
        """
        if self.depth:
            still_open = '.'.join(node.name for node in self._stack[1:])
            raise UnbalancedTagsError(
                f"{self.depth} tag(s) left open at end of input: {still_open}",
                line_number=self._line_number,
                block=STRUCTURE_BLOCK,
            )
        logger.debug("Built tree from %d lines with %d top-level tags",
                     self._line_number, len(self.root))
        return HrmlDocument(self.root)

    def build(self, lines: Iterable[str], count: int | None = None) -> HrmlDocument:
        """Feed count lines (or all lines) and close.

        Raises:
            ParseError: If the lines are malformed or fewer than count.
        """
        if count is not None:
            lines = islice(lines, count)
        for line in lines:
            self.feed(line)
        if count is not None and self._line_number < count:
            raise ParseError(
                f"Expected {count} structure lines, got {self._line_number}",
                line_number=self._line_number,
                block=STRUCTURE_BLOCK,
            )
        return self.close()


@dataclass
class ParseResult:
    """Outcome of parse(): a document on success, the ParseError otherwise."""
    document: HrmlDocument | None = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> HrmlDocument:
        """Return the document or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.document


def parse(lines: Iterable[str], count: int | None = None, **options: Any) -> ParseResult:
    """Build a document without raising on malformed input.

    Args:
        lines: Structure lines.
        count: Number of lines to consume; all of them if None.
        **options: TagTreeBuilder options.

    Returns:
        ParseResult with either document or error set.
    """
    try:
        return ParseResult(document=TagTreeBuilder(**options).build(lines, count))
    except ParseError as exc:
        return ParseResult(error=exc)
