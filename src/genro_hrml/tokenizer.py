# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Line tokenizers for HRML structure and query lines.

Structure lines come in two shapes::

    <tag1 key1 = "value1" key2 = "value2">
    </tag1>

Query lines are dotted tag paths followed by an attribute name::

    tag1.tag2~key1

Tokens are whitespace separated, so names, keys and values cannot contain
whitespace. Only one layer of double quotes is stripped from values.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .exceptions import MalformedQueryError, MalformedTagError

CLOSING_PREFIX = '</'
QUOTE = '"'
ASSIGN = '='
PATH_SEPARATOR = '.'
ATTRIBUTE_SEPARATOR = '~'

CLOSING_TAG = re.compile(r'^</\s*(?P<name>[^\s>]*)\s*>$')


@dataclass(frozen=True)
class Query:
    """A parsed query line: tag path segments plus the target attribute."""
    path: tuple[str, ...]
    attribute: str

    def __str__(self) -> str:
        return f"{PATH_SEPARATOR.join(self.path)}{ATTRIBUTE_SEPARATOR}{self.attribute}"


def is_closing_line(line: str) -> bool:
    """Return True if line closes a tag (starts with '</').

    Raises:
        MalformedTagError: If the line is too short to be a tag at all.
    """
    if len(line) <= 2:
        raise MalformedTagError(f"Line too short to be a tag: {line!r}", line=line)
    return line.startswith(CLOSING_PREFIX)


def closing_name(line: str) -> str:
    """Return the tag name of a closing line ('</tag1>' -> 'tag1')."""
    match = CLOSING_TAG.match(line)
    if match is None:
        name = line[len(CLOSING_PREFIX):]
        if name.endswith('>'):
            name = name[:-1]
        return name.strip()
    return match.group('name')


def tokenize_tag(line: str) -> list[str]:
    """Split an opening tag line into name, key, value, key, value...

    The enclosing angle brackets are dropped by taking everything between the
    first and last character, '=' tokens are removed and each token starting
    with a double quote loses its first and last character.

    Args:
        line: An opening tag line.

    Returns:
        List whose first item is the tag name, followed by alternating
        attribute keys and values.

    Example:
        >>> tokenize_tag('<tag1 key1 = "val1" key2 = "val2">')
        ['tag1', 'key1', 'val1', 'key2', 'val2']
    """
    tokens = []
    for token in line[1:-1].split():
        if token == ASSIGN:
            continue
        if token.startswith(QUOTE):
            token = token[1:-1]
        tokens.append(token)
    return tokens


def tokenize_query(line: str) -> Query:
    """Split a query line into its tag path and attribute name.

    The last '~' separates path from attribute. The path is split on '.',
    keeping empty segments.

    Raises:
        MalformedQueryError: If the line contains no '~'.

    Example:
        >>> tokenize_query('tag1.tag2~name')
        Query(path=('tag1', 'tag2'), attribute='name')
    """
    path, sep, attribute = line.rpartition(ATTRIBUTE_SEPARATOR)
    if not sep:
        raise MalformedQueryError(
            f"Query has no '{ATTRIBUTE_SEPARATOR}' attribute separator: {line!r}",
            line=line,
        )
    return Query(tuple(path.split(PATH_SEPARATOR)), attribute)
