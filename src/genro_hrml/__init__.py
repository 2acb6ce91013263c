# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-HRML - Parse nested HRML tag blocks and query their attributes.

A small, zero-dependency library: structure lines are built into a tree of
TagNode instances, then queries like 'tag1.tag2~name' read attribute values.

Example:
    >>> from genro_hrml import HrmlDocument
    >>> doc = HrmlDocument.from_lines(['<a x = "1">', '</a>'])
    >>> doc['a~x']
    '1'
"""

__version__ = "0.1.0"

from .builder import ParseResult, TagTreeBuilder, parse
from .document import NOT_FOUND, HrmlDocument
from .exceptions import (
    HeaderError,
    HrmlError,
    MalformedQueryError,
    MalformedTagError,
    MismatchedTagError,
    ParseError,
    UnbalancedTagsError,
)
from .node import TagNode
from .session import run
from .tokenizer import Query, tokenize_query, tokenize_tag

__all__ = [
    # Core classes
    "HrmlDocument",
    "TagNode",
    "TagTreeBuilder",
    "ParseResult",
    "Query",
    # Functions
    "parse",
    "run",
    "tokenize_tag",
    "tokenize_query",
    "NOT_FOUND",
    # Exceptions
    "HrmlError",
    "ParseError",
    "MalformedTagError",
    "MalformedQueryError",
    "UnbalancedTagsError",
    "MismatchedTagError",
    "HeaderError",
]
