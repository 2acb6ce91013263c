# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HrmlDocument - a parsed HRML tree and its query resolver.

A document wraps the synthetic root TagNode produced by the builder and
answers attribute queries written as dotted tag paths::

    doc = HrmlDocument.from_lines([
        '<tag1 value = "hello">',
        '<tag2 name = "world">',
        '</tag2>',
        '</tag1>',
    ])
    doc['tag1~value']          # 'hello'
    doc.get_item('tag1.tag2~name')  # 'world'
    doc.answer('tag1~missing')  # 'Not Found!'

Queries never modify the tree, so repeated queries always agree.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from .node import TagNode
from .tokenizer import PATH_SEPARATOR, Query, tokenize_query

NOT_FOUND = 'Not Found!'


class HrmlDocument:
    """A fully built HRML tree.

    Attributes:
        root: The nameless root TagNode owning all top-level tags.
    """

    __slots__ = ('root',)

    def __init__(self, root: TagNode | None = None) -> None:
        self.root = root if root is not None else TagNode('')

    @classmethod
    def from_lines(cls, lines: Iterable[str], count: int | None = None, **options: Any) -> HrmlDocument:
        """Build a document from structure lines.

        Args:
            lines: Structure lines, one tag per line.
            count: Number of lines to consume; all of them if None.
            **options: Builder options (e.g. strict_closing=True).

        Raises:
            ParseError: If the lines are not well formed.
        """
        from .builder import TagTreeBuilder
        return TagTreeBuilder(**options).build(lines, count)

    def __repr__(self) -> str:
        return f"HrmlDocument({list(self.root.children)})"

    def __len__(self) -> int:
        """Return the number of top-level tags."""
        return len(self.root)

    def _split_path(self, path: str | Sequence[str]) -> Sequence[str]:
        if isinstance(path, str):
            return path.split(PATH_SEPARATOR)
        return path

    def resolve(self, path: str | Sequence[str], attribute: str) -> str | None:
        """Follow path from the root and look up attribute on the last tag.

        Stops at the first segment that has no matching child.

        Args:
            path: Tag names, outermost first, or a dotted path string.
            attribute: Attribute to read on the destination tag.

        Returns:
            The attribute value, or None if a segment or the attribute
            is missing.
        """
        node = self.root
        for segment in self._split_path(path):
            node = node.get_child(segment)
            if node is None:
                return None
        return node.attr.get(attribute)

    def query(self, query: str | Query) -> str | None:
        """Resolve a query line such as 'tag1.tag2~name'.

        Raises:
            MalformedQueryError: If a string query has no '~'.
        """
        if isinstance(query, str):
            query = tokenize_query(query)
        return self.resolve(query.path, query.attribute)

    def answer(self, query: str | Query, not_found: str = NOT_FOUND) -> str:
        """Return the output line for query: its value or not_found."""
        value = self.query(query)
        return not_found if value is None else value

    def get_item(self, query: str | Query, default: Any = None) -> Any:
        """Get an attribute value by query, or default on a miss.

        Example:
            >>> doc.get_item('tag1.tag2~name')
            'world'
            >>> doc.get_item('tag1.tag3~name', 'n/a')
            'n/a'
        """
        value = self.query(query)
        return default if value is None else value

    def __getitem__(self, query: str | Query) -> str:
        """Get an attribute value by query.

        Raises:
            KeyError: If a path segment or the attribute is missing.
        """
        value = self.query(query)
        if value is None:
            raise KeyError(f"Query '{query}' not found")
        return value

    def __contains__(self, query: str | Query) -> bool:
        return self.query(query) is not None

    def get_node(self, path: str | Sequence[str]) -> TagNode:
        """Get the tag at a dotted path ('tag1.tag2') or sequence of names.

        Raises:
            KeyError: If any segment is missing.
        """
        node = self.root
        for segment in self._split_path(path):
            child = node.get_child(segment)
            if child is None:
                raise KeyError(f"Path segment '{segment}' not found")
            node = child
        return node
