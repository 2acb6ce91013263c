# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HRML tag node."""

from __future__ import annotations

from typing import Iterator


class TagNode:
    """A tag in an HRML tree.

    Each node has:
    - name: The tag name, unique among its siblings ('' for the root)
    - attr: Dictionary of attribute key to string value
    - children: Dictionary of child tag name to TagNode

    Nodes keep no reference to their parent; the builder tracks open tags
    on its own stack.

    Example:
        >>> node = TagNode('tag1', {'value': 'hello'})
        >>> node.add_child(TagNode('tag2'))
        >>> node.get_child('tag2').name
        'tag2'
    """

    __slots__ = ('name', 'attr', 'children')

    def __init__(
        self,
        name: str,
        attr: dict[str, str] | None = None,
    ) -> None:
        """Initialize a TagNode.

        Args:
            name: The tag name.
            attr: Optional dictionary of attributes.
        """
        self.name = name
        self.attr = attr or {}
        self.children: dict[str, TagNode] = {}

    def __repr__(self) -> str:
        return f"TagNode({self.name!r}, attr={self.attr!r}, children={list(self.children)})"

    def __len__(self) -> int:
        """Return the number of direct children."""
        return len(self.children)

    def __iter__(self) -> Iterator[TagNode]:
        return iter(self.children.values())

    def __contains__(self, name: str) -> bool:
        return name in self.children

    @property
    def is_root(self) -> bool:
        """True for the synthetic, nameless root."""
        return self.name == ''

    @property
    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return not self.children

    def add_child(self, node: TagNode) -> TagNode | None:
        """Attach node under its name, replacing any sibling with that name.

        Returns:
            The replaced node, or None.
        """
        replaced = self.children.get(node.name)
        self.children[node.name] = node
        return replaced

    def get_child(self, name: str, default: TagNode | None = None) -> TagNode | None:
        return self.children.get(name, default)

    def get_attr(self, attr: str | None = None, default: str | None = None) -> str | dict[str, str] | None:
        """Get attribute value or all attributes.

        Args:
            attr: Attribute name. If None, returns all attributes.
            default: Default value if attribute not found.

        Returns:
            Attribute value, default, or dict of all attributes.
        """
        if attr is None:
            return self.attr
        return self.attr.get(attr, default)

    def set_attr(self, _attr: dict[str, str] | None = None, **kwargs: str) -> None:
        """Set attributes on the node; later keys overwrite earlier ones."""
        if _attr:
            self.attr.update(_attr)
        self.attr.update(kwargs)
