"""Markdown tree input: literal-HTML tokens and their siblings.

The tree is an append-only arena. Nodes refer to their parent and siblings by
index, so a node never owns another node and the conversion pass can only
read the structure.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..errors import TreeFormatError


class MdNodeType(str, Enum):
    """Markdown node types the conversion pass understands."""

    DOCUMENT = "document"
    PARAGRAPH = "paragraph"
    TABLE_CELL = "tableCell"
    TEXT = "text"
    HTML_INLINE = "htmlInline"
    HTML_BLOCK = "htmlBlock"


HTML_TYPES = frozenset({MdNodeType.HTML_INLINE, MdNodeType.HTML_BLOCK})
LEAF_TYPES = frozenset({MdNodeType.TEXT, MdNodeType.HTML_INLINE, MdNodeType.HTML_BLOCK})


@dataclass(frozen=True)
class MdNode:
    """One node of the markdown tree, with sibling links as arena indices."""

    id: int
    type: MdNodeType
    literal: Optional[str] = None
    parent_id: Optional[int] = None
    prev_id: Optional[int] = None
    next_id: Optional[int] = None

    @property
    def is_html(self) -> bool:
        return self.type in HTML_TYPES


class MarkdownTree:
    """
    Arena of markdown nodes.

    Example:
        tree = MarkdownTree()
        para = tree.add_node(MdNodeType.PARAGRAPH, parent=tree.root)
        tree.add_node(MdNodeType.TEXT, "a", parent=para)
        tree.add_node(MdNodeType.HTML_INLINE, "<br>", parent=para)
    """

    def __init__(self) -> None:
        self._nodes: list[MdNode] = []
        self._children: list[list[int]] = []
        self.root = self._append(MdNodeType.DOCUMENT, None, None)

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, node_id: int) -> MdNode:
        return self._nodes[node_id]

    def _append(self, node_type: MdNodeType, literal: Optional[str], parent: Optional[MdNode]) -> MdNode:
        node_id = len(self._nodes)
        prev_id = None
        if parent is not None:
            siblings = self._children[parent.id]
            if siblings:
                prev_id = siblings[-1]
                prev = self._nodes[prev_id]
                # Nodes are frozen; relink the previous sibling by replacement
                self._nodes[prev_id] = MdNode(
                    prev.id, prev.type, prev.literal, prev.parent_id, prev.prev_id, node_id
                )
            siblings.append(node_id)

        node = MdNode(node_id, node_type, literal, parent.id if parent else None, prev_id)
        self._nodes.append(node)
        self._children.append([])
        return node

    def add_node(
        self,
        node_type: MdNodeType,
        literal: Optional[str] = None,
        parent: Optional[MdNode] = None,
    ) -> MdNode:
        """
        Append a node as the last child of parent (the root by default).

        Args:
            node_type: Markdown node type
            literal: Text of text and HTML nodes
            parent: Container node to append to

        Returns:
            The new node
        """
        parent = self[parent.id] if parent is not None else self.root
        if parent.type in LEAF_TYPES:
            raise TreeFormatError(f"{parent.type.value} nodes cannot have children")
        if node_type is MdNodeType.DOCUMENT:
            raise TreeFormatError("document node can only be the root")
        if node_type in LEAF_TYPES and literal is None:
            raise TreeFormatError(f"{node_type.value} nodes need a literal")
        return self._append(node_type, literal, parent)

    def parent(self, node: MdNode) -> Optional[MdNode]:
        return self._nodes[node.parent_id] if node.parent_id is not None else None

    def prev(self, node: MdNode) -> Optional[MdNode]:
        node = self._nodes[node.id]
        return self._nodes[node.prev_id] if node.prev_id is not None else None

    def next(self, node: MdNode) -> Optional[MdNode]:
        node = self._nodes[node.id]
        return self._nodes[node.next_id] if node.next_id is not None else None

    def children(self, node: MdNode) -> list[MdNode]:
        return [self._nodes[child_id] for child_id in self._children[node.id]]

    def walk(self) -> Iterator[tuple[MdNode, bool]]:
        """Yield (node, entering) events depth-first in document order."""
        stack: list[tuple[int, bool]] = [(self.root.id, True)]
        while stack:
            node_id, entering = stack.pop()
            node = self._nodes[node_id]
            yield node, entering
            if entering and node.type not in LEAF_TYPES:
                stack.append((node_id, False))
                for child_id in reversed(self._children[node_id]):
                    stack.append((child_id, True))

    def html_nodes(self) -> Iterator[MdNode]:
        """Yield every literal-HTML node in document order."""
        for node, entering in self.walk():
            if entering and node.is_html:
                yield node

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MarkdownTree":
        """
        Build a tree from nested dicts.

        The root dict must be a document node. Each node has a "type", an
        optional "literal" and an optional "children" list, e.g.
        {"type": "document", "children": [{"type": "paragraph", "children": [
        {"type": "htmlInline", "literal": "<b>"}]}]}
        """
        if not isinstance(data, dict) or data.get("type") != MdNodeType.DOCUMENT.value:
            raise TreeFormatError("root node must have type 'document'")

        tree = cls()
        pending: list[tuple[MdNode, list[Any]]] = [(tree.root, list(data.get("children", [])))]
        while pending:
            parent, children = pending.pop()
            for child in children:
                if not isinstance(child, dict) or "type" not in child:
                    raise TreeFormatError(f"invalid node: {child!r}")
                try:
                    node_type = MdNodeType(child["type"])
                except ValueError as err:
                    raise TreeFormatError(f"unknown node type: {child['type']!r}") from err
                literal = child.get("literal")
                if literal is not None and not isinstance(literal, str):
                    raise TreeFormatError(f"literal must be a string: {literal!r}")
                node = tree.add_node(node_type, literal, parent=parent)
                grandchildren = child.get("children")
                if grandchildren:
                    pending.append((node, list(grandchildren)))
        return tree
