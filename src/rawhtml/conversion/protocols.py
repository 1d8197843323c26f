"""Protocol definitions for the document builder."""

from typing import Any, Optional, Protocol

from ..models.document import Mark, MarkType, NodeType


class DocumentBuilder(Protocol):
    """
    Protocol for the builder that receives conversion operations.

    The builder owns an open-mark set and an open-node stack for the duration
    of one conversion pass. Marks compose: any number may be open at once and
    they may close in any order. Nodes nest: close_node always closes the most
    recently opened node.
    """

    def open_mark(self, mark: Mark) -> None:
        """Start applying mark to subsequently added content."""
        ...

    def close_mark(self, mark_type: MarkType) -> None:
        """Stop applying the open mark of the given type."""
        ...

    def open_node(self, node_type: NodeType, attrs: Optional[dict[str, Any]] = None) -> None:
        """Open a container node."""
        ...

    def close_node(self) -> None:
        """Close the most recently opened container node."""
        ...

    def add_node(self, node_type: NodeType, attrs: Optional[dict[str, Any]] = None) -> None:
        """Insert a leaf node into the current container."""
        ...

    def add_text(self, text: str) -> None:
        """Insert text into the current container."""
        ...

    def ingest_fragment(self, html: str, is_block: bool) -> None:
        """
        Re-parse markup into proper nodes.

        Args:
            html: Markup, already stamped with raw-HTML markers
            is_block: Whether the markup is block-level content
        """
        ...
