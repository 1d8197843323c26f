"""Reference document builder producing a DocNode tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from ..errors import BuilderStateError
from ..models.document import DocNode, Mark, MarkType, NodeType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuilderOperation:
    """One recorded builder call."""

    name: str
    args: tuple[Any, ...] = ()

    def __str__(self) -> str:
        return f"{self.name}({', '.join(repr(arg) for arg in self.args)})"


class TreeBuilder:
    """
    Builds a DocNode tree from conversion operations.

    Every call is recorded in ``operations``. State belongs to one conversion
    pass; create a new builder for each pass.

    Example:
        builder = TreeBuilder()
        builder.open_node(NodeType.PARAGRAPH)
        builder.open_mark(Mark(MarkType.STRONG, {"rawHTML": "b"}))
        builder.add_text("bold")
        builder.close_mark(MarkType.STRONG)
        builder.close_node()
        doc = builder.finish()
    """

    def __init__(self, root_type: NodeType = NodeType.DOC):
        self.root = DocNode(type=root_type)
        self.operations: list[BuilderOperation] = []
        self._stack: list[DocNode] = [self.root]
        self._marks: dict[MarkType, Mark] = {}

    @property
    def current(self) -> DocNode:
        return self._stack[-1]

    @property
    def current_type(self) -> NodeType:
        return self._stack[-1].type

    @property
    def depth(self) -> int:
        """Number of open nodes below the root."""
        return len(self._stack) - 1

    @property
    def active_marks(self) -> tuple[Mark, ...]:
        return tuple(self._marks.values())

    def _record(self, name: str, *args: Any) -> None:
        self.operations.append(BuilderOperation(name, args))

    def open_mark(self, mark: Mark) -> None:
        self._record("open_mark", mark)
        self._marks[mark.type] = mark

    def close_mark(self, mark_type: MarkType) -> None:
        self._record("close_mark", mark_type)
        if self._marks.pop(mark_type, None) is None:
            logger.debug(f"close_mark({mark_type.value}) with no open mark of that type")

    def open_node(self, node_type: NodeType, attrs: Optional[dict[str, Any]] = None) -> None:
        self._record("open_node", node_type, dict(attrs or {}))
        node = DocNode(type=node_type, attrs=dict(attrs or {}))
        self.current.content.append(node)
        self._stack.append(node)

    def close_node(self) -> None:
        self._record("close_node")
        if len(self._stack) == 1:
            raise BuilderStateError("close_node() called with no open node")
        self._stack.pop()

    def add_node(self, node_type: NodeType, attrs: Optional[dict[str, Any]] = None) -> None:
        self._record("add_node", node_type, dict(attrs or {}))
        self.current.content.append(DocNode(type=node_type, attrs=dict(attrs or {}), marks=self.active_marks))

    def add_text(self, text: str) -> None:
        self._record("add_text", text)
        if not text:
            return
        self.current.content.append(DocNode(type=NodeType.TEXT, text=text, marks=self.active_marks))

    def ingest_fragment(self, html: str, is_block: bool) -> None:
        self._record("ingest_fragment", html, is_block)
        self.current.content.append(DocNode(type=NodeType.HTML_FRAGMENT, attrs={"html": html, "block": is_block}))

    def operation_names(self) -> list[str]:
        return [op.name for op in self.operations]

    def finish(self) -> DocNode:
        """Close any nodes still open and return the root."""
        while len(self._stack) > 1:
            self.close_node()
        return self.root
