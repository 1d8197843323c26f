"""Node and mark types of the editable document tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class NodeType(str, Enum):
    """Structural node types produced by the conversion."""

    DOC = "doc"
    PARAGRAPH = "paragraph"
    TABLE_CELL = "tableCell"
    BULLET_LIST = "bulletList"
    ORDERED_LIST = "orderedList"
    LIST_ITEM = "listItem"
    IMAGE = "image"
    THEMATIC_BREAK = "thematicBreak"
    CODE_BLOCK = "codeBlock"
    TEXT = "text"
    HTML_FRAGMENT = "htmlFragment"


class MarkType(str, Enum):
    """Span-level annotations. Marks compose rather than nest."""

    STRONG = "strong"
    EMPH = "emph"
    STRIKE = "strike"
    CODE = "code"
    LINK = "link"


@dataclass(frozen=True)
class Mark:
    """A mark instance: its type plus attributes such as rawHTML or linkUrl."""

    type: MarkType
    attrs: dict[str, Any] = field(default_factory=dict, hash=False, compare=True)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type.value}
        if self.attrs:
            data["attrs"] = dict(self.attrs)
        return data


@dataclass
class DocNode:
    """
    A node of the output document.

    Attributes:
        type: Node type
        attrs: Node attributes (rawHTML, imageUrl, task, ...)
        content: Child nodes, empty for leaves
        text: Text payload for text nodes
        marks: Marks active when a text or leaf node was inserted
    """

    type: NodeType
    attrs: dict[str, Any] = field(default_factory=dict)
    content: list[DocNode] = field(default_factory=list)
    text: Optional[str] = None
    marks: tuple[Mark, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        data: dict[str, Any] = {"type": self.type.value}
        if self.attrs:
            data["attrs"] = dict(self.attrs)
        if self.text is not None:
            data["text"] = self.text
        if self.marks:
            data["marks"] = [mark.to_dict() for mark in self.marks]
        if self.content:
            data["content"] = [child.to_dict() for child in self.content]
        return data
