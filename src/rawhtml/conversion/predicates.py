"""Structural questions about a token's neighbours."""

from typing import Optional

from ..grammar import match_tag_at_start
from ..models.config import ListConfig
from ..models.tree import MarkdownTree, MdNode, MdNodeType

LIST_TAG_NAMES = frozenset({"ul", "ol", "li"})


def is_list_node(node: Optional[MdNode]) -> bool:
    """Check whether node is an inline open or close tag of ul, ol or li."""
    if node is None or node.type is not MdNodeType.HTML_INLINE:
        return False

    parsed = match_tag_at_start(node.literal or "")
    return parsed is not None and parsed.lower_name in LIST_TAG_NAMES


def is_text(node: Optional[MdNode]) -> bool:
    return node is not None and node.type is MdNodeType.TEXT


def has_parent_type(tree: MarkdownTree, node: MdNode, node_type: MdNodeType) -> bool:
    parent = tree.parent(node)
    return parent is not None and parent.type is node_type


def get_list_item_attrs(literal: str, config: Optional[ListConfig] = None) -> dict[str, bool]:
    """
    Read task-list markers off a list item tag.

    The markers are plain substring tests, so a checked marker such as
    data-task-checked also counts as a task marker.

    Returns:
        {"task": bool, "checked": bool}
    """
    config = config or ListConfig()
    return {
        "task": config.task_attribute in literal,
        "checked": config.task_checked_attribute in literal,
    }
