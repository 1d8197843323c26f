"""Data models for rawhtml: configuration, output document, markdown input."""

from .config import ConverterConfig, FragmentConfig, ListConfig, SanitizerConfig
from .document import DocNode, Mark, MarkType, NodeType
from .tree import MarkdownTree, MdNode, MdNodeType

__all__ = [
    # Config
    "ConverterConfig",
    "FragmentConfig",
    "ListConfig",
    "SanitizerConfig",
    # Document
    "DocNode",
    "Mark",
    "MarkType",
    "NodeType",
    # Markdown input
    "MarkdownTree",
    "MdNode",
    "MdNodeType",
]
