"""
rawhtml - Convert raw HTML typed into markdown into editable document operations.

Usage:
    from rawhtml import HtmlConverter, MarkdownTree, MdNodeType

    tree = MarkdownTree()
    para = tree.add_node(MdNodeType.PARAGRAPH)
    tree.add_node(MdNodeType.HTML_INLINE, "<b>", parent=para)
    tree.add_node(MdNodeType.TEXT, "bold", parent=para)
    tree.add_node(MdNodeType.HTML_INLINE, "</b>", parent=para)

    doc = HtmlConverter().convert_tree(tree).finish()
"""

__version__ = "1.0.0"

from .conversion import (
    DEFAULT_CONVERTORS,
    ConversionContext,
    Convertor,
    ConvertorKind,
    ConvertorTable,
    DocumentBuilder,
    HtmlConverter,
    TreeBuilder,
    create_convertors,
    get_text_without_trailing_newline,
)
from .errors import BuilderStateError, ConfigError, FragmentParseError, RawHtmlError, TreeFormatError
from .fragment import FragmentParser, SoupFragmentParser, extract_attribute, stamp_raw_html
from .grammar import RE_HTML_TAG, ParsedTag, is_html_tag, match_tag_at_start
from .models import (
    ConverterConfig,
    DocNode,
    Mark,
    MarkdownTree,
    MarkType,
    MdNode,
    MdNodeType,
    NodeType,
)
from .security import AttributeSanitizer, sanitize_attribute_value

__all__ = [
    "__version__",
    # Core
    "HtmlConverter",
    "ConversionContext",
    "DocumentBuilder",
    "TreeBuilder",
    # Grammar
    "RE_HTML_TAG",
    "ParsedTag",
    "is_html_tag",
    "match_tag_at_start",
    # Dispatch
    "Convertor",
    "ConvertorKind",
    "ConvertorTable",
    "DEFAULT_CONVERTORS",
    "create_convertors",
    "get_text_without_trailing_newline",
    # Fragments
    "FragmentParser",
    "SoupFragmentParser",
    "extract_attribute",
    "stamp_raw_html",
    # Security
    "AttributeSanitizer",
    "sanitize_attribute_value",
    # Models
    "ConverterConfig",
    "DocNode",
    "Mark",
    "MarkType",
    "MarkdownTree",
    "MdNode",
    "MdNodeType",
    "NodeType",
    # Errors
    "RawHtmlError",
    "FragmentParseError",
    "BuilderStateError",
    "TreeFormatError",
    "ConfigError",
]
