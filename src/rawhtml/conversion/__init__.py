"""Conversion of literal HTML into editable document operations."""

from .builder import BuilderOperation, TreeBuilder
from .context import ConversionContext
from .converter import HtmlConverter
from .dispatch import NOOP_CONVERTOR, Convertor, ConvertorKind, ConvertorTable, create_convertors
from .handlers import CONVERTOR_DECLARATIONS, DEFAULT_CONVERTORS, get_text_without_trailing_newline
from .predicates import get_list_item_attrs, is_list_node
from .protocols import DocumentBuilder

__all__ = [
    # Protocols
    "DocumentBuilder",
    # Implementations
    "HtmlConverter",
    "TreeBuilder",
    "BuilderOperation",
    "ConversionContext",
    # Dispatch
    "Convertor",
    "ConvertorKind",
    "ConvertorTable",
    "NOOP_CONVERTOR",
    "CONVERTOR_DECLARATIONS",
    "DEFAULT_CONVERTORS",
    "create_convertors",
    # Helpers
    "get_list_item_attrs",
    "get_text_without_trailing_newline",
    "is_list_node",
]
