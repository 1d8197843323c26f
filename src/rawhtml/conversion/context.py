"""Per-pass conversion state."""

from dataclasses import dataclass
from typing import Callable

from ..fragment.protocols import FragmentParser
from ..models.config import ConverterConfig
from ..models.tree import MarkdownTree
from .protocols import DocumentBuilder

# Sanitizer for URL-valued attributes: raw value in, safe value (or "") out
Sanitizer = Callable[[str], str]


@dataclass
class ConversionContext:
    """
    Context passed to every convertor during one conversion pass.

    The builder holds mutable per-pass state, so a context must never be
    shared between passes. Everything else is read-only.

    Attributes:
        tree: Markdown tree the HTML tokens belong to
        builder: Document builder receiving operations
        fragment_parser: Fragment-parsing service
        sanitizer: Applied to every extracted href and src
        config: Converter configuration
    """

    tree: MarkdownTree
    builder: DocumentBuilder
    fragment_parser: FragmentParser
    sanitizer: Sanitizer
    config: ConverterConfig
