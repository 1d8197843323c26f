"""Fragment-parsing service for delegated HTML (attributes, block markup)."""

from .protocols import FragmentParser
from .soup import (
    DEFAULT_RAW_HTML_ATTRIBUTE,
    SoupFragmentParser,
    extract_attribute,
    first_element,
    serialize,
    stamp_raw_html,
    text_content,
)

__all__ = [
    # Protocols
    "FragmentParser",
    # Implementations
    "SoupFragmentParser",
    # Helpers
    "DEFAULT_RAW_HTML_ATTRIBUTE",
    "extract_attribute",
    "first_element",
    "serialize",
    "stamp_raw_html",
    "text_content",
]
