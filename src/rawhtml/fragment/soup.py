"""BeautifulSoup-backed fragment parsing and fragment helpers."""

import copy
from typing import Optional

from bs4 import BeautifulSoup, Tag

from ..errors import FragmentParseError
from .protocols import FragmentParser


DEFAULT_RAW_HTML_ATTRIBUTE = "data-raw-html"


class SoupFragmentParser:
    """
    Parses HTML fragments with BeautifulSoup.

    Example:
        parser = SoupFragmentParser()
        fragment = parser.parse('<a href="/x">link</a>')
        parser.get_attribute(first_element(fragment), "href")  # "/x"
    """

    def __init__(self, features: str = "html.parser"):
        """
        Initialize the fragment parser.

        Args:
            features: BeautifulSoup tree builder (html.parser, lxml, html5lib)
        """
        self._features = features

    @property
    def features(self) -> str:
        return self._features

    def parse(self, html: str) -> Tag:
        """Parse an HTML fragment into a container tag."""
        try:
            soup = BeautifulSoup(html, self._features)
        except Exception as e:
            raise FragmentParseError(f"Failed to parse HTML fragment with {self._features}: {e}") from e

        # lxml and html5lib wrap fragments in a full document
        if self._features != "html.parser" and isinstance(soup.body, Tag):
            return soup.body
        return soup

    def get_attribute(self, element: Tag, name: str) -> Optional[str]:
        """Read an attribute, joining multi-valued attributes such as class."""
        value = element.get(name.lower())
        if value is None:
            return None
        if isinstance(value, list):
            return " ".join(value)
        return str(value)


def first_element(fragment: Tag) -> Optional[Tag]:
    """Return the first element child of a fragment container."""
    element = fragment.find(True, recursive=False)
    return element if isinstance(element, Tag) else None


def text_content(element: Tag) -> str:
    return element.get_text()


def serialize(fragment: Tag) -> str:
    """Serialize the children of a fragment container back to markup."""
    return fragment.decode_contents()


def extract_attribute(parser: FragmentParser, raw_tag_text: str, attribute_name: str) -> str:
    """
    Extract one attribute value from raw tag text.

    The tag text is parsed as a single-element fragment; entity decoding is
    left to the parser.

    Args:
        parser: Fragment-parsing service
        raw_tag_text: Raw HTML of the tag, e.g. '<img src="a.png">'
        attribute_name: Attribute to read

    Returns:
        Attribute value, or "" if the attribute or element is absent
    """
    element = first_element(parser.parse(raw_tag_text))
    if element is None:
        return ""
    return parser.get_attribute(element, attribute_name) or ""


def stamp_raw_html(fragment: Tag, attribute: str = DEFAULT_RAW_HTML_ATTRIBUTE) -> Tag:
    """
    Return a copy of fragment with every element marked as raw author HTML.

    Each element, at any depth, gets attribute set to its own lower-cased tag
    name. The input fragment is not modified.

    Args:
        fragment: Parsed fragment container
        attribute: Marker attribute name

    Returns:
        Stamped copy of the container
    """
    stamped = copy.copy(fragment)

    stack = [child for child in stamped.children if isinstance(child, Tag)]
    stack.reverse()
    while stack:
        element = stack.pop()
        element[attribute] = element.name.lower()
        children = [child for child in element.children if isinstance(child, Tag)]
        stack.extend(reversed(children))

    return stamped
