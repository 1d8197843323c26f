"""Protocol definitions for the fragment-parsing service."""

from typing import Optional, Protocol

from bs4 import Tag


class FragmentParser(Protocol):
    """
    Protocol for parsing HTML fragments.

    Implementations must parse permissively, the way a browser would: unknown
    tags are kept and malformed attributes are recovered on a best-effort
    basis. Parsing must not mutate anything the caller passes in.
    """

    def parse(self, html: str) -> Tag:
        """
        Parse an HTML fragment.

        Args:
            html: Fragment markup

        Returns:
            Container tag whose children are the fragment's top-level nodes
        """
        ...

    def get_attribute(self, element: Tag, name: str) -> Optional[str]:
        """
        Read an attribute off a parsed element.

        Args:
            element: Element from a parsed fragment
            name: Attribute name

        Returns:
            Decoded attribute value, or None if absent
        """
        ...
