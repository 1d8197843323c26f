"""Recognizer for a single HTML open or close tag at the start of a string.

The grammar is permissive about attribute well-formedness: it recognizes
plausible tags, it does not validate them.
"""

import re
from dataclasses import dataclass
from typing import Optional

TAG_NAME = r"[A-Za-z][A-Za-z0-9-]*"
ATTRIBUTE_NAME = r"[a-zA-Z_:][a-zA-Z0-9:._-]*"
UNQUOTED_VALUE = r"""[^"'=<>`\x00-\x20]+"""
SINGLE_QUOTED_VALUE = r"'[^']*'"
DOUBLE_QUOTED_VALUE = r'"[^"]*"'

ATTRIBUTE_VALUE = rf"(?:{UNQUOTED_VALUE}|{SINGLE_QUOTED_VALUE}|{DOUBLE_QUOTED_VALUE})"
ATTRIBUTE_VALUE_SPEC = rf"(?:\s*=\s*{ATTRIBUTE_VALUE})"
ATTRIBUTE = rf"(?:\s+{ATTRIBUTE_NAME}{ATTRIBUTE_VALUE_SPEC}?)"

# Group 1: open tag name, group 2: close tag name
OPEN_TAG = rf"<({TAG_NAME}){ATTRIBUTE}*\s*/?>"
CLOSE_TAG = rf"</({TAG_NAME})\s*>"

HTML_TAG = rf"(?:{OPEN_TAG}|{CLOSE_TAG})"

RE_HTML_TAG = re.compile(rf"^{HTML_TAG}", re.IGNORECASE)


@dataclass(frozen=True)
class ParsedTag:
    """
    A tag recognized at the start of a literal.

    Attributes:
        is_open: True for an open (or self-closing) tag, False for a close tag
        name: Tag name exactly as written
        raw_text: The matched tag text
    """

    is_open: bool
    name: str
    raw_text: str

    @property
    def lower_name(self) -> str:
        return self.name.lower()

    @property
    def open_tag_name(self) -> Optional[str]:
        """The open-tag spelling, or None for a close tag."""
        return self.name if self.is_open else None


def match_tag_at_start(text: str) -> Optional[ParsedTag]:
    """
    Match one HTML tag anchored at the start of text.

    The rest of text after the tag is ignored.

    Returns:
        ParsedTag, or None if text does not start with a tag
    """
    matched = RE_HTML_TAG.match(text)
    if matched is None:
        return None

    open_tag_name, close_tag_name = matched.group(1), matched.group(2)
    if open_tag_name is not None:
        return ParsedTag(is_open=True, name=open_tag_name, raw_text=matched.group(0))
    return ParsedTag(is_open=False, name=close_tag_name, raw_text=matched.group(0))


def is_html_tag(text: str) -> bool:
    """Check whether text starts with something that looks like an HTML tag."""
    return RE_HTML_TAG.match(text) is not None
