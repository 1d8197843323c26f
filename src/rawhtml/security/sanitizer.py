"""Sanitization of URL-valued attributes (href, src)."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

DEFAULT_BLOCKED_SCHEMES = ("javascript", "vbscript", "livescript", "x")

# Browsers ignore whitespace and control characters inside a scheme
_RE_IGNORED_CHARS = re.compile(r"[\x00-\x20\x7f-\x9f]")


class AttributeSanitizer:
    """
    Drops attribute values that would execute script when followed.

    A value is rejected when, after removing whitespace and control
    characters, it starts with a blocked scheme such as "javascript:". Safe values
    are returned unchanged.

    Example:
        sanitizer = AttributeSanitizer()
        sanitizer.sanitize("https://example.com")  # "https://example.com"
        sanitizer.sanitize("java\\tscript:alert(1)")  # ""
    """

    def __init__(
        self,
        blocked_schemes: Iterable[str] | None = None,
        logger: logging.Logger | None = None,
    ):
        """
        Initialize the sanitizer.

        Args:
            blocked_schemes: URL schemes to reject (default: script schemes)
            logger: Optional logger for rejection messages
        """
        schemes = [s.lower() for s in (blocked_schemes if blocked_schemes is not None else DEFAULT_BLOCKED_SCHEMES)]
        self.blocked_schemes = frozenset(schemes)
        self.logger = logger or logging.getLogger(__name__)
        if schemes:
            alternatives = "|".join(re.escape(s) for s in sorted(schemes, key=len, reverse=True))
            self._re_blocked = re.compile(rf"(?:{alternatives}):", re.IGNORECASE)
        else:
            self._re_blocked = None

    def is_safe(self, value: str) -> bool:
        if self._re_blocked is None:
            return True
        return self._re_blocked.match(_RE_IGNORED_CHARS.sub("", value)) is None

    def sanitize(self, value: str) -> str:
        """
        Sanitize an attribute value.

        Args:
            value: Raw (already entity-decoded) attribute value

        Returns:
            The value, or "" if it was rejected
        """
        if self.is_safe(value):
            return value
        self.logger.debug(f"Dropped unsafe attribute value: {value!r}")
        return ""

    def __call__(self, value: str) -> str:
        return self.sanitize(value)


_default_sanitizer = AttributeSanitizer()


def sanitize_attribute_value(raw: str) -> str:
    """Sanitize a URL attribute value with the default blocked schemes."""
    return _default_sanitizer.sanitize(raw)
