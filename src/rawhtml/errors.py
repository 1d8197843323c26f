"""Exception hierarchy for rawhtml."""

from __future__ import annotations


class RawHtmlError(Exception):
    """Base exception for all rawhtml errors."""

    error_type: str = "rawhtml_error"
    suggestions: list[str] = []

    def __init__(self, message: str, suggestions: list[str] | None = None) -> None:
        super().__init__(message)
        if suggestions is not None:
            self.suggestions = suggestions


class FragmentParseError(RawHtmlError):
    """The fragment-parsing service failed on a block token."""

    error_type = "fragment_parse_error"
    suggestions = [
        "Check that the configured parser backend is installed (lxml, html5lib)",
        "Fall back to the built-in 'html.parser' backend",
    ]


class BuilderStateError(RawHtmlError):
    """An operation was issued that the document builder cannot apply."""

    error_type = "builder_state_error"


class TreeFormatError(RawHtmlError):
    """Markdown tree input is malformed."""

    error_type = "tree_format_error"
    suggestions = [
        'Every node needs a "type" key',
        'htmlInline and htmlBlock nodes need a "literal" string',
    ]


class ConfigError(RawHtmlError):
    """Configuration could not be loaded."""

    error_type = "config_error"
    suggestions = ["Install the yaml extra: pip install rawhtml[yaml]"]
