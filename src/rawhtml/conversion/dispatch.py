"""Tag-name dispatch table for literal-HTML convertors."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Optional

from ..models.tree import MdNode

if TYPE_CHECKING:
    from .context import ConversionContext

logger = logging.getLogger(__name__)

# (context, token, open-tag name or None for a close tag)
Handler = Callable[["ConversionContext", MdNode, Optional[str]], None]


class ConvertorKind(str, Enum):
    """Categories of tag handling."""

    MARK_PAIR = "mark_pair"
    LEAF_NODE = "leaf_node"
    DELEGATED_BLOCK = "delegated_block"
    CONTEXT_SENSITIVE = "context_sensitive"
    NOOP = "noop"


@dataclass(frozen=True)
class Convertor:
    kind: ConvertorKind
    handler: Handler


def _ignore(ctx: ConversionContext, node: MdNode, open_tag_name: Optional[str]) -> None:
    return None


NOOP_CONVERTOR = Convertor(ConvertorKind.NOOP, _ignore)


class ConvertorTable:
    """
    Immutable, case-insensitive mapping from tag name to convertor.

    Unknown tag names resolve to NOOP_CONVERTOR instead of raising.
    """

    def __init__(self, entries: Mapping[str, Convertor]):
        self._entries = MappingProxyType({name.lower(): convertor for name, convertor in entries.items()})

    def lookup(self, tag_name: str) -> Convertor:
        return self._entries.get(tag_name.lower(), NOOP_CONVERTOR)

    def names(self) -> list[str]:
        return sorted(self._entries)

    def __contains__(self, tag_name: object) -> bool:
        return isinstance(tag_name, str) and tag_name.lower() in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


def create_convertors(declarations: Mapping[str, Convertor]) -> ConvertorTable:
    """
    Build a convertor table from declarations.

    Keys list one or more tag names separated by ", "; every name gets its
    own entry pointing at the same convertor. Names are lower-cased. A name
    declared twice keeps the last declaration.

    Example:
        table = create_convertors({"b, strong": Convertor(ConvertorKind.MARK_PAIR, handler)})
        table.lookup("STRONG").handler is handler  # True

    Args:
        declarations: Mapping of comma-separated tag names to convertors

    Returns:
        Immutable ConvertorTable
    """
    entries: dict[str, Convertor] = {}

    for key, convertor in declarations.items():
        for tag_name in key.split(", "):
            name = tag_name.lower()
            if name in entries and entries[name] is not convertor:
                logger.warning(f"Duplicate convertor for <{name}>: later declaration '{key}' wins")
            entries[name] = convertor

    return ConvertorTable(entries)
