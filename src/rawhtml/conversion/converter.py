"""Conversion pass: literal-HTML tokens to document builder operations."""

import logging
from typing import Optional

from ..fragment.protocols import FragmentParser
from ..fragment.soup import SoupFragmentParser
from ..grammar import match_tag_at_start
from ..models.config import ConverterConfig
from ..models.document import NodeType
from ..models.tree import MarkdownTree, MdNode, MdNodeType
from ..security.sanitizer import AttributeSanitizer
from .builder import TreeBuilder
from .context import ConversionContext, Sanitizer
from .dispatch import ConvertorKind, ConvertorTable
from .handlers import DEFAULT_CONVERTORS
from .predicates import is_list_node
from .protocols import DocumentBuilder

logger = logging.getLogger(__name__)


class HtmlConverter:
    """
    Converts literal-HTML tokens of a markdown tree into builder operations.

    The converter itself holds only read-only collaborators and can be shared
    between passes. Per-pass state lives in the builder of each
    ConversionContext.

    Example:
        converter = HtmlConverter()
        builder = converter.convert_tree(tree)
        doc = builder.finish()
    """

    def __init__(
        self,
        config: Optional[ConverterConfig] = None,
        fragment_parser: Optional[FragmentParser] = None,
        sanitizer: Optional[Sanitizer] = None,
        convertors: Optional[ConvertorTable] = None,
    ):
        """
        Initialize the converter.

        Args:
            config: Converter configuration (uses defaults if None)
            fragment_parser: Fragment-parsing service (BeautifulSoup if None)
            sanitizer: URL attribute sanitizer (script-scheme blocker if None)
            convertors: Tag dispatch table (built-in table if None)
        """
        self.config = config or ConverterConfig()
        self._fragment_parser = fragment_parser or SoupFragmentParser(self.config.fragment.parser_features)
        self._sanitizer = sanitizer or AttributeSanitizer(self.config.sanitizer.blocked_schemes)
        self._convertors = convertors if convertors is not None else DEFAULT_CONVERTORS

    @property
    def convertors(self) -> ConvertorTable:
        return self._convertors

    def create_context(self, tree: MarkdownTree, builder: DocumentBuilder) -> ConversionContext:
        """Create the context for one conversion pass."""
        return ConversionContext(
            tree=tree,
            builder=builder,
            fragment_parser=self._fragment_parser,
            sanitizer=self._sanitizer,
            config=self.config,
        )

    def convert_node(self, ctx: ConversionContext, node: MdNode) -> None:
        """
        Convert one literal-HTML token.

        Tokens that do not start with a tag, or whose tag has no convertor,
        produce no operations.

        Raises:
            FragmentParseError: If the fragment-parsing service fails on this token
        """
        parsed = match_tag_at_start(node.literal or "")
        if parsed is None:
            logger.debug(f"No HTML tag at start of token {node.id}: {node.literal!r}")
            return

        convertor = self._convertors.lookup(parsed.name)
        if convertor.kind is ConvertorKind.NOOP:
            logger.debug(f"No convertor for <{parsed.lower_name}>, skipping token {node.id}")
            return

        convertor.handler(ctx, node, parsed.open_tag_name)

    def convert_tree(self, tree: MarkdownTree, builder: Optional[TreeBuilder] = None) -> TreeBuilder:
        """
        Walk a markdown tree and convert it into a document.

        Paragraphs and table cells become containers, text is added as is and
        HTML tokens go through convert_node. A table cell opens an implicit
        paragraph unless it starts with a list tag, and closes whatever is
        still open inside it when it ends.

        Args:
            tree: Markdown tree to convert
            builder: Builder to drive (a new TreeBuilder if None)

        Returns:
            The builder, with all cells and paragraphs of the tree closed
        """
        builder = builder if builder is not None else TreeBuilder()
        ctx = self.create_context(tree, builder)

        for node, entering in tree.walk():
            if node.type is MdNodeType.DOCUMENT:
                continue

            if node.type is MdNodeType.PARAGRAPH:
                if entering:
                    builder.open_node(NodeType.PARAGRAPH)
                else:
                    builder.close_node()
            elif node.type is MdNodeType.TABLE_CELL:
                if entering:
                    builder.open_node(NodeType.TABLE_CELL)
                    children = tree.children(node)
                    if children and not is_list_node(children[0]):
                        builder.open_node(NodeType.PARAGRAPH)
                else:
                    while builder.current_type is not NodeType.TABLE_CELL:
                        builder.close_node()
                    builder.close_node()
            elif node.type is MdNodeType.TEXT:
                builder.add_text(node.literal or "")
            else:
                self.convert_node(ctx, node)

        logger.debug(f"Converted {len(tree)} markdown nodes into {len(builder.operations)} operations")
        return builder
