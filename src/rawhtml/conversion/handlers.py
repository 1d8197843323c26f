"""Convertors from literal-HTML tokens to document builder operations."""

import logging
from typing import Optional

from ..fragment.soup import extract_attribute, first_element, serialize, stamp_raw_html, text_content
from ..models.document import Mark, MarkType, NodeType
from ..models.tree import MdNode, MdNodeType
from .context import ConversionContext
from .dispatch import Convertor, ConvertorKind, Handler, create_convertors
from .predicates import get_list_item_attrs, has_parent_type, is_list_node, is_text

logger = logging.getLogger(__name__)


def get_text_without_trailing_newline(text: str) -> str:
    """Strip exactly one trailing newline, if present."""
    return text[:-1] if text.endswith("\n") else text


def _stamped_markup(ctx: ConversionContext, html: str) -> str:
    fragment = ctx.fragment_parser.parse(html)
    return serialize(stamp_raw_html(fragment, ctx.config.fragment.raw_html_attribute))


def _in_table_cell(ctx: ConversionContext, node: MdNode) -> bool:
    return has_parent_type(ctx.tree, node, MdNodeType.TABLE_CELL)


def mark_pair(mark_type: MarkType) -> Handler:
    """Create a convertor that opens mark_type on an open tag and closes it on a close tag."""

    def convert(ctx: ConversionContext, node: MdNode, open_tag_name: Optional[str]) -> None:
        if open_tag_name:
            ctx.builder.open_mark(Mark(mark_type, {"rawHTML": open_tag_name}))
        else:
            ctx.builder.close_mark(mark_type)

    convert.__name__ = f"convert_{mark_type.value}"
    return convert


def convert_link(ctx: ConversionContext, node: MdNode, open_tag_name: Optional[str]) -> None:
    if open_tag_name:
        link_url = extract_attribute(ctx.fragment_parser, node.literal or "", "href")
        ctx.builder.open_mark(
            Mark(
                MarkType.LINK,
                {"linkUrl": ctx.sanitizer(link_url), "rawHTML": open_tag_name},
            )
        )
    else:
        ctx.builder.close_mark(MarkType.LINK)


def convert_image(ctx: ConversionContext, node: MdNode, open_tag_name: Optional[str]) -> None:
    """Insert an image node. Images without a src are dropped without a trace."""
    if not open_tag_name:
        return

    tag = node.literal or ""
    image_url = extract_attribute(ctx.fragment_parser, tag, "src")
    if not image_url:
        logger.debug(f"Dropping image without src: {tag!r}")
        return

    attrs = {"rawHTML": open_tag_name, "imageUrl": ctx.sanitizer(image_url)}
    alt_text = extract_attribute(ctx.fragment_parser, tag, "alt")
    if alt_text:
        attrs["altText"] = alt_text

    ctx.builder.add_node(NodeType.IMAGE, attrs)


def convert_thematic_break(ctx: ConversionContext, node: MdNode, open_tag_name: Optional[str]) -> None:
    if open_tag_name:
        ctx.builder.add_node(NodeType.THEMATIC_BREAK, {"rawHTML": open_tag_name})


def convert_line_break(ctx: ConversionContext, node: MdNode, open_tag_name: Optional[str]) -> None:
    """
    Split or terminate the surrounding block at a bare <br>.

    In a paragraph, a previous sibling opens a new paragraph and a next
    sibling closes the current container. In a table cell, text before the
    break closes the current container and text after it opens a paragraph.
    Anywhere else the break is ignored.
    """
    tree, builder = ctx.tree, ctx.builder
    prev, next_ = tree.prev(node), tree.next(node)

    if has_parent_type(tree, node, MdNodeType.PARAGRAPH):
        if prev is not None:
            builder.open_node(NodeType.PARAGRAPH)
        if next_ is not None:
            builder.close_node()
    elif _in_table_cell(ctx, node):
        if is_text(prev):
            builder.close_node()
        if is_text(next_):
            builder.open_node(NodeType.PARAGRAPH)


def convert_delegated_block(ctx: ConversionContext, node: MdNode, open_tag_name: Optional[str]) -> None:
    """Hand an opaque block of HTML to the builder's fragment ingestion."""
    ctx.builder.ingest_fragment(_stamped_markup(ctx, node.literal or ""), True)


def convert_code_block(ctx: ConversionContext, node: MdNode, open_tag_name: Optional[str]) -> None:
    if not open_tag_name:
        return

    pre = first_element(ctx.fragment_parser.parse(node.literal or ""))
    code = first_element(pre) if pre is not None else None
    source = code if code is not None else pre
    literal = text_content(source) if source is not None else ""

    ctx.builder.open_node(NodeType.CODE_BLOCK, {"rawHTML": open_tag_name})
    ctx.builder.add_text(get_text_without_trailing_newline(literal))
    ctx.builder.close_node()


def convert_list(ctx: ConversionContext, node: MdNode, open_tag_name: Optional[str]) -> None:
    # Only inside table cells do <ul>/<ol> arrive as separate inline tokens
    if not _in_table_cell(ctx, node):
        convert_delegated_block(ctx, node, open_tag_name)
        return

    tree, builder = ctx.tree, ctx.builder

    if open_tag_name:
        prev = tree.prev(node)
        if prev is not None and not is_list_node(prev):
            builder.close_node()

        list_type = NodeType.BULLET_LIST if open_tag_name.lower() == "ul" else NodeType.ORDERED_LIST
        builder.open_node(list_type, {"rawHTML": open_tag_name})
    else:
        builder.close_node()

        next_ = tree.next(node)
        if next_ is not None and not is_list_node(next_):
            builder.open_node(NodeType.PARAGRAPH)


def convert_list_item(ctx: ConversionContext, node: MdNode, open_tag_name: Optional[str]) -> None:
    if not _in_table_cell(ctx, node):
        convert_delegated_block(ctx, node, open_tag_name)
        return

    tree, builder = ctx.tree, ctx.builder
    prev = tree.prev(node)

    if open_tag_name:
        attrs = get_list_item_attrs(node.literal or "", ctx.config.lists)

        if prev is not None and not is_list_node(prev):
            builder.close_node()

        builder.open_node(NodeType.LIST_ITEM, {"rawHTML": open_tag_name, **attrs})

        next_ = tree.next(node)
        if next_ is not None and not is_list_node(next_):
            builder.open_node(NodeType.PARAGRAPH)
    else:
        # Close the implicit paragraph opened for the item's text
        if prev is not None and not is_list_node(prev):
            builder.close_node()

        builder.close_node()


CONVERTOR_DECLARATIONS: dict[str, Convertor] = {
    "b, strong": Convertor(ConvertorKind.MARK_PAIR, mark_pair(MarkType.STRONG)),
    "i, em": Convertor(ConvertorKind.MARK_PAIR, mark_pair(MarkType.EMPH)),
    "s, del": Convertor(ConvertorKind.MARK_PAIR, mark_pair(MarkType.STRIKE)),
    "code": Convertor(ConvertorKind.MARK_PAIR, mark_pair(MarkType.CODE)),
    "a": Convertor(ConvertorKind.MARK_PAIR, convert_link),
    "img": Convertor(ConvertorKind.LEAF_NODE, convert_image),
    "hr": Convertor(ConvertorKind.LEAF_NODE, convert_thematic_break),
    "br": Convertor(ConvertorKind.CONTEXT_SENSITIVE, convert_line_break),
    "h1, h2, h3, h4, h5, h6, blockquote, table, thead, tbody, tr, td, th": Convertor(
        ConvertorKind.DELEGATED_BLOCK, convert_delegated_block
    ),
    "pre": Convertor(ConvertorKind.LEAF_NODE, convert_code_block),
    "ul, ol": Convertor(ConvertorKind.CONTEXT_SENSITIVE, convert_list),
    "li": Convertor(ConvertorKind.CONTEXT_SENSITIVE, convert_list_item),
}

DEFAULT_CONVERTORS = create_convertors(CONVERTOR_DECLARATIONS)
