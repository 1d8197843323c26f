"""Integration tests for HtmlConverter with the reference builder."""

import logging

from conftest import paragraph_with, table_cell_with
from rawhtml.conversion import Convertor, ConvertorKind, HtmlConverter, TreeBuilder, create_convertors
from rawhtml.models import ConverterConfig, FragmentConfig, MarkType, MdNodeType, NodeType

INLINE = MdNodeType.HTML_INLINE
BLOCK = MdNodeType.HTML_BLOCK
TEXT = MdNodeType.TEXT


class TestConvertNode:
    """Tests for HtmlConverter.convert_node."""

    def test_non_tag_literal_is_skipped(self, converter, tree, caplog):
        """Test that a literal without a leading tag produces nothing."""
        node = tree.add_node(BLOCK, "<!-- a comment -->")
        builder = TreeBuilder()

        with caplog.at_level(logging.DEBUG, logger="rawhtml.conversion.converter"):
            converter.convert_node(converter.create_context(tree, builder), node)

        assert builder.operations == []
        assert "No HTML tag" in caplog.text

    def test_unknown_tag_is_skipped(self, converter, tree):
        """Test that tags without a convertor produce nothing."""
        _, (node,) = paragraph_with(tree, (INLINE, "<marquee>"))
        builder = TreeBuilder()

        converter.convert_node(converter.create_context(tree, builder), node)

        assert builder.operations == []

    def test_injected_convertors(self, tree):
        """Test that the converter uses the table it was given."""
        seen = []
        table = create_convertors(
            {"x-widget": Convertor(ConvertorKind.LEAF_NODE, lambda ctx, node, name: seen.append(name))}
        )
        converter = HtmlConverter(convertors=table)
        _, (open_node, close_node) = paragraph_with(tree, (INLINE, "<X-Widget>"), (INLINE, "</x-widget>"))
        ctx = converter.create_context(tree, TreeBuilder())

        converter.convert_node(ctx, open_node)
        converter.convert_node(ctx, close_node)

        assert seen == ["X-Widget", None]
        assert converter.convertors is table


class TestConvertTree:
    """Tests for HtmlConverter.convert_tree."""

    def test_overlapping_marks(self, converter, tree):
        """Test that marks opened by one token stay open across siblings."""
        paragraph_with(
            tree,
            (INLINE, "<b>"),
            (TEXT, "bold "),
            (INLINE, "<i>"),
            (TEXT, "both"),
            (INLINE, "</b>"),
            (TEXT, " italic"),
            (INLINE, "</i>"),
        )

        doc = converter.convert_tree(tree).finish()

        texts = doc.content[0].content
        assert [node.text for node in texts] == ["bold ", "both", " italic"]
        assert [sorted(mark.type.value for mark in node.marks) for node in texts] == [
            ["strong"],
            ["emph", "strong"],
            ["emph"],
        ]
        assert texts[0].marks[0].attrs == {"rawHTML": "b"}

    def test_link_and_image(self, converter, tree):
        """Test a link wrapping an image."""
        paragraph_with(
            tree,
            (INLINE, '<a href="/docs">'),
            (INLINE, '<img src="logo.png" alt="Logo">'),
            (INLINE, "</a>"),
        )

        doc = converter.convert_tree(tree).finish()

        image = doc.content[0].content[0]
        assert image.type is NodeType.IMAGE
        assert image.attrs == {"rawHTML": "img", "imageUrl": "logo.png", "altText": "Logo"}
        assert image.marks[0].type is MarkType.LINK
        assert image.marks[0].attrs["linkUrl"] == "/docs"

    def test_line_break_is_balanced(self, converter, tree):
        """Test that a paragraph split leaves the builder balanced."""
        paragraph_with(tree, (TEXT, "a"), (INLINE, "<br>"), (TEXT, "b"))

        builder = converter.convert_tree(tree)

        assert builder.depth == 0
        assert builder.operation_names() == [
            "open_node",
            "add_text",
            "open_node",
            "close_node",
            "add_text",
            "close_node",
        ]

    def test_list_in_table_cell(self, converter, tree):
        """Test text, a list and more text inside one table cell."""
        table_cell_with(
            tree,
            (TEXT, "before"),
            (INLINE, "<ul>"),
            (INLINE, "<li data-task>"),
            (TEXT, "item"),
            (INLINE, "</li>"),
            (INLINE, "</ul>"),
            (TEXT, "after"),
        )

        builder = converter.convert_tree(tree)
        doc = builder.finish()

        assert builder.depth == 0
        assert doc.to_dict() == {
            "type": "doc",
            "content": [
                {
                    "type": "tableCell",
                    "content": [
                        {"type": "paragraph", "content": [{"type": "text", "text": "before"}]},
                        {
                            "type": "bulletList",
                            "attrs": {"rawHTML": "ul"},
                            "content": [
                                {
                                    "type": "listItem",
                                    "attrs": {"rawHTML": "li", "task": True, "checked": False},
                                    "content": [
                                        {"type": "paragraph", "content": [{"type": "text", "text": "item"}]}
                                    ],
                                }
                            ],
                        },
                        {"type": "paragraph", "content": [{"type": "text", "text": "after"}]},
                    ],
                }
            ],
        }

    def test_cell_starting_with_list(self, converter, tree):
        """Test that a cell starting with a list gets no leading paragraph."""
        table_cell_with(
            tree,
            (INLINE, "<ol>"),
            (INLINE, "<li>"),
            (TEXT, "one"),
            (INLINE, "</li>"),
            (INLINE, "</ol>"),
        )

        doc = converter.convert_tree(tree).finish()

        cell = doc.content[0]
        assert [child.type for child in cell.content] == [NodeType.ORDERED_LIST]

    def test_line_break_in_table_cell(self, converter, tree):
        """Test that a break in a cell yields two paragraphs."""
        table_cell_with(tree, (TEXT, "a"), (INLINE, "<br>"), (TEXT, "b"))

        doc = converter.convert_tree(tree).finish()

        cell = doc.content[0]
        assert [child.type for child in cell.content] == [NodeType.PARAGRAPH, NodeType.PARAGRAPH]
        assert [child.content[0].text for child in cell.content] == ["a", "b"]

    def test_blocks(self, converter, tree):
        """Test delegated blocks, code blocks and rules at document level."""
        tree.add_node(BLOCK, "<h2>Heading</h2>")
        tree.add_node(BLOCK, "<pre><code>x = 1\n</code></pre>")
        tree.add_node(BLOCK, "<hr>")

        doc = converter.convert_tree(tree).finish()

        fragment, code_block, rule = doc.content
        assert fragment.type is NodeType.HTML_FRAGMENT
        assert 'data-raw-html="h2"' in fragment.attrs["html"]
        assert code_block.type is NodeType.CODE_BLOCK
        assert code_block.content[0].text == "x = 1"
        assert rule.type is NodeType.THEMATIC_BREAK

    def test_custom_marker_attribute(self, tree):
        """Test that the configured marker attribute is used."""
        config = ConverterConfig(fragment=FragmentConfig(raw_html_attribute="data-origin"))
        tree.add_node(BLOCK, "<blockquote>q</blockquote>")

        doc = HtmlConverter(config=config).convert_tree(tree).finish()

        assert 'data-origin="blockquote"' in doc.content[0].attrs["html"]

    def test_each_pass_gets_its_own_builder(self, converter, tree):
        """Test that repeated passes do not share builder state."""
        paragraph_with(tree, (INLINE, "<b>"), (TEXT, "x"))

        first = converter.convert_tree(tree)
        second = converter.convert_tree(tree)

        assert first is not second
        assert len(first.operations) == len(second.operations)
