"""Tests for the reference TreeBuilder."""

import pytest
from rawhtml.conversion import TreeBuilder
from rawhtml.errors import BuilderStateError
from rawhtml.models import Mark, MarkType, NodeType


class TestTreeBuilder:
    """Tests for TreeBuilder."""

    def test_nodes_nest(self):
        """Test that close_node closes the most recently opened node."""
        builder = TreeBuilder()
        builder.open_node(NodeType.BULLET_LIST, {"rawHTML": "ul"})
        builder.open_node(NodeType.LIST_ITEM)
        builder.add_text("a")
        builder.close_node()

        assert builder.current_type is NodeType.BULLET_LIST
        builder.close_node()

        doc = builder.finish()
        assert doc.to_dict() == {
            "type": "doc",
            "content": [
                {
                    "type": "bulletList",
                    "attrs": {"rawHTML": "ul"},
                    "content": [{"type": "listItem", "content": [{"type": "text", "text": "a"}]}],
                }
            ],
        }

    def test_marks_compose(self):
        """Test that marks can close in any order."""
        builder = TreeBuilder()
        builder.open_mark(Mark(MarkType.STRONG, {"rawHTML": "b"}))
        builder.open_mark(Mark(MarkType.EMPH, {"rawHTML": "i"}))
        builder.add_text("both")
        builder.close_mark(MarkType.STRONG)
        builder.add_text("emph")
        builder.close_mark(MarkType.EMPH)
        builder.add_text("plain")

        both, emph, plain = builder.root.content
        assert {mark.type for mark in both.marks} == {MarkType.STRONG, MarkType.EMPH}
        assert [mark.type for mark in emph.marks] == [MarkType.EMPH]
        assert plain.marks == ()

    def test_leaf_nodes_carry_marks(self):
        """Test that leaf nodes record the marks open at insertion."""
        builder = TreeBuilder()
        builder.open_mark(Mark(MarkType.LINK, {"linkUrl": "/x", "rawHTML": "a"}))
        builder.add_node(NodeType.IMAGE, {"imageUrl": "a.png"})

        assert builder.root.content[0].marks == (Mark(MarkType.LINK, {"linkUrl": "/x", "rawHTML": "a"}),)

    def test_close_unopened_mark_is_ignored(self):
        """Test that closing a mark that is not open does nothing."""
        builder = TreeBuilder()
        builder.close_mark(MarkType.CODE)

        assert builder.active_marks == ()

    def test_close_root_raises(self):
        """Test that closing with nothing open raises."""
        builder = TreeBuilder()

        with pytest.raises(BuilderStateError):
            builder.close_node()

    def test_records_operations(self):
        """Test that every call is recorded."""
        builder = TreeBuilder()
        builder.open_node(NodeType.PARAGRAPH)
        builder.add_text("x")
        builder.ingest_fragment("<h1>T</h1>", True)
        builder.close_node()

        assert builder.operation_names() == ["open_node", "add_text", "ingest_fragment", "close_node"]
        assert str(builder.operations[1]) == "add_text('x')"

    def test_ingest_fragment_appends_node(self):
        """Test that ingested markup is kept as an htmlFragment node."""
        builder = TreeBuilder()
        builder.ingest_fragment('<h1 data-raw-html="h1">T</h1>', True)

        node = builder.root.content[0]
        assert node.type is NodeType.HTML_FRAGMENT
        assert node.attrs == {"html": '<h1 data-raw-html="h1">T</h1>', "block": True}

    def test_finish_closes_open_nodes(self):
        """Test that finish closes everything still open."""
        builder = TreeBuilder()
        builder.open_node(NodeType.TABLE_CELL)
        builder.open_node(NodeType.PARAGRAPH)

        builder.finish()

        assert builder.depth == 0
