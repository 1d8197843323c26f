"""Shared fixtures for rawhtml tests."""

import logging

import pytest
from rawhtml.conversion import HtmlConverter
from rawhtml.models import MarkdownTree, MdNodeType


@pytest.fixture(autouse=True)
def reset_rawhtml_logger():
    """Undo setup_logging() so later tests can capture records."""
    yield
    logger = logging.getLogger("rawhtml")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def converter():
    """Converter with default collaborators."""
    return HtmlConverter()


@pytest.fixture
def tree():
    """Empty markdown tree."""
    return MarkdownTree()


def add_children(tree, parent, *children):
    """Append (type, literal) pairs under parent and return the new nodes."""
    nodes = []
    for node_type, literal in children:
        nodes.append(tree.add_node(node_type, literal, parent=parent))
    return nodes


def paragraph_with(tree, *children):
    """Build a paragraph holding the given (type, literal) children."""
    para = tree.add_node(MdNodeType.PARAGRAPH)
    return para, add_children(tree, para, *children)


def table_cell_with(tree, *children):
    """Build a table cell holding the given (type, literal) children."""
    cell = tree.add_node(MdNodeType.TABLE_CELL)
    return cell, add_children(tree, cell, *children)
