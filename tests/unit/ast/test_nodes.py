#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_nodes.py
"""Unit tests for AST node construction and navigation."""

from __future__ import annotations

import pytest

from markhtml.ast import (
    NODE_TYPES,
    BlockQuote,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HorizontalRule,
    Image,
    Link,
    List,
    ListItem,
    Paragraph,
    Text,
)
from markhtml.ast.nodes import is_block_node
from markhtml.renderers.html import HtmlRenderer


@pytest.mark.unit
class TestParentLinks:
    """Test parent back-references."""

    def test_children_linked_on_construction(self) -> None:
        """Test that containers link their children."""
        text = Text("a")
        para = Paragraph(children=[text])
        doc = Document(children=[para])
        assert text.parent is para
        assert para.parent is doc
        assert doc.parent is None

    def test_link_parents_after_mutation(self) -> None:
        """Test relinking after appending to a child list."""
        para = Paragraph(children=[])
        doc = Document(children=[para])
        late = Text("late")
        para.children.append(late)
        assert late.parent is None
        doc.link_parents()
        assert late.parent is para


@pytest.mark.unit
class TestSiblings:
    """Test sibling and first-child navigation."""

    def test_first_child(self) -> None:
        """Test first_child on containers and leaves."""
        first = Text("x")
        para = Paragraph(children=[first, Text("y")])
        assert para.first_child is first
        assert Paragraph().first_child is None
        assert first.first_child is None

    def test_previous_and_next(self) -> None:
        """Test neighbours in the middle and at the edges."""
        a, b, c = Text("a"), Text("b"), Text("c")
        Paragraph(children=[a, b, c])
        assert a.previous_sibling is None
        assert b.previous_sibling is a
        assert b.next_sibling is c
        assert c.next_sibling is None

    def test_equal_siblings_are_distinguished(self) -> None:
        """Test that identity, not equality, locates a node among siblings."""
        first, second = Text("same"), Text("same")
        Paragraph(children=[first, second])
        assert first == second
        assert first.previous_sibling is None
        assert second.previous_sibling is first

    def test_root_has_no_siblings(self) -> None:
        """Test navigation on a parentless node."""
        doc = Document()
        assert doc.previous_sibling is None
        assert doc.next_sibling is None

    def test_siblings_after_insert_at_front(self) -> None:
        """Test that recorded positions are refreshed after an in-place insert."""
        a, b = Text("a"), Text("b")
        para = Paragraph(children=[a, b])
        front = Text("front")
        para.children.insert(0, front)
        para.link_parents()
        assert a.previous_sibling is front
        assert front.next_sibling is a
        assert b.previous_sibling is a

    def test_siblings_after_unlinked_insert(self) -> None:
        """Test that lookups stay correct even without relinking."""
        a, b = Text("a"), Text("b")
        para = Paragraph(children=[a, b])
        para.children.insert(1, Text("mid"))
        assert b.previous_sibling is para.children[1]
        assert a.next_sibling is para.children[1]


class _CountingList(list):
    """List that counts how often it is iterated."""

    iterations = 0

    def __iter__(self):
        _CountingList.iterations += 1
        return super().__iter__()


@pytest.mark.unit
class TestSiblingLookupCost:
    """Test that sibling lookup does not rescan the parent's children."""

    @pytest.mark.parametrize("count", [10, 1000, 5000])
    def test_render_iterates_children_a_fixed_number_of_times(self, count: int) -> None:
        """Test that rendering N siblings iterates the child list independently of N."""
        paragraphs = _CountingList(Paragraph(children=[Text("x")]) for _ in range(count))
        doc = Document(children=paragraphs)
        _CountingList.iterations = 0
        html = HtmlRenderer().render_to_string(doc)
        assert html.count("<p>x</p>") == count
        # one walk over the document; no per-node scans
        assert _CountingList.iterations <= 2

    def test_neighbour_lookup_uses_recorded_position(self) -> None:
        """Test that every node in a long run finds its neighbours without a rescan."""
        paragraphs = _CountingList(Paragraph() for _ in range(2000))
        Document(children=paragraphs)
        _CountingList.iterations = 0
        for index, para in enumerate(paragraphs):
            expected = paragraphs[index - 1] if index else None
            assert para.previous_sibling is expected
        assert _CountingList.iterations == 1  # the enumerate above


@pytest.mark.unit
class TestNodeKinds:
    """Test node kind metadata."""

    def test_container_flags(self) -> None:
        """Test that only containers report is_container."""
        assert Document.is_container
        assert Image.is_container
        assert not Text.is_container
        assert not CodeBlock.is_container

    def test_node_type_set(self) -> None:
        """Test the closed set of node kinds."""
        assert len(NODE_TYPES) == 24
        assert BlockQuote in NODE_TYPES
        assert Emphasis in NODE_TYPES

    def test_footnote_reference_flag(self) -> None:
        """Test that a nonzero note id marks a footnote reference."""
        assert Link("note", note_id=2).is_footnote_reference
        assert not Link("https://example.com").is_footnote_reference

    @pytest.mark.parametrize(
        "node,expected",
        [
            (Paragraph(), True),
            (Heading(level=1), True),
            (List(), True),
            (CodeBlock("x"), True),
            (HorizontalRule(), True),
            (BlockQuote(), True),
            (ListItem(), False),
            (Text("x"), False),
            (None, False),
        ],
    )
    def test_is_block_node(self, node, expected: bool) -> None:
        """Test block classification used for paragraph spacing."""
        assert is_block_node(node) is expected
