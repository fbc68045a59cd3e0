#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_walk.py
"""Unit tests for the entering/exiting tree walk."""

from __future__ import annotations

import sys

import pytest

from markhtml.ast import NOT_HANDLED, Document, Emphasis, Handled, NotHandled, Paragraph, Text, WalkStatus, walk


def _label(node) -> str:
    return getattr(node, "literal", type(node).__name__)


def _sample() -> Document:
    return Document(
        children=[
            Paragraph(children=[Text("a"), Emphasis(children=[Text("b")]), Text("c")]),
            Paragraph(children=[Text("d")]),
        ]
    )


@pytest.mark.unit
class TestWalkOrder:
    """Test event order."""

    def test_full_walk(self) -> None:
        """Test that containers get enter and exit events, leaves one event."""
        events = []
        walk(_sample(), lambda node, entering: events.append((_label(node), entering)))
        assert events == [
            ("Document", True),
            ("Paragraph", True),
            ("a", True),
            ("Emphasis", True),
            ("b", True),
            ("Emphasis", False),
            ("c", True),
            ("Paragraph", False),
            ("Paragraph", True),
            ("d", True),
            ("Paragraph", False),
            ("Document", False),
        ]

    def test_none_means_continue(self) -> None:
        """Test that a callback returning None walks everything."""
        assert walk(_sample(), lambda node, entering: None) is WalkStatus.GO_TO_NEXT


@pytest.mark.unit
class TestWalkControl:
    """Test skip and terminate signals."""

    def test_skip_children_still_exits(self) -> None:
        """Test that a skipped container still receives its exit event."""
        events = []

        def visit(node, entering):
            events.append((_label(node), entering))
            if isinstance(node, Emphasis) and entering:
                return WalkStatus.SKIP_CHILDREN
            return WalkStatus.GO_TO_NEXT

        walk(_sample(), visit)
        assert ("b", True) not in events
        assert events.index(("Emphasis", True)) + 1 == events.index(("Emphasis", False))

    def test_terminate_on_leaf(self) -> None:
        """Test that terminating at a leaf skips every remaining exit."""
        events = []

        def visit(node, entering):
            events.append((_label(node), entering))
            return WalkStatus.TERMINATE if _label(node) == "b" else None

        assert walk(_sample(), visit) is WalkStatus.TERMINATE
        assert events[-1] == ("b", True)
        assert ("Emphasis", False) not in events

    def test_terminate_on_container_entry(self) -> None:
        """Test that the container being entered still gets its exit event."""
        events = []

        def visit(node, entering):
            events.append((_label(node), entering))
            if isinstance(node, Emphasis) and entering:
                return WalkStatus.TERMINATE
            return None

        assert walk(_sample(), visit) is WalkStatus.TERMINATE
        assert events[-2:] == [("Emphasis", True), ("Emphasis", False)]
        assert ("Paragraph", False) not in events
        assert ("Document", False) not in events

    def test_terminate_on_container_exit(self) -> None:
        """Test that terminating on an exit event stops before the ancestors exit."""
        events = []

        def visit(node, entering):
            events.append((_label(node), entering))
            if isinstance(node, Emphasis) and not entering:
                return WalkStatus.TERMINATE
            return None

        assert walk(_sample(), visit) is WalkStatus.TERMINATE
        assert events[-1] == ("Emphasis", False)
        assert ("c", True) not in events


def _nest(depth: int) -> Document:
    node = Paragraph(children=[Text("deep")])
    for _ in range(depth):
        node = Emphasis(children=[node])
    return Document(children=[node])


@pytest.mark.unit
class TestDeepTrees:
    """Test walking trees deeper than the interpreter recursion limit."""

    def test_deep_nesting_walks_every_level(self) -> None:
        """Test that every level is entered and exited in order."""
        depth = sys.getrecursionlimit() * 3
        events = []
        walk(_nest(depth), lambda node, entering: events.append(entering))
        # Document, depth Emphasis nodes and the Paragraph each enter and exit; Text once
        assert len(events) == 2 * (depth + 2) + 1
        assert events[: depth + 3] == [True] * (depth + 3)
        assert events[depth + 3 :] == [False] * (depth + 2)

    def test_deep_nesting_terminate(self) -> None:
        """Test terminating at the innermost leaf of a deep tree."""
        depth = sys.getrecursionlimit() * 3
        seen = []

        def visit(node, entering):
            seen.append(node)
            return WalkStatus.TERMINATE if isinstance(node, Text) else None

        assert walk(_nest(depth), visit) is WalkStatus.TERMINATE
        assert isinstance(seen[-1], Text)
        assert len(seen) == depth + 3


@pytest.mark.unit
class TestHookResults:
    """Test hook result values."""

    def test_not_handled_singleton(self) -> None:
        """Test that NotHandled has a single instance."""
        assert NotHandled() is NOT_HANDLED
        assert repr(NOT_HANDLED) == "NOT_HANDLED"

    def test_handled_default_status(self) -> None:
        """Test the default status of Handled."""
        assert Handled().status is WalkStatus.GO_TO_NEXT
        assert Handled(WalkStatus.SKIP_CHILDREN).status is WalkStatus.SKIP_CHILDREN
