#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/ast/walk.py
"""Entering/exiting tree walk used by the renderers.

The walk visits nodes in document order. Container nodes are reported twice,
once on descent and once on ascent; leaf nodes are reported once. The
callback steers the walk through its :class:`WalkStatus` return value:

- ``GO_TO_NEXT`` continues normally (``None`` is treated the same way)
- ``SKIP_CHILDREN`` skips the subtree; the exit callback is still issued
- ``TERMINATE`` stops the walk; the container just entered still receives
  its exit callback, its ancestors do not

Render hooks report whether they handled a node with :class:`Handled` or
:data:`NOT_HANDLED` rather than a bare boolean.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Optional, Union

from markhtml.ast.nodes import Node


class WalkStatus(Enum):
    """Control signal returned by walk callbacks."""

    GO_TO_NEXT = "go_to_next"
    SKIP_CHILDREN = "skip_children"
    TERMINATE = "terminate"


@dataclass(frozen=True)
class Handled:
    """Hook result: the hook rendered the node; honor ``status``."""

    status: WalkStatus = WalkStatus.GO_TO_NEXT


class NotHandled:
    """Hook result: fall through to the default renderer."""

    _instance: Optional[NotHandled] = None

    def __new__(cls) -> NotHandled:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_HANDLED"


NOT_HANDLED = NotHandled()

HookResult = Union[Handled, NotHandled]
WalkFunc = Callable[[Node, bool], Optional[WalkStatus]]


def walk(node: Node, visit: WalkFunc) -> WalkStatus:
    """Walk ``node`` and its descendants, calling ``visit(node, entering)``.

    The traversal keeps its own stack of open containers, so arbitrarily deep
    trees do not hit the interpreter's recursion limit.

    Parameters
    ----------
    node : Node
        Root of the subtree to walk
    visit : callable
        Callback receiving ``(node, entering)`` and returning a WalkStatus
        (or None for GO_TO_NEXT)

    Returns
    -------
    WalkStatus
        TERMINATE if the walk was aborted, GO_TO_NEXT otherwise

    """
    open_containers: list[tuple[Node, Iterator[Node]]] = []
    current: Optional[Node] = node

    while True:
        if current is not None:
            status = visit(current, True) or WalkStatus.GO_TO_NEXT
            if status is WalkStatus.TERMINATE:
                if current.is_container:
                    visit(current, False)
                return status
            if current.is_container:
                if status is WalkStatus.SKIP_CHILDREN:
                    if visit(current, False) is WalkStatus.TERMINATE:
                        return WalkStatus.TERMINATE
                else:
                    open_containers.append((current, current.iter_children()))

        if not open_containers:
            return WalkStatus.GO_TO_NEXT

        container, children = open_containers[-1]
        current = next(children, None)
        if current is None:
            open_containers.pop()
            if visit(container, False) is WalkStatus.TERMINATE:
                return WalkStatus.TERMINATE


__all__ = ["WalkStatus", "Handled", "NotHandled", "NOT_HANDLED", "HookResult", "WalkFunc", "walk"]
