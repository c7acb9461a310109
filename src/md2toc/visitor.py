"""Depth-first traversal of a markdown syntax tree.

Callbacks steer the walk by returning a :class:`VisitAction`. Returning
``None`` is the same as ``VisitAction.CONTINUE``.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Collection

from markdown_it.tree import SyntaxTreeNode


class VisitAction(Enum):
    """Instruction returned by a visitor callback."""

    CONTINUE = "continue"
    SKIP_CHILDREN = "skip-children"
    STOP = "stop"


Visitor = Callable[[SyntaxTreeNode], "VisitAction | None"]


def walk(
    node: SyntaxTreeNode,
    visitor: Visitor,
    *,
    types: Collection[str] | None = None,
) -> VisitAction:
    """Visit ``node`` and its descendants in document order.

    Args:
        node: Node to start from; it is visited itself.
        visitor: Callback invoked for each matching node.
        types: If given, only nodes whose ``type`` is in this collection are
            passed to ``visitor``; other nodes are descended into.

    Returns:
        ``VisitAction.STOP`` if a callback stopped the walk, otherwise
        ``VisitAction.CONTINUE``.
    """
    action = VisitAction.CONTINUE
    if types is None or node.type in types:
        action = visitor(node) or VisitAction.CONTINUE

    if action is VisitAction.STOP:
        return VisitAction.STOP
    if action is VisitAction.SKIP_CHILDREN:
        return VisitAction.CONTINUE

    for child in node.children:
        if walk(child, visitor, types=types) is VisitAction.STOP:
            return VisitAction.STOP
    return VisitAction.CONTINUE
