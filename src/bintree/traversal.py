"""Bottom-up folds over a node arena.

An analysis is expressed as a ``visit`` function that combines a node with
the summaries of its two subtrees, plus the summary used for an absent
child. ``fold`` drives it from the leaves to the requested root using one
of two strategies:

- "recursive": direct recursion, depth bounded by the interpreter's
  recursion limit
- "iterative": explicit-stack post-order walk, no depth limit
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence, TypeVar

from bintree.node import InvalidNodeError, Node

logger = logging.getLogger(__name__)

T = TypeVar("T")

Visit = Callable[[Node, T, T], T]

RECURSIVE = "recursive"
ITERATIVE = "iterative"
TRAVERSAL_STRATEGIES = (RECURSIVE, ITERATIVE)


def lookup(nodes: Sequence[Node], index: int) -> Node:
    """Return the node at index.

    Raises:
        InvalidNodeError: If index is not an int or is outside the arena.
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidNodeError(f"Node index must be an int, got {type(index).__name__}")
    if not 0 <= index < len(nodes):
        raise InvalidNodeError(f"Node '{index}' not found")
    return nodes[index]


def fold(
    nodes: Sequence[Node],
    root: int,
    visit: Visit[T],
    absent: T,
    strategy: str = RECURSIVE,
) -> T:
    """Compute the summary of the subtree rooted at ``root``.

    Args:
        nodes: The arena.
        root: Index of the subtree root.
        visit: Combines a node with its left and right summaries.
        absent: Summary standing in for a missing child.
        strategy: "recursive" or "iterative".

    Returns:
        The summary produced by ``visit`` at ``root``.

    Raises:
        ValueError: If strategy is unknown.
        InvalidNodeError: If root or a stored child index is not in the arena.
    """
    if strategy == RECURSIVE:
        return _fold_recursive(nodes, root, visit, absent)
    if strategy == ITERATIVE:
        return _fold_iterative(nodes, root, visit, absent)
    raise ValueError(f"Unknown traversal strategy: {strategy}")


def _fold_recursive(nodes: Sequence[Node], index: int, visit: Visit[T], absent: T) -> T:
    node = lookup(nodes, index)
    left = absent if node.left is None else _fold_recursive(nodes, node.left, visit, absent)
    right = absent if node.right is None else _fold_recursive(nodes, node.right, visit, absent)
    return visit(node, left, right)


def _fold_iterative(nodes: Sequence[Node], root: int, visit: Visit[T], absent: T) -> T:
    # Each index is pushed twice: once to expand its children, once to
    # combine their summaries after both have been computed.
    results: dict[int, T] = {}
    stack: list[tuple[int, bool]] = [(root, False)]
    while stack:
        index, expanded = stack.pop()
        node = lookup(nodes, index)
        if expanded:
            left = absent if node.left is None else results.pop(node.left)
            right = absent if node.right is None else results.pop(node.right)
            results[index] = visit(node, left, right)
            continue
        stack.append((index, True))
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, False))
    return results[root]
