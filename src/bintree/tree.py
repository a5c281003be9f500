"""Tree - arena-backed binary tree and its bottom-up analyses.

The Tree owns every Node in a single list. Index 0 is the root when the
list is non-empty, and child links are indices into that list. Nodes are
only ever appended, so an index stays valid for the lifetime of the Tree.

Analyses:
- sum: total of all keys
- is_bst: strict binary-search-tree check (duplicates disqualify)
- max_path_sum: best path that may branch once, at its topmost node
"""

from __future__ import annotations

import logging
from dataclasses import replace

from bintree.config import TreeConfig
from bintree.node import ChildSide, InvalidNodeError, Node, SlotOccupiedError, validate_key
from bintree.summaries import ABSENT_BST, ABSENT_PATH, BstSummary, PathSummary
from bintree.traversal import fold, lookup

logger = logging.getLogger(__name__)


def min_of(*values: int | None) -> int | None:
    """Smallest of the given values, skipping None. None if all are None."""
    present = [v for v in values if v is not None]
    return min(present) if present else None


def max_of(*values: int | None) -> int | None:
    """Largest of the given values, skipping None. None if all are None."""
    present = [v for v in values if v is not None]
    return max(present) if present else None


def _sum_visit(node: Node, left: int, right: int) -> int:
    return node.key + left + right


def _bst_visit(node: Node, left: BstSummary, right: BstSummary) -> BstSummary:
    key = node.key
    # An absent subtree carries no bounds and never constrains its parent
    ordered = (left.max_key is None or left.max_key < key) and (
        right.min_key is None or right.min_key > key
    )
    return BstSummary(
        is_bst=left.is_bst and right.is_bst and ordered,
        min_key=min_of(key, left.min_key, right.min_key),
        max_key=max_of(key, left.max_key, right.max_key),
    )


def _path_visit(node: Node, left: PathSummary, right: PathSummary) -> PathSummary:
    key = node.key
    return PathSummary(
        downward=key + max(left.downward, right.downward),
        best=max(left.best, right.best, key + left.downward + right.downward),
    )


class Tree:
    """A binary tree stored as an append-only arena of nodes.

    Example:
        >>> tree = Tree.with_root(5)
        >>> tree.add_node(0, 4, is_left=True)
        1
        >>> tree.add_node(0, 7, is_left=False)
        2
        >>> tree.max_path_sum()
        16
    """

    def __init__(self, config: TreeConfig | None = None) -> None:
        """Create an empty tree.

        Args:
            config: Key validation and traversal settings. Defaults to
                TreeConfig().
        """
        self._config = config or TreeConfig()
        self._nodes: list[Node] = []

    @classmethod
    def empty(cls, config: TreeConfig | None = None) -> Tree:
        """Create a tree with no nodes."""
        return cls(config)

    @classmethod
    def with_root(cls, key: int, config: TreeConfig | None = None) -> Tree:
        """Create a tree holding a single root node with the given key."""
        tree = cls(config)
        tree._nodes.append(Node(validate_key(key, tree._config.strict_keys)))
        return tree

    @property
    def config(self) -> TreeConfig:
        return self._config

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Tree(nodes={len(self._nodes)}, traversal={self._config.traversal!r})"

    @property
    def is_empty(self) -> bool:
        """True if the tree has no nodes."""
        return not self._nodes

    @property
    def root(self) -> int | None:
        """Index of the root node, or None for an empty tree."""
        return None if self.is_empty else 0

    def node(self, index: int) -> Node:
        """Return the node stored at index.

        Raises:
            InvalidNodeError: If index is not in the arena.
        """
        return lookup(self._nodes, index)

    def add_node(self, parent_index: int, key: int, is_left: bool) -> int:
        """Attach a new node as a child of parent_index.

        The new node is the left child of parent_index if is_left is True,
        the right child otherwise. All checks run before the arena is
        touched, so a failed call leaves the tree unchanged.

        Args:
            parent_index: Index of an existing node.
            key: Key of the new node.
            is_left: Which slot of the parent to fill.

        Returns:
            Index of the new node.

        Raises:
            InvalidNodeError: If parent_index does not exist.
            SlotOccupiedError: If the targeted slot already holds a child.
            TypeError: If key is not an int.
            ValueError: If key is outside the key domain.
        """
        try:
            parent = lookup(self._nodes, parent_index)
        except InvalidNodeError:
            raise InvalidNodeError(f"Parent node '{parent_index}' not found") from None

        side = ChildSide.from_flag(is_left)
        existing = parent.child(side)
        if existing is not None:
            raise SlotOccupiedError(
                f"Parent node '{parent_index}' already has a {side.value} child ('{existing}')"
            )
        validate_key(key, self._config.strict_keys)

        child_index = len(self._nodes)
        self._nodes.append(Node(key))
        if side is ChildSide.LEFT:
            self._nodes[parent_index] = replace(parent, left=child_index)
        else:
            self._nodes[parent_index] = replace(parent, right=child_index)

        logger.debug(
            "Attached node %d (key=%d) as %s child of %d",
            child_index,
            key,
            side.value,
            parent_index,
        )
        return child_index

    # Per-subtree helpers

    def subtree_sum(self, index: int) -> int:
        """Sum of the keys in the subtree rooted at index."""
        return fold(self._nodes, index, _sum_visit, 0, self._config.traversal)

    def check_bst(self, index: int) -> BstSummary:
        """BST verdict and key extrema of the subtree rooted at index."""
        return fold(self._nodes, index, _bst_visit, ABSENT_BST, self._config.traversal)

    def max_path(self, index: int) -> PathSummary:
        """Path sums of the subtree rooted at index."""
        return fold(self._nodes, index, _path_visit, ABSENT_PATH, self._config.traversal)

    # Whole-tree analyses

    def sum(self) -> int:
        """Return the sum of all keys in the tree (0 when empty)."""
        if self.is_empty:
            return 0
        return self.subtree_sum(0)

    def is_bst(self) -> bool:
        """Return True if the tree is a strict binary search tree.

        Every key in a left subtree must be strictly smaller than its
        ancestor's key, and every key in a right subtree strictly larger.
        An empty tree is a BST.
        """
        if self.is_empty:
            return True
        return self.check_bst(0).is_bst

    def max_path_sum(self) -> int:
        """Return the maximum path sum of the tree (0 when empty).

        A path may start and end anywhere, but it descends on both sides
        from a single topmost node and never branches again.
        """
        if self.is_empty:
            return 0
        return self.max_path(0).best
