"""Per-subtree results produced by the bottom-up tree analyses.

Each analysis folds a tree from the leaves up, carrying a small record per
subtree so no subtree is visited twice.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BstSummary:
    """BST verdict and key extrema for one subtree.

    Attributes:
        is_bst: True if the subtree satisfies the strict BST property.
        min_key: Smallest key in the subtree, None for an absent subtree.
        max_key: Largest key in the subtree, None for an absent subtree.
    """

    is_bst: bool
    min_key: int | None = None
    max_key: int | None = None


@dataclass(frozen=True)
class PathSummary:
    """Path sums for one subtree.

    Attributes:
        downward: Best sum of a path that starts at the subtree root and
            descends without branching.
        best: Best sum of any path inside the subtree, allowed to branch
            once at its topmost node.
    """

    downward: int = 0
    best: int = 0


ABSENT_BST = BstSummary(is_bst=True)
ABSENT_PATH = PathSummary()
