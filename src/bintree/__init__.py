"""
bintree - Arena-backed binary tree with bottom-up analyses

A Tree owns all of its nodes in one list and links children by index.
On top of that it answers three questions in a single post-order pass
each: the sum of all keys, whether the tree is a strict binary search
tree, and the maximum path sum.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("bintree")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from bintree.config import TreeConfig, load_config
from bintree.node import (
    KEY_MAX,
    KEY_MIN,
    ChildSide,
    InvalidNodeError,
    Node,
    SlotOccupiedError,
)
from bintree.summaries import BstSummary, PathSummary
from bintree.tree import Tree

__all__ = [
    "__version__",
    "KEY_MIN",
    "KEY_MAX",
    "ChildSide",
    "Node",
    "Tree",
    "TreeConfig",
    "load_config",
    "BstSummary",
    "PathSummary",
    "InvalidNodeError",
    "SlotOccupiedError",
]
