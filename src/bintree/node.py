"""Node - a single vertex stored in a Tree arena.

This module provides:
- KEY_MIN / KEY_MAX: Bounds of the unsigned 32-bit key domain
- ChildSide: Which child slot of a parent a node occupies
- Node: Key plus optional arena indices of its two children
- validate_key: Key-domain check used by Tree on insertion
- InvalidNodeError / SlotOccupiedError: Arena precondition violations
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

KEY_MIN = 0
KEY_MAX = 2**32 - 1


class ChildSide(Enum):
    """Child slot of a parent node."""

    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def from_flag(cls, is_left: bool) -> ChildSide:
        """Map the boolean form used by Tree.add_node to a side."""
        return cls.LEFT if is_left else cls.RIGHT


@dataclass(frozen=True)
class Node:
    """A vertex in the tree arena.

    Nodes are frozen: the Tree rewires a parent by storing a replaced copy.
    Children are referenced by index into the owning Tree's node list,
    never by object. An index is only meaningful for the Tree that
    assigned it.

    Attributes:
        key: Unsigned 32-bit key.
        left: Arena index of the left child, None if absent.
        right: Arena index of the right child, None if absent.
    """

    key: int
    left: int | None = None
    right: int | None = None

    @property
    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return self.left is None and self.right is None

    def child(self, side: ChildSide) -> int | None:
        """Return the index stored in the given slot."""
        if side is ChildSide.LEFT:
            return self.left
        return self.right


def validate_key(key: object, strict: bool = True) -> int:
    """Check that key belongs to the key domain.

    Args:
        key: Candidate key.
        strict: If True, enforce the unsigned 32-bit range. Otherwise any
            non-negative integer is accepted.

    Returns:
        The key, unchanged.

    Raises:
        TypeError: If key is not an int (bool is rejected too).
        ValueError: If key is outside the accepted range.
    """
    if isinstance(key, bool) or not isinstance(key, int):
        raise TypeError(f"Key must be an int, got {type(key).__name__}")
    if key < KEY_MIN:
        raise ValueError(f"Key {key} is negative")
    if strict and key > KEY_MAX:
        raise ValueError(f"Key {key} exceeds {KEY_MAX}")
    return key


class InvalidNodeError(IndexError):
    """An index that does not refer to a node of the arena."""


class SlotOccupiedError(ValueError):
    """An attachment that targets a child slot already holding a node."""
