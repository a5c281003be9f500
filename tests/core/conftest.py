"""Pytest fixtures for core tests."""

import pytest


@pytest.fixture
def empty_tree():
    """Create a tree with no nodes."""
    from bintree import Tree

    return Tree()


@pytest.fixture
def single_node_tree():
    """Create a tree holding only the root key 10."""
    from bintree import Tree

    return Tree.with_root(10)


@pytest.fixture
def balanced_bst():
    """Seven-node valid BST rooted at 10."""
    from tests.core.tree_test_helpers import BALANCED_BST, build_tree

    return build_tree(10, BALANCED_BST)


@pytest.fixture(params=["recursive", "iterative"])
def config(request):
    """TreeConfig for each traversal strategy."""
    from bintree import TreeConfig

    return TreeConfig(traversal=request.param)
