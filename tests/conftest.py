import pytest

from branchline import Tree


@pytest.fixture
def sample_tree() -> Tree:
    tree = Tree("A")
    tree.add_node("B")
    tree.add_node("C").add_node("D")
    return tree


@pytest.fixture
def chain_tree() -> Tree:
    tree = Tree("A")
    tree.add_node("B").add_node("C")
    return tree
