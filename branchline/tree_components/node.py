from typing import Any, List, Union

from .content import Content, to_content

NodeItem = Union["TreeNode", Content, str, Any]


class TreeNode:
    def __init__(self, content: NodeItem, expanded: bool = True) -> None:
        self.content: Content = to_content(content)
        self.children: List["TreeNode"] = []
        self.expanded = expanded

    def __repr__(self) -> str:
        return f"TreeNode({self.content!r}, children={len(self.children)})"

    @property
    def nodes(self) -> List["TreeNode"]:
        return self.children

    def add_node(self, item: NodeItem) -> "TreeNode":
        node = item if isinstance(item, TreeNode) else TreeNode(item)
        self.children.append(node)
        return node

    def add_nodes(self, *items: NodeItem) -> List["TreeNode"]:
        return [self.add_node(item) for item in items]

    def expand(self, expanded: bool = True) -> "TreeNode":
        self.expanded = expanded
        return self

    def collapse(self) -> "TreeNode":
        return self.expand(False)
