from typing import List

from rich.segment import Segment

from branchline import TreeNode


class RecordingContent:
    """Content stub that records the width budget it was given."""

    def __init__(self, *lines: str) -> None:
        self.lines = list(lines) or [""]
        self.widths: List[int] = []

    def render_lines(self, max_width: int) -> List[List[Segment]]:
        self.widths.append(max_width)
        return [[Segment(line)] for line in self.lines]


def build_chain(depth: int) -> TreeNode:
    root = TreeNode("0")
    current = root
    for level in range(1, depth):
        current = current.add_node(str(level))
    return root


def text_of(segments: List[Segment]) -> List[str]:
    return "".join(segment.text for segment in segments).split("\n")[:-1]
