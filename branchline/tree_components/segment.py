from typing import Iterable

from rich.segment import Segment
from wcwidth import wcwidth


def char_width(char: str) -> int:
    return max(wcwidth(char), 0)


def cell_len(text: str) -> int:
    return sum(char_width(char) for char in text)


def cell_width(segments: Iterable[Segment]) -> int:
    return sum(cell_len(segment.text) for segment in segments if not segment.control)


def segments_to_text(segments: Iterable[Segment]) -> str:
    return "".join(segment.text for segment in segments if not segment.control)
