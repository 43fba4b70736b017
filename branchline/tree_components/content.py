"""Node content: anything that can wrap itself into lines of segments.

Two implementations ship with the package. ``Markup`` handles the
``[bold red]text[/bold red]`` inline syntax and ``RichContent`` adapts any
rich renderable (tables, panels, ``Text``).
"""

import io
from typing import List, Optional, Protocol, Tuple, Union, runtime_checkable

from rich.console import Console
from rich.errors import StyleSyntaxError
from rich.segment import Segment
from rich.style import Style

from .segment import char_width

Token = Tuple[str, str, int]
Line = List[Segment]


@runtime_checkable
class Content(Protocol):
    def render_lines(self, max_width: int) -> List[Line]:
        ...


def _close_tag(active_tags: List[str], name: str) -> bool:
    """Pop the innermost open tag called ``name`` (any tag when empty)."""
    if not active_tags:
        return False
    if not name:
        active_tags.pop()
        return True
    for idx in range(len(active_tags) - 1, -1, -1):
        if active_tags[idx] == name:
            active_tags.pop(idx)
            return True
    return False


class Markup:

    def __init__(self, text: str, style: Optional[Union[str, Style]] = None) -> None:
        self.text = text
        self.style = Style.parse(style) if isinstance(style, str) else style

    def __repr__(self) -> str:
        return f"Markup({self.text!r})"

    def _parse_tag(self, tag: str) -> Optional[Style]:
        body = tag[1:-1].strip()
        if not body:
            return None
        try:
            return Style.parse(body)
        except StyleSyntaxError:
            return None

    def _tokenize(self) -> List[Token]:
        tokens: List[Token] = []
        open_tags: List[str] = []
        text = self.text
        i = 0
        length = len(text)
        while i < length:
            char = text[i]
            if char == "[":
                end = text.find("]", i + 1)
                if end != -1:
                    tag = text[i : end + 1]
                    if tag.startswith("[/"):
                        name = tag[2:-1].strip()
                        if _close_tag(open_tags, name):
                            tokens.append(("close", name, 0))
                            i = end + 1
                            continue
                    elif self._parse_tag(tag) is not None:
                        open_tags.append(tag[1:-1].strip())
                        tokens.append(("tag", open_tags[-1], 0))
                        i = end + 1
                        continue
            if char == "\n":
                tokens.append(("newline", char, 0))
            else:
                tokens.append(("text", char, char_width(char)))
            i += 1
        return tokens

    def _wrap_tokens(self, tokens: List[Token], limit: int) -> List[List[Tuple[str, int, Tuple[str, ...]]]]:
        lines: List[List[Tuple[str, int, Tuple[str, ...]]]] = []
        current: List[Tuple[str, int, Tuple[str, ...]]] = []
        line_width = 0
        active_tags: List[str] = []

        def start_new_line():
            nonlocal current, line_width
            lines.append(current)
            current = []
            line_width = 0

        for kind, value, width in tokens:
            if kind == "newline":
                start_new_line()
                continue

            if kind == "tag":
                active_tags.append(value)
                continue

            if kind == "close":
                _close_tag(active_tags, value)
                continue

            if limit > 0 and line_width + width > limit and current:
                start_new_line()
            current.append((value, width, tuple(active_tags)))
            line_width += width

        lines.append(current)
        return lines

    def _line_segments(self, chars: List[Tuple[str, int, Tuple[str, ...]]]) -> Line:
        segments: Line = []
        buffer: List[str] = []
        buffer_tags: Optional[Tuple[str, ...]] = None

        def flush():
            if buffer:
                segments.append(Segment("".join(buffer), self._style_for(buffer_tags or ())))
                buffer.clear()

        for value, _, tags in chars:
            if tags != buffer_tags:
                flush()
                buffer_tags = tags
            buffer.append(value)
        flush()
        return segments

    def _style_for(self, tags: Tuple[str, ...]) -> Optional[Style]:
        styles = [self.style] if self.style else []
        styles.extend(Style.parse(tag) for tag in tags)
        if not styles:
            return None
        return Style.combine(styles)

    def render_lines(self, max_width: int) -> List[Line]:
        wrapped = self._wrap_tokens(self._tokenize(), max_width)
        return [self._line_segments(line) for line in wrapped]


class RichContent:

    def __init__(self, renderable, console: Optional[Console] = None) -> None:
        self.renderable = renderable
        self.console = console or Console(file=io.StringIO(), color_system=None)

    def __repr__(self) -> str:
        return f"RichContent({self.renderable!r})"

    def render_lines(self, max_width: int, ascii_only: bool = False) -> List[Line]:
        options = self.console.options.update_width(max(max_width, 1))
        if ascii_only:
            options.encoding = "ascii"
        lines = self.console.render_lines(self.renderable, options, pad=False)
        return [[segment for segment in line if not segment.control] for line in lines]


def is_renderable(value) -> bool:
    return hasattr(value, "__rich__") or hasattr(value, "__rich_console__")


def to_content(value) -> Content:
    if isinstance(value, str):
        return Markup(value)
    if isinstance(value, Content):
        return value
    if is_renderable(value):
        return RichContent(value)
    raise TypeError(f"Cannot use {type(value).__name__} as tree node content.")
