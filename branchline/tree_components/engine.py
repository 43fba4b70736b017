import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional, Set

from rich.segment import Segment
from rich.style import Style

from ..errors import StructuralCycleError
from .content import Content, RichContent
from .core import GuidePart, GuideSet
from .node import TreeNode
from .segment import cell_len, cell_width

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    segments: List[Segment] = field(default_factory=list)
    width: int = 0

    @property
    def lines(self) -> List[str]:
        text = "".join(segment.text for segment in self.segments)
        return text.split("\n")[:-1] if text else []


class RenderEngine:
    """Flattens a node graph into decorated, wrapped lines.

    Traversal uses an explicit stack of sibling queues plus a parallel stack
    of guide parts, one per open depth, so deep trees never touch the
    interpreter's recursion limit. The first prefix entry belongs to the
    synthetic root and is never drawn.
    """

    def __init__(
        self,
        guide: Optional[GuideSet] = None,
        style: Optional[Style] = None,
        safe: bool = False,
    ) -> None:
        self.guide = guide or GuideSet()
        self.style = style or Style.null()
        self.safe = safe

    def _glyphs(self) -> Dict[GuidePart, Segment]:
        return {part: Segment(self.guide.resolve(part, self.safe), self.style) for part in GuidePart}

    def _content_lines(self, content: Content, max_width: int) -> List[List[Segment]]:
        if self.safe and isinstance(content, RichContent):
            return content.render_lines(max_width, ascii_only=True)
        return content.render_lines(max_width)

    def render(self, root: TreeNode, max_width: int) -> RenderResult:
        logger.debug(
            "Rendering tree (max_width=%s, guide=%s, safe=%s)",
            max_width,
            self.guide.name,
            self.safe,
        )
        result = RenderResult()
        glyphs = self._glyphs()
        glyph_widths = {part: cell_len(glyph.text) for part, glyph in glyphs.items()}
        visited: Set[TreeNode] = set()
        line_count = 0

        frontier: List[Deque[TreeNode]] = [deque([root])]
        levels: List[GuidePart] = [GuidePart.CONTINUE]

        while frontier:
            siblings = frontier.pop()
            if not siblings:
                levels.pop()
                if levels:
                    levels[-1] = GuidePart.FORK
                continue

            is_last_child = len(siblings) == 1
            current = siblings.popleft()
            if current in visited:
                logger.warning("Cycle detected at %r, aborting render", current)
                raise StructuralCycleError("Cycle detected in tree - unable to render.")
            visited.add(current)
            frontier.append(siblings)

            if is_last_child:
                levels[-1] = GuidePart.END

            prefix = levels[1:]
            prefix_width = sum(glyph_widths[part] for part in prefix)
            lines = self._content_lines(current.content, max_width - prefix_width)

            for index, line in enumerate(lines):
                result.segments.extend(glyphs[part] for part in prefix)
                result.segments.extend(line)
                result.segments.append(Segment.line())
                line_count += 1
                line_width = sum(glyph_widths[part] for part in prefix) + cell_width(line)
                result.width = max(result.width, line_width)

                if index == 0 and prefix:
                    prefix[-1] = GuidePart.SPACE if is_last_child else GuidePart.CONTINUE

            if current.expanded and current.children:
                levels[-1] = GuidePart.SPACE if is_last_child else GuidePart.CONTINUE
                levels.append(GuidePart.END if len(current.children) == 1 else GuidePart.FORK)
                frontier.append(deque(current.children))

        logger.debug("Rendered %d lines, width=%d", line_count, result.width)
        return result
