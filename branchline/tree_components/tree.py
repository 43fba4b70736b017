import logging
import shutil
from typing import List, Optional, Union

from rich.console import Console, ConsoleOptions, RenderResult as ConsoleRenderResult
from rich.errors import StyleSyntaxError
from rich.measure import Measurement as RichMeasurement
from rich.segment import Segment
from rich.style import Style

from ..errors import ConfigurationError
from .core import GuideSet
from .engine import RenderEngine, RenderResult
from .measurement import Measurement, measure
from .node import NodeItem, TreeNode
from .segment import segments_to_text

logger = logging.getLogger(__name__)


class Tree:
    """Non-circular tree data rendered with branch guides.

    Each node may appear in the tree only once; a node reached a second time
    during render raises ``StructuralCycleError``.
    """

    def __init__(
        self,
        label: NodeItem,
        style: Optional[Union[str, Style]] = None,
        guide: Optional[Union[str, GuideSet]] = None,
        expanded: bool = True,
    ):
        if not isinstance(expanded, bool):
            raise ConfigurationError("expanded must be a boolean value.")
        try:
            self._root = TreeNode(label, expanded=expanded)
        except TypeError as exc:
            raise ConfigurationError("label must be a string, content or rich renderable.") from exc

        self.style = style
        self.guide = guide
        self.width = 0

    @property
    def style(self) -> Optional[Style]:
        return self._style

    @style.setter
    def style(self, value: Optional[Union[str, Style]]) -> None:
        if value is None or isinstance(value, Style):
            self._style = value
            return
        if not isinstance(value, str):
            raise ConfigurationError("style must be a string or Style instance.")
        try:
            self._style = Style.parse(value)
        except StyleSyntaxError as exc:
            raise ConfigurationError(str(exc)) from exc

    @property
    def guide(self) -> GuideSet:
        return self._guide

    @guide.setter
    def guide(self, value: Optional[Union[str, GuideSet]]) -> None:
        if isinstance(value, GuideSet):
            self._guide = value
            return
        style_key = value or "line"
        if not isinstance(style_key, str):
            raise ConfigurationError("guide must be a string or GuideSet instance.")
        try:
            self._guide = GuideSet.for_style(style_key)
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc

    @property
    def root(self) -> TreeNode:
        return self._root

    @property
    def nodes(self) -> List[TreeNode]:
        return self._root.children

    @property
    def expanded(self) -> bool:
        return self._root.expanded

    @expanded.setter
    def expanded(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise ConfigurationError("expanded must be a boolean value.")
        self._root.expanded = value

    def add_node(self, item: NodeItem) -> TreeNode:
        try:
            return self._root.add_node(item)
        except TypeError as exc:
            raise ConfigurationError(str(exc)) from exc

    def add_nodes(self, *items: NodeItem) -> List[TreeNode]:
        return [self.add_node(item) for item in items]

    def _engine(self, safe: bool) -> RenderEngine:
        return RenderEngine(self.guide, style=self.style, safe=safe)

    def render_result(self, max_width: Optional[int] = None, *, safe: bool = False) -> RenderResult:
        if max_width is None:
            max_width = shutil.get_terminal_size(fallback=(80, 24)).columns
            logger.debug("No max_width given, using terminal width %d", max_width)
        result = self._engine(safe).render(self._root, max_width)
        self.width = result.width
        return result

    def render(self, max_width: Optional[int] = None, *, safe: bool = False) -> List[Segment]:
        return self.render_result(max_width, safe=safe).segments

    def render_text(self, max_width: Optional[int] = None, *, safe: bool = False) -> str:
        text = segments_to_text(self.render(max_width, safe=safe))
        return text[:-1] if text.endswith("\n") else text

    def measure(self, max_width: int) -> Measurement:
        return measure(self.width, max_width)

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> ConsoleRenderResult:
        yield from self.render(options.max_width, safe=options.ascii_only)

    def __rich_measure__(self, console: Console, options: ConsoleOptions) -> RichMeasurement:
        minimum, maximum = self.measure(options.max_width)
        return RichMeasurement(minimum, maximum)

    def __str__(self) -> str:
        return self.render_text()

    def __repr__(self) -> str:
        return f"Tree({self._root.content!r}, nodes={len(self.nodes)})"
