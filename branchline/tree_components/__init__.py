from .core import GuidePart, GuideSet
from .content import Content, Markup, RichContent
from .node import TreeNode
from .engine import RenderEngine, RenderResult
from .measurement import Measurement, measure
from .tree import Tree

__all__ = [
    "GuidePart",
    "GuideSet",
    "Content",
    "Markup",
    "RichContent",
    "TreeNode",
    "RenderEngine",
    "RenderResult",
    "Measurement",
    "measure",
    "Tree",
]
