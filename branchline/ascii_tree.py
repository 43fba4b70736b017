from .tree_components import (
    Content,
    GuidePart,
    GuideSet,
    Markup,
    Measurement,
    RenderEngine,
    RenderResult,
    RichContent,
    Tree,
    TreeNode,
    measure,
)

__all__ = [
    "Tree",
    "TreeNode",
    "GuidePart",
    "GuideSet",
    "Content",
    "Markup",
    "RichContent",
    "RenderEngine",
    "RenderResult",
    "Measurement",
    "measure",
]
