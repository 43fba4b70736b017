from .ascii_tree import *
from .errors import *

__version__ = "0.1.0"
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
    "TreeError",
    "ConfigurationError",
    "StructuralCycleError",
]
