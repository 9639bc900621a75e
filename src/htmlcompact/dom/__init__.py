"""Document tree helpers."""

from .nodes import class_list, collapse_whitespace, full_text, own_text
from .traversal import Visitor, element_children, iter_elements, walk

__all__ = [
    # Traversal
    "Visitor",
    "element_children",
    "iter_elements",
    "walk",
    # Node accessors
    "class_list",
    "collapse_whitespace",
    "full_text",
    "own_text",
]
