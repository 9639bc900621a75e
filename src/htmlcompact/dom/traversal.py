"""Explicit depth-first traversal over BeautifulSoup trees."""

from collections.abc import Iterator
from typing import Callable

from bs4 import Tag

# Visitor called once per element, after all of its descendants
Visitor = Callable[[Tag], None]


def element_children(tag: Tag) -> list[Tag]:
    """Return the element children of a tag, skipping text and comments."""
    return [child for child in tag.children if isinstance(child, Tag)]


def walk(root: Tag, visitor: Visitor) -> int:
    """
    Visit every element under ``root`` (inclusive) bottom-up.

    Elements are visited in post-order: every descendant of a node is
    visited before the node itself, and siblings are visited in document
    order. The visitor may therefore remove children of the node it is
    given; those children have already been visited and nothing below
    them is visited again.

    Args:
        root: Tree (or subtree) to walk
        visitor: Callback invoked with each element

    Returns:
        Number of elements visited
    """
    visited = 0
    # (node, children_pushed)
    stack: list[tuple[Tag, bool]] = [(root, False)]

    while stack:
        node, expanded = stack.pop()
        if expanded:
            visitor(node)
            visited += 1
            continue
        stack.append((node, True))
        stack.extend((child, False) for child in reversed(element_children(node)))

    return visited


def iter_elements(root: Tag) -> Iterator[Tag]:
    """Yield ``root`` and all descendant elements in document order."""
    stack: list[Tag] = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(element_children(node)))
