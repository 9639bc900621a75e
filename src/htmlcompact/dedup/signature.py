"""Bounded structural fingerprints of elements."""

from itertools import islice
from typing import NamedTuple, Optional

from bs4 import Tag

from ..dom import class_list
from ..models.config import DedupConfig

DEFAULT_DEDUP_CONFIG = DedupConfig()


class ElementSignature(NamedTuple):
    """
    Structural fingerprint of one element, ignoring all text.

    Attributes:
        tag: Element tag name
        classes: The element's classes, sorted
        children: ``(tag, classes)`` for the leading element children,
            each child's classes sorted and capped
    """

    tag: str
    classes: tuple[str, ...]
    children: tuple[tuple[str, tuple[str, ...]], ...]


def signature(element: Tag, config: Optional[DedupConfig] = None) -> ElementSignature:
    """
    Build the structural signature of an element.

    Only the first ``signature_max_children`` element children are looked
    at, and only ``signature_max_classes`` of each child's sorted classes,
    so the cost does not depend on how large the subtree is. Two elements
    with equal signatures are interchangeable for deduplication.

    Args:
        element: Element to fingerprint
        config: Deduplication configuration (caps)

    Returns:
        ElementSignature for the element
    """
    config = config or DEFAULT_DEDUP_CONFIG
    max_children = config.signature_max_children
    max_classes = config.signature_max_classes

    summary = []
    leading = (child for child in element.children if isinstance(child, Tag))
    for child in islice(leading, max_children):
        summary.append((child.name, tuple(sorted(class_list(child))[:max_classes])))

    return ElementSignature(
        tag=element.name,
        classes=tuple(sorted(class_list(element))),
        children=tuple(summary),
    )
