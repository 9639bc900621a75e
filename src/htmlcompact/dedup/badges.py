"""Extraction of short variant strings (badges, labels) from elements.

Repeated siblings often share a structure but differ in a small piece of
content that matters: a "New" ribbon, an "Out of stock" label, the title of
an icon button. Those strings are collected here so the deduplicator can
keep one representative per variant instead of one per structure.
"""

from collections.abc import Iterable
from typing import Optional

from bs4 import Tag

from ..classify import split_segments
from ..dom import class_list, full_text, iter_elements, own_text
from ..models.config import DedupConfig
from .signature import DEFAULT_DEDUP_CONFIG

# Key for elements without any badge. Real keys are never empty because
# every badge has at least one character.
NO_BADGE_KEY = ""

_KEY_SEPARATOR = "\x1f"


def _has_badge_class(tag: Tag, class_words: frozenset) -> bool:
    for token in class_list(tag):
        lowered = token.lower()
        if lowered in class_words:
            return True
        if any(segment in class_words for segment in split_segments(lowered)):
            return True
    return False


def _add_candidate(found: dict[str, None], value: object, max_length: int) -> None:
    if isinstance(value, list):
        value = " ".join(value)
    if not isinstance(value, str):
        return
    value = value.strip()
    if value and len(value) < max_length:
        found.setdefault(value, None)


def extract_badges(element: Tag, config: Optional[DedupConfig] = None) -> list[str]:
    """
    Collect the distinct badge strings of an element and its descendants.

    Candidates are the configured attributes (aria-label, title,
    placeholder) anywhere in the subtree, plus the direct text of nodes
    that carry a badge-like class or are interactive controls. When nothing
    is found, short full text of the element is used instead.

    Args:
        element: Element to scan (the whole subtree is visited)
        config: Deduplication configuration

    Returns:
        Distinct badge strings in the order they were found; may be empty
    """
    config = config or DEFAULT_DEDUP_CONFIG
    max_length = config.badge_max_length
    class_words = frozenset(word.lower() for word in config.badge_class_words)
    interactive = frozenset(tag.lower() for tag in config.interactive_tags)

    found: dict[str, None] = {}
    for node in iter_elements(element):
        for attr in config.badge_attributes:
            _add_candidate(found, node.get(attr), max_length)

        if node.name in interactive or _has_badge_class(node, class_words):
            _add_candidate(found, own_text(node), max_length)

    if found:
        return list(found)

    text = full_text(element)
    if text and len(text) < config.fallback_text_max_length:
        return [text]
    return []


def badge_key(badges: Iterable[str]) -> str:
    """
    Build the canonical grouping key for a badge set.

    Args:
        badges: Badge strings of one element

    Returns:
        Sorted badges joined into one string, or NO_BADGE_KEY if empty
    """
    unique = sorted(set(badges))
    if not unique:
        return NO_BADGE_KEY
    return _KEY_SEPARATOR.join(unique)
