"""Structural deduplication of repeated sibling elements."""

from .badges import NO_BADGE_KEY, badge_key, extract_badges
from .engine import GroupPlan, StructuralDeduplicator, deduplicate, describe, format_marker
from .signature import ElementSignature, signature

__all__ = [
    # Signatures
    "ElementSignature",
    "signature",
    # Badges
    "NO_BADGE_KEY",
    "badge_key",
    "extract_badges",
    # Engine
    "GroupPlan",
    "StructuralDeduplicator",
    "deduplicate",
    "describe",
    "format_marker",
]
