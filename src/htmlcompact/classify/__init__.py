"""Generated-identifier classification."""

from .identifier import classify, filter_classes, is_word_like, split_segments

__all__ = [
    "classify",
    "filter_classes",
    "is_word_like",
    "split_segments",
]
