"""Classification of class/id tokens as generated or developer-authored.

Build tools, CSS-in-JS libraries and client-side frameworks stamp elements
with identifiers such as ``css-1n7v3ny``, ``ember1234`` or
``Button_primary__3xKz9``. These carry no meaning for a reader of the page
and only cost tokens. Hand-written identifiers (``video-title``,
``is-active``) describe what an element is and are worth keeping.

The classifier is a heuristic: rules are evaluated in order and the first
match decides.
"""

import logging
import re
from collections.abc import Iterable
from typing import Optional

from ..models.config import ClassifierConfig

logger = logging.getLogger(__name__)

DEFAULT_CLASSIFIER_CONFIG = ClassifierConfig()

VOWELS = frozenset("aeiouy")

_SEGMENT_SPLIT_RE = re.compile(r"[-_]+")
_NUMBERED_GROUPS_RE = re.compile(r"^[a-z][a-z0-9]*(?:_\d+){2,}$", re.IGNORECASE)
_NUMERIC_RE = re.compile(r"^(?:\d+|[a-z]\d+|\d+[a-z])$", re.IGNORECASE)
_LETTERS_THEN_DIGITS_RE = re.compile(r"[a-z]+\d{3,}", re.IGNORECASE)
_HEX_RUN_RE = re.compile(r"[0-9a-f]{8,}", re.IGNORECASE)
_REPEATED_CHAR_RE = re.compile(r"(.)\1\1")
_CONSONANT_RUN_RE = re.compile(r"[bcdfghjklmnpqrstvwxz]{4,}")


def split_segments(token: str) -> list[str]:
    """Split an identifier on '-' and '_' into non-empty segments."""
    return [segment for segment in _SEGMENT_SPLIT_RE.split(token) if segment]


def is_word_like(segment: str) -> bool:
    """
    Check whether a segment looks like a human word rather than a hash.

    A word-like segment has at least two characters, no more digits than
    letters, at least one vowel, no character repeated three times in a row
    and no run of four or more consonants.

    Args:
        segment: A single identifier segment (no delimiters)

    Returns:
        True if the segment reads like a word
    """
    lowered = segment.lower()
    if len(lowered) < 2:
        return False

    letters = sum(1 for c in lowered if c.isalpha())
    digits = sum(1 for c in lowered if c.isdigit())
    if digits > letters:
        return False

    if not any(c in VOWELS for c in lowered):
        return False

    if _REPEATED_CHAR_RE.search(lowered):
        return False

    return not _CONSONANT_RUN_RE.search(lowered)


def _has_hex_run(token: str) -> bool:
    # Plain words made of a-f letters ("deadbeef") are not hashes
    return any(any(c.isdigit() for c in run) for run in _HEX_RUN_RE.findall(token))


def classify(token: str, config: Optional[ClassifierConfig] = None) -> bool:
    """
    Decide whether a class token or id value was machine-generated.

    Args:
        token: One already-split class token, or an id value
        config: Classifier word lists, patterns and thresholds

    Returns:
        True if the token looks generated, False if it looks authored

    Example:
        >>> classify("css-1a2b3c")
        True
        >>> classify("video-title")
        False
    """
    config = config or DEFAULT_CLASSIFIER_CONFIG
    token = token.strip()
    if not token:
        return False

    if token.lower() in config.semantic_set:
        return False

    for pattern in config.compiled_patterns:
        if pattern.search(token):
            return True

    suffix_match = config.hash_suffix_pattern.search(token)
    if suffix_match and not is_word_like(suffix_match.group(1)):
        return True

    if _NUMBERED_GROUPS_RE.match(token):
        return True

    if _NUMERIC_RE.match(token):
        return True

    words = split_segments(token)
    if len(words) > config.max_segments:
        return True

    if _LETTERS_THEN_DIGITS_RE.search(token) or _has_hex_run(token):
        return True

    if len(words) > config.min_words_for_ratio:
        word_like = sum(1 for word in words if is_word_like(word))
        if word_like / len(words) < config.min_word_like_ratio:
            return True

    return False


def filter_classes(tokens: Iterable[str], config: Optional[ClassifierConfig] = None) -> list[str]:
    """
    Keep only the authored tokens of a class list, in their original order.

    Args:
        tokens: Class tokens (already split on whitespace)
        config: Classifier configuration

    Returns:
        Tokens judged developer-authored
    """
    kept = []
    for token in tokens:
        if classify(token, config):
            logger.debug(f"Dropping generated class: {token}")
        else:
            kept.append(token)
    return kept
