"""Pipeline steps for compression operations."""

from .attributes import AttributeStep
from .cleanup import CleanupStep
from .dedup import DedupStep
from .parse import ParseStep
from .serialize import SerializeStep, collapse_html_whitespace
from .strip import StripStep
from .truncate import TruncateStep, truncate_text, truncate_url

__all__ = [
    "AttributeStep",
    "CleanupStep",
    "DedupStep",
    "ParseStep",
    "SerializeStep",
    "StripStep",
    "TruncateStep",
    "collapse_html_whitespace",
    "truncate_text",
    "truncate_url",
]
