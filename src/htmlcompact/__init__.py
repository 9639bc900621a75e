"""
htmlcompact - Compress HTML into a compact, LLM-friendly form.

Usage:
    from htmlcompact import CompressConfig, ProfileName, compress_html

    config = CompressConfig(profile=ProfileName.AGGRESSIVE)
    result = compress_html(html, config)
    print(f"Reduction: {result.reduction_percent:.1f}%")
"""

__version__ = "1.0.0"

from .classify import classify, is_word_like
from .core.compressor import Compressor, compress_html
from .dedup import ElementSignature, badge_key, deduplicate, extract_badges, signature
from .models.config import (
    AttributeConfig,
    ClassifierConfig,
    CleanupConfig,
    CompressConfig,
    DedupConfig,
    ProfileName,
    StripConfig,
    TruncationConfig,
)
from .models.stats import CompressResult, DedupReport

__all__ = [
    "__version__",
    # Core
    "Compressor",
    "compress_html",
    # Engines
    "classify",
    "is_word_like",
    "ElementSignature",
    "signature",
    "extract_badges",
    "badge_key",
    "deduplicate",
    # Config
    "CompressConfig",
    "ProfileName",
    "ClassifierConfig",
    "DedupConfig",
    "StripConfig",
    "AttributeConfig",
    "TruncationConfig",
    "CleanupConfig",
    # Results
    "CompressResult",
    "DedupReport",
]
