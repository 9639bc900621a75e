"""htmlcompact configuration and result models."""

from .config import (
    AttributeConfig,
    ClassifierConfig,
    CleanupConfig,
    CompressConfig,
    DedupConfig,
    ProfileName,
    StripConfig,
    TruncationConfig,
)
from .profiles import PROFILES, apply_profile
from .stats import CompressResult, DedupReport

__all__ = [
    # Config
    "AttributeConfig",
    "ClassifierConfig",
    "CleanupConfig",
    "CompressConfig",
    "DedupConfig",
    "ProfileName",
    "StripConfig",
    "TruncationConfig",
    # Results
    "CompressResult",
    "DedupReport",
    # Profiles
    "PROFILES",
    "apply_profile",
]
