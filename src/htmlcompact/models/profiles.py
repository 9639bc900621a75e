"""Built-in configuration profiles for common use cases."""

from __future__ import annotations

from typing import Any

from .config import CompressConfig, ProfileName

PROFILES: dict[ProfileName, dict[str, Any]] = {
    ProfileName.AGGRESSIVE: {
        # Smallest output for tight context windows
        "dedup": {
            "min_repeat_count": 2,
        },
        "truncation": {
            "max_url_length": 40,
            "max_text_length": 120,
        },
        "attributes": {
            "keep_data_attributes": [],
        },
    },
    ProfileName.MINIMAL: {
        # Only strip scripts/styles and whitespace, like a plain minifier
        "dedup": {
            "enabled": False,
        },
        "attributes": {
            "drop_generated_identifiers": False,
        },
        "truncation": {
            "max_url_length": None,
            "max_text_length": None,
        },
        "cleanup": {
            "remove_empty": False,
        },
    },
    ProfileName.BALANCED: {
        # No overrides - use explicit config
    },
}


def apply_profile(config: CompressConfig) -> CompressConfig:
    """
    Apply profile defaults to config, preserving user overrides.

    Profile values override Pydantic defaults, but fields the user set
    explicitly take precedence over profile values.

    Args:
        config: The configuration with a profile specified

    Returns:
        A new CompressConfig with profile defaults applied

    Example:
        >>> config = CompressConfig(profile=ProfileName.AGGRESSIVE)
        >>> apply_profile(config).dedup.min_repeat_count
        2
    """
    profile_overrides = PROFILES.get(config.profile, {})
    if not profile_overrides:
        return config

    config_dict = config.model_dump()
    explicit = config.model_dump(exclude_unset=True)

    def deep_update(base: dict, overrides: dict) -> dict:
        """
        Deep update base dict with overrides.

        For nested dicts, recursively merge. For other values, override.
        """
        result = base.copy()
        for key, override_value in overrides.items():
            if key in result and isinstance(result[key], dict) and isinstance(override_value, dict):
                result[key] = deep_update(result[key], override_value)
            else:
                result[key] = override_value
        return result

    merged = deep_update(deep_update(config_dict, profile_overrides), explicit)
    return CompressConfig.model_validate(merged)
