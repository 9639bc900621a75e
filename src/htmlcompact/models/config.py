"""Pydantic configuration models for htmlcompact."""

import re
from enum import Enum
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, PrivateAttr


class ProfileName(str, Enum):
    """Built-in configuration profiles."""

    BALANCED = "balanced"
    AGGRESSIVE = "aggressive"
    MINIMAL = "minimal"


# Common developer-authored class/id words. An exact (case-insensitive)
# match is never treated as generated.
DEFAULT_SEMANTIC_WORDS = [
    "active",
    "alert",
    "app",
    "article",
    "avatar",
    "badge",
    "banner",
    "body",
    "bottom",
    "breadcrumb",
    "btn",
    "button",
    "card",
    "center",
    "checkbox",
    "clearfix",
    "close",
    "col",
    "collapse",
    "column",
    "container",
    "content",
    "dialog",
    "disabled",
    "dropdown",
    "error",
    "expanded",
    "field",
    "footer",
    "form",
    "grid",
    "header",
    "hidden",
    "hero",
    "icon",
    "image",
    "img",
    "info",
    "input",
    "item",
    "label",
    "large",
    "layout",
    "left",
    "link",
    "list",
    "logo",
    "main",
    "menu",
    "modal",
    "nav",
    "navbar",
    "open",
    "overlay",
    "page",
    "pagination",
    "panel",
    "primary",
    "price",
    "right",
    "row",
    "search",
    "secondary",
    "section",
    "selected",
    "sidebar",
    "small",
    "status",
    "success",
    "tab",
    "table",
    "tabs",
    "tag",
    "text",
    "thumbnail",
    "title",
    "toggle",
    "toolbar",
    "tooltip",
    "top",
    "visible",
    "warning",
    "wrapper",
]

# Class/id shapes emitted by CSS-in-JS libraries, scoped styles, template
# engines, runtime id generators and bundlers.
DEFAULT_FRAMEWORK_PATTERNS = [
    r"^css-(?=[a-z]*\d)[a-z0-9]{5,}(?:-[a-z0-9]+)*$",  # emotion
    r"^sc-[a-z0-9]{4,}(?:-\d+)?$",  # styled-components
    r"^jsx-\d+$",  # styled-jsx
    r"^svelte-[a-z0-9]{4,}$",  # svelte scoped styles
    r"^data-v-[a-f0-9]{6,}$",  # vue scoped styles
    r"^_?ng(?:content|host)-[a-z0-9-]+$",  # angular content/host markers
    r"^ng-tns-c\d+-\d+$",  # angular animations
    r"^ember\d+$",  # ember view ids
    r"^:r[a-z0-9]+:$",  # react useId
    r"^react-select-\d+",  # react-select runtime ids
    r"^mui-\d+$",  # material-ui runtime ids
    r"^radix-:?[a-z0-9]+:?",  # radix ui
    r"^headlessui-[a-z-]+-\d+$",  # headless ui
    r"^[a-z][a-z0-9]*_[a-z0-9-]+__[a-z0-9_-]{5}$",  # css modules
    r"^__next[a-z0-9_-]*$",  # next.js internals
    r"^_(?=[a-z]*\d)[a-z0-9]{5,}$",  # webpack/vite hashed prefixes
]


class ClassifierConfig(BaseModel):
    """Configuration for the generated-identifier classifier."""

    semantic_words: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SEMANTIC_WORDS),
        description="Words that are always treated as developer-authored",
    )
    framework_patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FRAMEWORK_PATTERNS),
        description="Regular expressions matching framework-generated identifiers",
    )
    hash_suffix_min_length: int = Field(6, ge=1, description="Minimum length of a hash-like suffix")
    max_segments: int = Field(6, ge=1, description="More '-'/'_' segments than this is utility-class soup")
    min_word_like_ratio: float = Field(
        0.3,
        ge=0,
        le=1,
        description="Minimum share of word-like segments for multi-word identifiers",
    )
    min_words_for_ratio: int = Field(
        2,
        ge=0,
        description="The word-like ratio only applies above this many words",
    )

    model_config = {"extra": "forbid"}

    _semantic: frozenset = PrivateAttr(default=frozenset())
    _compiled: tuple = PrivateAttr(default=())
    _hash_suffix: Optional[re.Pattern] = PrivateAttr(default=None)

    def model_post_init(self, __context: object) -> None:
        """Precompute the lookup set and compiled patterns."""
        self._semantic = frozenset(word.lower() for word in self.semantic_words)
        self._compiled = tuple(re.compile(p, re.IGNORECASE) for p in self.framework_patterns)
        self._hash_suffix = re.compile(rf"[-_]([a-z0-9]{{{self.hash_suffix_min_length},}})$", re.IGNORECASE)

    @property
    def semantic_set(self) -> frozenset:
        """Lower-cased semantic allow-list."""
        return self._semantic

    @property
    def compiled_patterns(self) -> tuple:
        """Framework patterns compiled case-insensitively."""
        return self._compiled

    @property
    def hash_suffix_pattern(self) -> re.Pattern:
        """Delimiter followed by a suffix of at least ``hash_suffix_min_length`` characters."""
        return self._hash_suffix


class DedupConfig(BaseModel):
    """Configuration for structural deduplication of repeated siblings."""

    enabled: bool = Field(True, description="Collapse repeated sibling subtrees")
    min_repeat_count: int = Field(3, ge=2, description="Minimum group size before collapsing")
    signature_max_children: int = Field(5, ge=0, description="Children inspected per signature")
    signature_max_classes: int = Field(3, ge=0, description="Classes kept per child in a signature")
    badge_max_length: int = Field(60, ge=2, description="Badge strings must be shorter than this")
    fallback_text_max_length: int = Field(
        40,
        ge=2,
        description="Full-text fallback must be shorter than this",
    )
    badge_attributes: list[str] = Field(
        default_factory=lambda: ["aria-label", "title", "placeholder"],
        description="Attributes whose values count as badges",
    )
    badge_class_words: list[str] = Field(
        default_factory=lambda: [
            "badge",
            "label",
            "tag",
            "chip",
            "status",
            "indicator",
            "pill",
            "flag",
            "ribbon",
            "overlay",
        ],
        description="Class words marking an element whose own text is a badge",
    )
    interactive_tags: list[str] = Field(
        default_factory=lambda: ["button", "link", "input", "select", "option"],
        description="Tags whose own text is a badge",
    )
    marker_style: Literal["comment", "text"] = Field(
        "comment",
        description="Node type used for the summary marker",
    )

    model_config = {"extra": "forbid"}


class StripConfig(BaseModel):
    """Configuration for removing non-content nodes."""

    tags: list[str] = Field(
        default_factory=lambda: ["script", "style", "noscript", "template", "svg", "iframe", "link", "meta"],
        description="Tags removed together with their subtree",
    )
    remove_comments: bool = Field(True, description="Remove HTML comments")

    model_config = {"extra": "forbid"}


class AttributeConfig(BaseModel):
    """Configuration for attribute filtering."""

    keep_attributes: list[str] = Field(
        default_factory=lambda: [
            "id",
            "class",
            "href",
            "src",
            "alt",
            "title",
            "name",
            "type",
            "value",
            "placeholder",
            "role",
            "aria-label",
            "for",
            "action",
            "method",
            "colspan",
            "rowspan",
        ],
        description="Attributes kept on every element",
    )
    keep_data_attributes: list[str] = Field(
        default_factory=lambda: ["data-testid"],
        description="data-* attributes kept despite not being in keep_attributes",
    )
    drop_generated_identifiers: bool = Field(
        True,
        description="Drop class tokens and ids the classifier judges generated",
    )

    model_config = {"extra": "forbid"}


class TruncationConfig(BaseModel):
    """Configuration for shortening long URLs and text runs."""

    max_url_length: Optional[int] = Field(80, ge=10, description="Longest href/src kept verbatim")
    max_text_length: Optional[int] = Field(300, ge=10, description="Longest text node kept verbatim")
    ellipsis: str = Field("…", description="Suffix appended to truncated values")

    model_config = {"extra": "forbid"}


class CleanupConfig(BaseModel):
    """Configuration for empty-element cleanup."""

    remove_empty: bool = Field(True, description="Remove elements with no text and no children")
    max_passes: int = Field(10, ge=1, description="Upper bound on cleanup passes")
    keep_empty_tags: list[str] = Field(
        default_factory=lambda: [
            "img",
            "input",
            "br",
            "hr",
            "button",
            "select",
            "textarea",
            "video",
            "audio",
            "canvas",
            "source",
            "td",
            "th",
            "area",
        ],
        description="Tags kept even when empty",
    )

    model_config = {"extra": "forbid"}


class CompressConfig(BaseModel):
    """
    Root configuration model for htmlcompact.

    Example:
        config = CompressConfig(
            profile=ProfileName.AGGRESSIVE,
            dedup=DedupConfig(min_repeat_count=2),
        )

    YAML format:
        profile: aggressive
        dedup:
          min_repeat_count: 4
        truncation:
          max_url_length: 60
    """

    profile: ProfileName = Field(
        ProfileName.BALANCED,
        description="Built-in profile to apply (balanced, aggressive, minimal)",
    )

    classifier: ClassifierConfig = Field(default_factory=ClassifierConfig)
    dedup: DedupConfig = Field(default_factory=DedupConfig)
    strip: StripConfig = Field(default_factory=StripConfig)
    attributes: AttributeConfig = Field(default_factory=AttributeConfig)
    truncation: TruncationConfig = Field(default_factory=TruncationConfig)
    cleanup: CleanupConfig = Field(default_factory=CleanupConfig)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "WARNING",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(None, description="Log file path")

    model_config = {"extra": "forbid"}

    def to_yaml(self) -> str:
        """Serialize config to YAML string."""
        import yaml

        return yaml.dump(self.model_dump(mode="json", exclude_none=True), default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "CompressConfig":
        """Load config from YAML string."""
        import yaml

        data = yaml.safe_load(yaml_str) or {}
        return cls.model_validate(data)

    @classmethod
    def from_yaml_file(cls, path: Path) -> "CompressConfig":
        """Load config from YAML file."""
        return cls.from_yaml(path.read_text(encoding="utf-8"))
