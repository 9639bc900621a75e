"""Result and statistics models for compression runs."""

from dataclasses import dataclass, field


@dataclass
class DedupReport:
    """
    Counters for one deduplication run over a document tree.

    Attributes:
        containers_visited: Elements whose children were evaluated
        groups_collapsed: Structural groups that lost at least one member
        elements_removed: Elements deleted from the tree
        markers_inserted: Summary markers added to the tree
    """

    containers_visited: int = 0
    groups_collapsed: int = 0
    elements_removed: int = 0
    markers_inserted: int = 0

    def to_dict(self) -> dict:
        """Convert report to dictionary for serialization."""
        return {
            "containers_visited": self.containers_visited,
            "groups_collapsed": self.groups_collapsed,
            "elements_removed": self.elements_removed,
            "markers_inserted": self.markers_inserted,
        }


@dataclass
class CompressResult:
    """
    Outcome of compressing one HTML document.

    Example:
        result = compress_html(html)
        print(f"Reduction: {result.reduction_percent:.1f}%")
    """

    html: str
    original_length: int
    compressed_length: int
    stats: dict = field(default_factory=dict)

    @property
    def reduction_percent(self) -> float:
        """Share of characters removed, as a percentage."""
        if self.original_length == 0:
            return 0.0
        return ((self.original_length - self.compressed_length) / self.original_length) * 100

    def to_dict(self) -> dict:
        """Convert result summary to dictionary for serialization."""
        return {
            "original_length": self.original_length,
            "compressed_length": self.compressed_length,
            "reduction_percent": round(self.reduction_percent, 1),
            "stats": dict(self.stats),
        }
