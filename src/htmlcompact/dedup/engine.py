"""Content-aware collapsing of repeated sibling subtrees."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from bs4 import Comment, NavigableString, Tag

from ..dom import class_list, element_children, walk
from ..models.config import DedupConfig
from ..models.stats import DedupReport
from .badges import NO_BADGE_KEY, badge_key, extract_badges
from .signature import DEFAULT_DEDUP_CONFIG, ElementSignature, signature

logger = logging.getLogger(__name__)


@dataclass
class GroupPlan:
    """
    Decision for one structural group of a container.

    Attributes:
        anchor: First member of the group; the marker goes before it
        removed: Members to delete (never includes the anchor)
        marker_text: Summary written into the marker node
        member_count: Size of the group before removal
    """

    anchor: Tag
    removed: list[Tag] = field(default_factory=list)
    marker_text: str = ""
    member_count: int = 0


def describe(element: Tag) -> str:
    """Short descriptor of a group: first class token, else the tag name."""
    classes = class_list(element)
    return classes[0] if classes else element.name


def format_marker(count: int, descriptor: str, badge_counts: Optional[list[tuple[str, int]]] = None) -> str:
    """
    Render the summary text for a collapsed group.

    Example:
        >>> format_marker(5, "card", [("New", 3)])
        '5× card collapsed (badges: "New" ×3)'
    """
    text = f"{count}× {descriptor} collapsed"
    if badge_counts:
        table = ", ".join(f'"{badge}" ×{occurrences}' for badge, occurrences in badge_counts)
        text += f" (badges: {table})"
    return text


class StructuralDeduplicator:
    """
    Collapse repeated siblings while keeping every badge variant.

    Each container is evaluated once, bottom-up, so its children are
    grouped in their final (already collapsed) form. Its element children are
    partitioned by structural signature; every partition of at least
    ``min_repeat_count`` members is partitioned again by badge key and the
    first member of each badge partition is kept. The remaining members are
    removed and one marker summarizing the group is inserted before the
    group's first member.

    All decisions for a container are made before any node is touched.

    Example:
        deduplicator = StructuralDeduplicator(DedupConfig(min_repeat_count=3))
        report = deduplicator.run(soup)
        print(f"Removed {report.elements_removed} elements")
    """

    def __init__(self, config: Optional[DedupConfig] = None):
        """
        Initialize the deduplicator.

        Args:
            config: Deduplication configuration (thresholds, caps, word lists)
        """
        self.config = config or DEFAULT_DEDUP_CONFIG
        self.report = DedupReport()

    def _plan_group(self, members: list[Tag]) -> Optional[GroupPlan]:
        badge_sets = [extract_badges(member, self.config) for member in members]

        by_key: dict[str, list[int]] = {}
        for index, badges in enumerate(badge_sets):
            by_key.setdefault(badge_key(badges), []).append(index)

        retained = {indices[0] for indices in by_key.values()}
        removed = [member for index, member in enumerate(members) if index not in retained]
        if not removed:
            return None

        badge_counts: dict[str, int] = {}
        for badges in badge_sets:
            for badge in badges:
                badge_counts[badge] = badge_counts.get(badge, 0) + 1

        table = None
        if len(by_key) >= 2 or len(badge_counts) >= 2:
            table = list(badge_counts.items())

        marker_text = format_marker(len(members), describe(members[0]), table)
        logger.debug(
            f"Collapsing {len(members)} <{members[0].name}> siblings into "
            f"{len(retained)} ({len(by_key) - (NO_BADGE_KEY in by_key)} badge variants)"
        )
        return GroupPlan(
            anchor=members[0],
            removed=removed,
            marker_text=marker_text,
            member_count=len(members),
        )

    def plan_container(self, container: Tag) -> list[GroupPlan]:
        """
        Compute every group decision for one container without mutating it.

        Args:
            container: Element whose children are evaluated

        Returns:
            Plans for the groups that lose at least one member
        """
        threshold = self.config.min_repeat_count
        children = element_children(container)
        if len(children) < threshold:
            return []

        groups: dict[ElementSignature, list[Tag]] = {}
        for child in children:
            groups.setdefault(signature(child, self.config), []).append(child)

        plans = []
        for members in groups.values():
            if len(members) < threshold:
                continue
            plan = self._plan_group(members)
            if plan is not None:
                plans.append(plan)
        return plans

    def _make_marker(self, text: str) -> NavigableString:
        if self.config.marker_style == "text":
            return NavigableString(f"[{text}]")
        # "--" would terminate the comment early
        return Comment(f" {text.replace('--', '- -')} ")

    def apply(self, plans: list[GroupPlan]) -> None:
        """
        Apply group plans: insert each marker, then remove the members.

        Args:
            plans: Plans produced by plan_container for a single container
        """
        for plan in plans:
            plan.anchor.insert_before(self._make_marker(plan.marker_text))
            for element in plan.removed:
                element.decompose()

            self.report.groups_collapsed += 1
            self.report.markers_inserted += 1
            self.report.elements_removed += len(plan.removed)

    def visit(self, container: Tag) -> None:
        """Evaluate one container and apply its plans."""
        self.report.containers_visited += 1
        plans = self.plan_container(container)
        if plans:
            self.apply(plans)

    def run(self, root: Tag) -> DedupReport:
        """
        Deduplicate the whole tree under ``root`` in place.

        Args:
            root: Document or element to process

        Returns:
            DedupReport with counters for this run
        """
        self.report = DedupReport()
        if not self.config.enabled:
            return self.report

        walk(root, self.visit)

        logger.info(
            f"Deduplication: collapsed {self.report.groups_collapsed} groups, "
            f"removed {self.report.elements_removed} elements"
        )
        return self.report


def deduplicate(root: Tag, config: Optional[DedupConfig] = None) -> DedupReport:
    """
    Collapse repeated sibling subtrees under ``root`` in place.

    Args:
        root: Document or element to process
        config: Deduplication configuration; ``min_repeat_count`` is the
            group-size threshold

    Returns:
        DedupReport with counters for this run
    """
    return StructuralDeduplicator(config).run(root)
