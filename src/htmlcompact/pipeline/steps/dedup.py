"""Pipeline step for structural deduplication of repeated siblings."""

import logging
from typing import Optional

from ...dedup import StructuralDeduplicator
from ...models.config import DedupConfig
from ..base import CompressContext

logger = logging.getLogger(__name__)


class DedupStep:
    """
    Pipeline step that collapses repeated sibling subtrees.

    Must run after AttributeStep so generated class tokens no longer
    split otherwise identical siblings into separate groups, and after
    CleanupStep so no retained member is removed behind its marker.

    Example:
        step = DedupStep(DedupConfig(min_repeat_count=3))
        ctx = step.execute(ctx)
        print(ctx.stats["dedup.elements_removed"])
    """

    name = "dedup"

    def __init__(self, config: Optional[DedupConfig] = None):
        """
        Initialize the dedup step.

        Args:
            config: Deduplication configuration
        """
        self._deduplicator = StructuralDeduplicator(config)

    @property
    def deduplicator(self) -> StructuralDeduplicator:
        """Get the structural deduplicator."""
        return self._deduplicator

    def execute(self, ctx: CompressContext) -> CompressContext:
        """Deduplicate the parsed tree in place."""
        report = self._deduplicator.run(ctx.require_soup())
        ctx.record(self.name, report.to_dict())
        return ctx
