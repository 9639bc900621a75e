"""Pipeline step that removes empty elements."""

import logging
from typing import Optional

from bs4 import Tag

from ...dom import iter_elements
from ...models.config import CleanupConfig
from ..base import CompressContext

logger = logging.getLogger(__name__)


class CleanupStep:
    """
    Pipeline step that removes elements with no text and no child elements.

    Removing an empty element can leave its parent empty, so the step runs
    in passes until a pass removes nothing. The number of passes is capped
    by ``CleanupConfig.max_passes``; deeply nested empty chains beyond the
    cap are left partially in place.
    """

    name = "cleanup"

    def __init__(self, config: Optional[CleanupConfig] = None):
        """
        Initialize the cleanup step.

        Args:
            config: Cleanup settings (tags to keep, pass cap)
        """
        self.config = config or CleanupConfig()
        self._keep = frozenset(self.config.keep_empty_tags)

    def is_empty(self, tag: Tag) -> bool:
        """Check whether an element carries neither text nor child elements."""
        if tag.name in self._keep:
            return False
        if any(isinstance(child, Tag) for child in tag.children):
            return False
        return not tag.get_text(strip=True)

    def execute(self, ctx: CompressContext) -> CompressContext:
        """Remove empty elements, at most ``max_passes`` times."""
        soup = ctx.require_soup()
        if not self.config.remove_empty:
            return ctx

        removed = 0
        passes = 0
        for _ in range(self.config.max_passes):
            empties = [tag for tag in iter_elements(soup) if tag is not soup and self.is_empty(tag)]
            if not empties:
                break
            passes += 1
            for tag in empties:
                tag.decompose()
            removed += len(empties)
        else:
            logger.debug(f"Cleanup stopped after {self.config.max_passes} passes")

        ctx.record(self.name, {"elements_removed": removed, "passes": passes})
        return ctx
