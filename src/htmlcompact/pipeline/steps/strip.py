"""Pipeline step that removes non-content nodes."""

import logging
from typing import Optional

from bs4 import Comment

from ...models.config import StripConfig
from ..base import CompressContext

logger = logging.getLogger(__name__)


class StripStep:
    """
    Pipeline step that decomposes scripts, styles and other non-content tags.

    Comments are removed here as well, before deduplication inserts its
    own markers.
    """

    name = "strip"

    def __init__(self, config: Optional[StripConfig] = None):
        """
        Initialize the strip step.

        Args:
            config: Tags to remove and whether to drop comments
        """
        self.config = config or StripConfig()

    def execute(self, ctx: CompressContext) -> CompressContext:
        """Remove configured tags and comments from the tree."""
        soup = ctx.require_soup()

        tags_removed = 0
        if self.config.tags:
            for tag in soup.find_all(self.config.tags):
                # Nested matches go away with their ancestor
                if tag.decomposed:
                    continue
                tag.decompose()
                tags_removed += 1

        comments_removed = 0
        if self.config.remove_comments:
            for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
                comment.extract()
                comments_removed += 1

        logger.debug(f"Stripped {tags_removed} tags and {comments_removed} comments")
        ctx.record(self.name, {"tags_removed": tags_removed, "comments_removed": comments_removed})
        return ctx
