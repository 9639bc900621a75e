"""Pipeline step that parses raw HTML into a document tree."""

import logging

from bs4 import BeautifulSoup

from ..base import CompressContext

logger = logging.getLogger(__name__)


class ParseStep:
    """
    Pipeline step that parses ``ctx.source`` with BeautifulSoup.

    Example:
        step = ParseStep()
        ctx = step.execute(CompressContext(source="<p>Hi</p>"))
        # ctx.soup is now a BeautifulSoup tree
    """

    name = "parse"

    def __init__(self, parser: str = "html.parser"):
        """
        Initialize the parse step.

        Args:
            parser: BeautifulSoup tree builder name
        """
        self._parser = parser

    def execute(self, ctx: CompressContext) -> CompressContext:
        """Parse the source document."""
        ctx.soup = BeautifulSoup(ctx.source, self._parser)
        ctx.record(self.name, {"characters": len(ctx.source)})
        return ctx
