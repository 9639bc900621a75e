"""Pipeline step that serializes the tree into compact HTML text."""

import re

from ..base import CompressContext

_EMPTY_LINES_RE = re.compile(r"^\s*[\r\n]", re.MULTILINE)
_WHITESPACE_RE = re.compile(r"\s+")


def collapse_html_whitespace(html: str) -> str:
    """Drop empty lines, collapse whitespace runs and trim."""
    html = _EMPTY_LINES_RE.sub("", html)
    html = _WHITESPACE_RE.sub(" ", html)
    return html.strip()


class SerializeStep:
    """Pipeline step that renders ``ctx.soup`` into ``ctx.output``."""

    name = "serialize"

    def __init__(self, collapse_whitespace: bool = True):
        """
        Initialize the serialize step.

        Args:
            collapse_whitespace: Collapse whitespace in the rendered HTML
        """
        self._collapse = collapse_whitespace

    def execute(self, ctx: CompressContext) -> CompressContext:
        """Serialize the tree."""
        html = str(ctx.require_soup())
        ctx.output = collapse_html_whitespace(html) if self._collapse else html
        ctx.record(self.name, {"characters": len(ctx.output)})
        return ctx
