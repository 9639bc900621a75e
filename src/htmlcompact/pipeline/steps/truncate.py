"""Pipeline step that shortens long URLs and text runs."""

import logging
from typing import Optional

from bs4 import NavigableString

from ...dom import iter_elements
from ...models.config import TruncationConfig
from ..base import CompressContext

logger = logging.getLogger(__name__)

URL_ATTRIBUTES = ("href", "src", "action")


def truncate_url(url: str, max_length: int, ellipsis: str = "…") -> str:
    """
    Shorten a URL, keeping its start.

    ``data:`` URIs are reduced to their media type since their payload is
    never useful as text.

    Args:
        url: URL to shorten
        max_length: Longest URL kept verbatim
        ellipsis: Suffix marking the cut

    Returns:
        The original URL, or a shortened form
    """
    if url.startswith("data:"):
        media_type = url[5:].split(",", 1)[0].split(";", 1)[0]
        return f"data:{media_type}{ellipsis}"
    if len(url) <= max_length:
        return url
    return url[: max(max_length - len(ellipsis), 0)] + ellipsis


def truncate_text(text: str, max_length: int, ellipsis: str = "…") -> str:
    """Shorten text to ``max_length`` characters, cutting on a word boundary if possible."""
    if len(text) <= max_length:
        return text
    cut = text[: max(max_length - len(ellipsis), 0)]
    boundary = cut.rfind(" ")
    if boundary > max_length // 2:
        cut = cut[:boundary]
    return cut.rstrip() + ellipsis


class TruncateStep:
    """Pipeline step that truncates long href/src values and text nodes."""

    name = "truncate"

    def __init__(self, config: Optional[TruncationConfig] = None):
        """
        Initialize the truncate step.

        Args:
            config: Length limits (None disables a limit)
        """
        self.config = config or TruncationConfig()

    def execute(self, ctx: CompressContext) -> CompressContext:
        """Truncate URLs and long text in place."""
        soup = ctx.require_soup()
        max_url = self.config.max_url_length
        max_text = self.config.max_text_length
        ellipsis = self.config.ellipsis

        urls_truncated = 0
        texts_truncated = 0

        if max_url is not None:
            for tag in iter_elements(soup):
                for attr in URL_ATTRIBUTES:
                    value = tag.get(attr)
                    if not isinstance(value, str):
                        continue
                    shortened = truncate_url(value, max_url, ellipsis)
                    if shortened != value:
                        tag[attr] = shortened
                        urls_truncated += 1

        if max_text is not None:
            # Collect first; replace_with would disturb the iteration
            long_strings = [
                string
                for string in soup.find_all(string=True)
                if type(string) is NavigableString and len(string.strip()) > max_text
            ]
            for string in long_strings:
                string.replace_with(NavigableString(truncate_text(" ".join(string.split()), max_text, ellipsis)))
                texts_truncated += 1

        ctx.record(self.name, {"urls_truncated": urls_truncated, "texts_truncated": texts_truncated})
        return ctx
