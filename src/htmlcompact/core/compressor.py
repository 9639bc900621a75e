"""Main Compressor class tying configuration to the step pipeline."""

from __future__ import annotations

import logging
from pathlib import Path

from ..models.config import CompressConfig
from ..models.profiles import apply_profile
from ..models.stats import CompressResult
from ..pipeline.base import CompressPipeline
from ..pipeline.steps import (
    AttributeStep,
    CleanupStep,
    DedupStep,
    ParseStep,
    SerializeStep,
    StripStep,
    TruncateStep,
)

logger = logging.getLogger(__name__)


class Compressor:
    """
    Primary API for htmlcompact.

    Builds the step pipeline from a configuration and runs documents
    through it. Attribute filtering (which drops generated identifiers) and
    empty-element cleanup always run before deduplication, so a collapsed
    group keeps its retained members in the output.

    Example:
        compressor = Compressor(CompressConfig(profile=ProfileName.AGGRESSIVE))
        result = compressor.compress(html)
        print(f"{result.original_length} -> {result.compressed_length}")
    """

    def __init__(self, config: CompressConfig | None = None):
        """
        Initialize the Compressor.

        Args:
            config: Configuration for compression.
                    Profile defaults will be applied automatically.
        """
        self.config = apply_profile(config or CompressConfig())
        self._pipeline = self._build_pipeline()

    @property
    def pipeline(self) -> CompressPipeline:
        """Get the step pipeline."""
        return self._pipeline

    def _build_pipeline(self) -> CompressPipeline:
        config = self.config
        return CompressPipeline(
            steps=[
                ParseStep(),
                StripStep(config.strip),
                AttributeStep(config.attributes, config.classifier),
                TruncateStep(config.truncation),
                CleanupStep(config.cleanup),
                DedupStep(config.dedup),
                SerializeStep(),
            ]
        )

    def compress(self, html: str) -> CompressResult:
        """
        Compress one HTML document.

        Args:
            html: Raw HTML text

        Returns:
            CompressResult with compact HTML and statistics

        Raises:
            RuntimeError: If a pipeline step failed
        """
        ctx = self._pipeline.execute(html)
        if ctx.error or ctx.output is None:
            raise RuntimeError(f"Compression failed: {ctx.error or 'no output produced'}")

        result = CompressResult(
            html=ctx.output,
            original_length=len(html),
            compressed_length=len(ctx.output),
            stats=ctx.stats,
        )
        logger.info(
            f"Compressed {result.original_length} -> {result.compressed_length} characters "
            f"({result.reduction_percent:.1f}% reduction)"
        )
        return result

    def compress_file(self, path: Path) -> CompressResult:
        """
        Read and compress an HTML file.

        Args:
            path: File to read (UTF-8)

        Returns:
            CompressResult for the file contents

        Raises:
            FileNotFoundError: If the file does not exist
        """
        return self.compress(path.read_text(encoding="utf-8"))


def compress_html(html: str, config: CompressConfig | None = None) -> CompressResult:
    """
    Compress an HTML string with the given configuration.

    Convenience wrapper around ``Compressor(config).compress(html)``.

    Args:
        html: Raw HTML text
        config: Optional configuration (defaults to the balanced profile)

    Returns:
        CompressResult with compact HTML and statistics
    """
    return Compressor(config).compress(html)
