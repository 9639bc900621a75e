"""Base classes for the compression pipeline architecture."""

import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol, runtime_checkable

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


@dataclass
class CompressContext:
    """
    Context object passed through pipeline steps.

    Contains all state for compressing a single document, accumulated
    as it moves through the pipeline.

    Attributes:
        source: Raw HTML as read from disk
        soup: Parsed document tree (set by the parse step)
        output: Serialized compact HTML (set by the serialize step)
        stats: Per-step counters, keyed "<step>.<counter>"
        error: Error message if a step raised
    """

    source: str

    # Content (accumulated through pipeline)
    soup: Optional[BeautifulSoup] = None
    output: Optional[str] = None

    # Status
    stats: dict = field(default_factory=dict)
    error: Optional[str] = None

    def record(self, step_name: str, counters: dict) -> None:
        """Merge a step's counters into the context stats."""
        for key, value in counters.items():
            self.stats[f"{step_name}.{key}"] = value

    def require_soup(self) -> BeautifulSoup:
        """Return the parsed tree, failing if the parse step has not run."""
        if self.soup is None:
            raise RuntimeError("Document has not been parsed; add ParseStep first")
        return self.soup


@runtime_checkable
class CompressStep(Protocol):
    """
    Protocol for pipeline steps.

    Each step receives a CompressContext, processes it, and returns
    the (possibly modified) context.

    Error Handling Contract:
    - Steps raise on unexpected failure
    - The pipeline catches the exception, sets ctx.error and stops

    Example implementation:
        class StripStep:
            name = "strip"

            def execute(self, ctx: CompressContext) -> CompressContext:
                for tag in ctx.require_soup().find_all("script"):
                    tag.decompose()
                return ctx
    """

    name: str

    def execute(self, ctx: CompressContext) -> CompressContext:
        """
        Execute this pipeline step.

        Args:
            ctx: The compression context with accumulated state

        Returns:
            The (possibly modified) context
        """
        ...


@dataclass
class CompressPipeline:
    """
    Pipeline for compressing a single document through multiple steps.

    Steps are executed in order. If a step raises an exception, the
    error is captured in ctx.error and processing stops.

    Example:
        pipeline = CompressPipeline(steps=[
            ParseStep(),
            StripStep(config.strip),
            DedupStep(config.dedup),
            SerializeStep(),
        ])

        ctx = pipeline.execute(html)
        if ctx.error:
            logger.error(f"Failed: {ctx.error}")
    """

    steps: list[CompressStep]

    def execute(self, source: str) -> CompressContext:
        """
        Execute the pipeline for one document.

        Args:
            source: Raw HTML text

        Returns:
            CompressContext with final state (check error for status)
        """
        ctx = CompressContext(source=source)

        for step in self.steps:
            logger.debug(f"Running step: {step.name}")
            try:
                ctx = step.execute(ctx)
            except Exception as e:
                ctx.error = f"{step.name}: {e}"
                logger.error(f"Step {step.name} failed: {e}", exc_info=True)
                break

        return ctx

    def add_step(self, step: CompressStep) -> "CompressPipeline":
        """
        Add a step to the pipeline (fluent API).

        Args:
            step: The step to add

        Returns:
            Self for chaining
        """
        self.steps.append(step)
        return self
