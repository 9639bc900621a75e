"""Pipeline architecture for compression operations."""

from .base import CompressContext, CompressPipeline, CompressStep

__all__ = ["CompressContext", "CompressPipeline", "CompressStep"]
