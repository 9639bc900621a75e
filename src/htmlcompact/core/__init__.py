"""Core compression API."""

from .compressor import Compressor, compress_html

__all__ = ["Compressor", "compress_html"]
