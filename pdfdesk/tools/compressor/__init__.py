"""Compression utilities exposed through the pdfdesk tools namespace."""

from __future__ import annotations

from .compress import (
    LEVELS,
    CompressionLevel,
    CompressionResult,
    CompressTool,
    compress_document,
    compress_pdf,
    get_compression_level,
)

__all__ = [
    "LEVELS",
    "CompressionLevel",
    "CompressionResult",
    "CompressTool",
    "compress_document",
    "compress_pdf",
    "get_compression_level",
]
