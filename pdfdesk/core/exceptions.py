"""Custom exception types shared by every :mod:`pdfdesk` operation."""

from __future__ import annotations


class PdfDeskError(Exception):
    """Base exception for all :mod:`pdfdesk` related errors."""


class CorruptInputError(PdfDeskError):
    """Raised when a byte stream cannot be parsed as a usable PDF document."""


class UnsupportedFormatError(PdfDeskError):
    """Raised when an image or output format is neither declared nor inferable."""


class WriteFailureError(PdfDeskError):
    """Raised when an output file cannot be written to its destination."""


class InvalidDescriptorError(PdfDeskError, ValueError):
    """Raised when operation parameters are malformed (page indices excluded)."""


__all__ = [
    "PdfDeskError",
    "CorruptInputError",
    "UnsupportedFormatError",
    "WriteFailureError",
    "InvalidDescriptorError",
]
