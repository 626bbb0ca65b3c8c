"""Split utilities exposed through the pdfdesk tools namespace."""

from __future__ import annotations

from .split import SplitMode, SplitPart, SplitTool, iter_split_parts, split_document
from .utils import build_output_filename

__all__ = [
    "SplitMode",
    "SplitPart",
    "SplitTool",
    "iter_split_parts",
    "split_document",
    "build_output_filename",
]
