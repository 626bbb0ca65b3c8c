"""Naming helpers for split outputs."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

DEFAULT_BASE_NAME = "document"


def build_output_filename(
    base_name: str | None,
    page_number: int | None = None,
    occurrence: int = 1,
) -> str:
    """Return the default file name for a split output.

    ``page_number`` is the 1-based page of a per-page output; ``None`` names
    the single output of a range split. A page requested more than once gets
    its ``occurrence`` appended from the second copy on, so every copy keeps
    its own file.
    """

    stem = Path(str(base_name or DEFAULT_BASE_NAME)).stem or DEFAULT_BASE_NAME
    if page_number is None:
        return f"{stem}_split.pdf"
    if occurrence > 1:
        return f"{stem}_page_{page_number}_{occurrence}.pdf"
    return f"{stem}_page_{page_number}.pdf"


def requested_name(names: Sequence[str] | None, position: int) -> str | None:
    """Return the caller supplied name at *position*, if any."""

    if not names or position >= len(names):
        return None
    return names[position] or None


__all__ = ["build_output_filename", "requested_name", "DEFAULT_BASE_NAME"]
