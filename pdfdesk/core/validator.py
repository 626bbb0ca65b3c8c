"""Validation helpers shared by pdfdesk tools.

Page selections follow a filter-not-fail policy: indices that fall outside a
document, or entries that cannot be read as an index at all, are dropped and
logged instead of aborting the operation.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Mapping

from .exceptions import InvalidDescriptorError
from .model import PageEdit

_LOGGER = logging.getLogger("pdfdesk.validator")


def safe_filename(filename: str | None, default: str) -> str:
    """Return a filename stripped of any directory components."""

    if not filename:
        return default
    candidate = Path(str(filename).replace("\\", "/")).name
    if candidate in ("", ".", ".."):
        return default
    return candidate


def normalize_rotation(value: Any) -> int:
    """Return *value* as a rotation delta in degrees, a multiple of 90."""

    if value is None or value == "":
        return 0
    try:
        degrees = int(value)
    except (TypeError, ValueError) as exc:
        raise InvalidDescriptorError(f"Rotation must be an integer, got {value!r}") from exc
    if degrees % 90:
        raise InvalidDescriptorError(f"Rotation must be a multiple of 90 degrees, got {degrees}")
    return degrees


def _coerce_index(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def coerce_page_edit(entry: Any) -> PageEdit | None:
    """Interpret one organize entry.

    Accepted forms are a bare index, a :class:`PageEdit`, an ``(index,
    rotation)`` pair or a mapping with ``page_index``/``pageIndex`` and an
    optional ``rotation``. Returns ``None`` when no index can be read.
    """

    if isinstance(entry, PageEdit):
        return PageEdit(entry.index, normalize_rotation(entry.rotation))
    if isinstance(entry, Mapping):
        raw_index = entry.get("page_index", entry.get("pageIndex", entry.get("index")))
        index = _coerce_index(raw_index)
        if index is None:
            return None
        return PageEdit(index, normalize_rotation(entry.get("rotation")))
    if isinstance(entry, (tuple, list)) and len(entry) == 2:
        index = _coerce_index(entry[0])
        if index is None:
            return None
        return PageEdit(index, normalize_rotation(entry[1]))
    index = _coerce_index(entry)
    if index is None:
        return None
    return PageEdit(index)


def filter_page_edits(entries: Iterable[Any], total_pages: int) -> list[PageEdit]:
    """Return the entries of *entries* that address a page in ``[0, total_pages)``."""

    selected: list[PageEdit] = []
    for entry in entries:
        edit = coerce_page_edit(entry)
        if edit is None or not 0 <= edit.index < total_pages:
            _LOGGER.debug("Dropping page selection %r (document has %d pages)", entry, total_pages)
            continue
        selected.append(edit)
    return selected


def filter_page_indices(indices: Iterable[Any], total_pages: int) -> list[int]:
    """Return the 0-based indices of *indices* that exist in the document."""

    return [edit.index for edit in filter_page_edits(indices, total_pages)]


def page_numbers_to_indices(page_numbers: Iterable[Any], total_pages: int) -> list[int]:
    """Convert 1-based page numbers into valid 0-based indices, preserving order."""

    indices: list[int] = []
    for number in page_numbers:
        value = _coerce_index(number)
        if value is None:
            _LOGGER.debug("Dropping page number %r", number)
            continue
        indices.append(value - 1)
    return filter_page_indices(indices, total_pages)


__all__ = [
    "safe_filename",
    "normalize_rotation",
    "coerce_page_edit",
    "filter_page_edits",
    "filter_page_indices",
    "page_numbers_to_indices",
]
