"""Copy pages between documents, composing rotations."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from pypdf import PageObject
from pypdf.generic import NameObject, NumberObject

from .codec import Document
from .model import PageEdit
from .validator import filter_page_edits, normalize_rotation

_LOGGER = logging.getLogger("pdfdesk.transfer")


def rotate_page(page: PageObject, delta: int) -> int:
    """Add *delta* degrees to the rotation of *page* and return the new value."""

    delta = normalize_rotation(delta)
    rotation = (int(page.rotation or 0) + delta) % 360
    page[NameObject("/Rotate")] = NumberObject(rotation)
    return rotation


def copy_pages(
    source: Document,
    destination: Document,
    selections: Iterable[PageEdit | int | Any],
) -> list[PageObject]:
    """Append the selected pages of *source* to *destination* in order.

    Selections outside the source are dropped before anything is copied.
    The source document is left untouched; rotations are applied to the copies.
    """

    edits = filter_page_edits(selections, source.page_count)
    copied: list[PageObject] = []
    for edit in edits:
        page = destination.add_page(source.pages[edit.index])
        if edit.rotation:
            rotate_page(page, edit.rotation)
        copied.append(page)
    _LOGGER.debug("Copied %d of %d page(s)", len(copied), source.page_count)
    return copied


def copy_all_pages(source: Document, destination: Document) -> list[PageObject]:
    return copy_pages(source, destination, range(source.page_count))


__all__ = ["rotate_page", "copy_pages", "copy_all_pages"]
