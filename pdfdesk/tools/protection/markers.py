"""Watermark markers drawn as marked-content artifacts.

Markers live inside ``/Artifact <</Subtype /Watermark>> BDC ... EMC``
sequences so they can be found and removed again without touching the rest
of the page content.
"""

from __future__ import annotations

import logging

from pypdf import PageObject
from pypdf.generic import (
    ArrayObject,
    DecodedStreamObject,
    DictionaryObject,
    NameObject,
)

_LOGGER = logging.getLogger("pdfdesk.markers")

MARKER_TEXT = "Protected Document"
MARKER_FONT = "/PdfDeskMarker"
MARKER_FONT_SIZE = 8
MARKER_OFFSET = 10.0
MARKER_GREY = 0.5

_ARTIFACT = "/Artifact"
_WATERMARK = "/Watermark"


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def marker_content(x: float, y: float, text: str = MARKER_TEXT) -> bytes:
    grey = f"{MARKER_GREY:g}"
    lines = [
        f"{_ARTIFACT} <</Type /Pagination /Subtype {_WATERMARK}>> BDC",
        "q",
        f"{grey} {grey} {grey} rg",
        "BT",
        f"{MARKER_FONT} {MARKER_FONT_SIZE} Tf",
        f"{x:g} {y:g} Td",
        f"({_escape(text)}) Tj",
        "ET",
        "Q",
        "EMC",
    ]
    return ("\n".join(lines) + "\n").encode("latin-1")


def build_marker_overlay(page: PageObject, text: str = MARKER_TEXT) -> PageObject:
    """Return a transparent page carrying the marker for *page*."""

    box = page.mediabox
    overlay = PageObject.create_blank_page(width=float(box.width), height=float(box.height))
    overlay.mediabox = box

    font = DictionaryObject(
        {
            NameObject("/Type"): NameObject("/Font"),
            NameObject("/Subtype"): NameObject("/Type1"),
            NameObject("/BaseFont"): NameObject("/Helvetica"),
            NameObject("/Encoding"): NameObject("/WinAnsiEncoding"),
        }
    )
    overlay[NameObject("/Resources")] = DictionaryObject(
        {
            NameObject("/Font"): DictionaryObject({NameObject(MARKER_FONT): font}),
            NameObject("/ProcSet"): ArrayObject([NameObject("/PDF"), NameObject("/Text")]),
        }
    )
    stream = DecodedStreamObject()
    stream.set_data(
        marker_content(float(box.left) + MARKER_OFFSET, float(box.bottom) + MARKER_OFFSET, text)
    )
    overlay[NameObject("/Contents")] = stream
    return overlay


def add_marker(page: PageObject, text: str = MARKER_TEXT) -> None:
    page.merge_page(build_marker_overlay(page, text))


def _is_watermark(operands: list) -> bool:
    if len(operands) < 2 or operands[0] != _ARTIFACT:
        return False
    properties = operands[1]
    return isinstance(properties, DictionaryObject) and properties.get("/Subtype") == _WATERMARK


def strip_markers(page: PageObject) -> int:
    """Remove watermark artifacts from *page* and return how many were removed."""

    content = page.get_contents()
    if content is None:
        return 0

    kept = []
    depth = 0
    removed = 0
    for operands, operator in content.operations:
        if depth:
            # Nested marked content inside a watermark goes with it.
            if operator in (b"BDC", b"BMC"):
                depth += 1
            elif operator == b"EMC":
                depth -= 1
            continue
        if operator == b"BDC" and _is_watermark(operands):
            depth = 1
            removed += 1
            continue
        kept.append((operands, operator))

    if removed:
        content.operations = kept
        page.replace_contents(content)
        _LOGGER.debug("Removed %d watermark artifact(s)", removed)
    return removed


__all__ = [
    "MARKER_TEXT",
    "marker_content",
    "build_marker_overlay",
    "add_marker",
    "strip_markers",
]
