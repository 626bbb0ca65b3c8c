"""Raster image ingest and image page construction."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass

import fitz  # PyMuPDF
from PIL import Image, UnidentifiedImageError
from pypdf import PageObject, PdfReader

from .codec import Document
from .exceptions import UnsupportedFormatError
from .geometry import Placement

_LOGGER = logging.getLogger("pdfdesk.imaging")

_PIL_FORMATS = {"png": "PNG", "jpeg": "JPEG"}
# Tried in this order when the declared type names neither format.
_FALLBACK_ORDER = ("jpeg", "png")


@dataclass(frozen=True, slots=True)
class ImageData:
    """Encoded image bytes together with their format and pixel size."""

    data: bytes
    format: str
    width: int
    height: int


def format_from_mime(mime_type: str | None) -> str | None:
    """Map a declared MIME type (or bare extension) to ``"png"``/``"jpeg"``."""

    declared = (mime_type or "").lower()
    if "png" in declared:
        return "png"
    if "jpeg" in declared or "jpg" in declared:
        return "jpeg"
    return None


def _probe(data: bytes, fmt: str) -> ImageData:
    with Image.open(io.BytesIO(data), formats=[_PIL_FORMATS[fmt]]) as image:
        image.load()
        width, height = image.size
    return ImageData(data=data, format=fmt, width=width, height=height)


def decode_image(data: bytes, mime_type: str | None = None) -> ImageData:
    """Identify *data* as a PNG or JPEG image.

    A declared PNG or JPEG type is trusted and only that decoder is used.
    Otherwise JPEG is attempted first, then PNG.
    """

    declared = format_from_mime(mime_type)
    candidates = (declared,) if declared else _FALLBACK_ORDER
    last_error: Exception | None = None
    for fmt in candidates:
        try:
            image = _probe(data, fmt)
        except (UnidentifiedImageError, OSError, ValueError, SyntaxError) as exc:
            last_error = exc
            continue
        _LOGGER.debug("Decoded %s image %dx%d", fmt, image.width, image.height)
        return image
    raise UnsupportedFormatError(
        f"Image is not a readable {' or '.join(name.upper() for name in candidates)} file"
    ) from last_error


def append_image_page(
    destination: Document,
    image: ImageData,
    page_width: float,
    page_height: float,
    placement: Placement,
) -> PageObject:
    """Append a ``page_width`` x ``page_height`` page showing *image* at *placement*."""

    canvas = fitz.open()
    try:
        page = canvas.new_page(width=page_width, height=page_height)
        # PyMuPDF measures from the top-left corner, placements from the bottom-left.
        top = page_height - placement.y - placement.height
        rect = fitz.Rect(placement.x, top, placement.x + placement.width, top + placement.height)
        page.insert_image(rect, stream=image.data, keep_proportion=False)
        data = canvas.tobytes(garbage=3, deflate=True)
    finally:
        canvas.close()

    reader = PdfReader(io.BytesIO(data))
    return destination.add_page(reader.pages[0])


__all__ = ["ImageData", "decode_image", "format_from_mime", "append_image_page"]
