"""Page rasterization backed by PyMuPDF with Pillow encoding."""

from __future__ import annotations

import io
import logging

import fitz  # PyMuPDF
from PIL import Image

from .codec import Document, encode
from .exceptions import CorruptInputError, UnsupportedFormatError

_LOGGER = logging.getLogger("pdfdesk.raster")

DEFAULT_JPEG_QUALITY = 92

# format name -> (Pillow format, file extension)
RASTER_FORMATS: dict[str, tuple[str, str]] = {
    "png": ("PNG", "png"),
    "jpeg": ("JPEG", "jpg"),
    "jpg": ("JPEG", "jpg"),
}


def resolve_raster_format(name: str | None) -> tuple[str, str]:
    """Return the Pillow format and file extension for *name*."""

    key = (name or "png").lower().removeprefix("image/")
    try:
        return RASTER_FORMATS[key]
    except KeyError as exc:
        raise UnsupportedFormatError(f"Unsupported raster format: {name!r}") from exc


class Rasterizer:
    """Render pages of a :class:`Document` to RGB bitmaps.

    The rasterizer works on a private PyMuPDF copy of the document, so
    rendering never touches the document it was created from. Use it as a
    context manager to release the copy once the page loop is done.
    """

    def __init__(self, document: Document) -> None:
        self._data = encode(document)
        self._handle: fitz.Document | None = None

    def __enter__(self) -> "Rasterizer":
        self.open()
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    def open(self) -> None:
        if self._handle is not None:
            return
        try:
            self._handle = fitz.open(stream=self._data, filetype="pdf")
        except Exception as exc:
            raise CorruptInputError(f"Unable to open PDF for rendering: {exc}") from exc

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    @property
    def page_count(self) -> int:
        return self._require_handle().page_count

    def render(self, index: int, scale: float, *, upright: bool = False) -> Image.Image:
        """Render page *index* at *scale* onto an opaque white background.

        With ``upright`` the page rotation is ignored, so the bitmap matches
        the unrotated media box.
        """

        if scale <= 0:
            raise ValueError(f"Scale must be positive, got {scale!r}")
        page = self._require_handle().load_page(index)
        if upright and page.rotation:
            page.set_rotation(0)
        # alpha=False renders onto a white canvas instead of transparency.
        pixmap = page.get_pixmap(matrix=fitz.Matrix(scale, scale), alpha=False)
        bitmap = Image.frombytes("RGB", (pixmap.width, pixmap.height), pixmap.samples)
        _LOGGER.debug("Rendered page %d at %.2fx: %dx%d", index, scale, pixmap.width, pixmap.height)
        return bitmap

    def _require_handle(self) -> fitz.Document:
        if self._handle is None:
            raise RuntimeError("Rasterizer is not open")
        return self._handle


def encode_bitmap(image: Image.Image, fmt: str = "png", quality: int | None = None) -> bytes:
    """Encode *image* as PNG or JPEG bytes."""

    pil_format, _ = resolve_raster_format(fmt)
    buffer = io.BytesIO()
    if pil_format == "JPEG":
        jpeg_quality = max(1, min(100, int(quality or DEFAULT_JPEG_QUALITY)))
        image.convert("RGB").save(buffer, format="JPEG", quality=jpeg_quality, optimize=True)
    else:
        image.save(buffer, format="PNG", optimize=True)
    return buffer.getvalue()


__all__ = [
    "DEFAULT_JPEG_QUALITY",
    "RASTER_FORMATS",
    "Rasterizer",
    "encode_bitmap",
    "resolve_raster_format",
]
