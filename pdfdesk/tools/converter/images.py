"""Conversions between raster images and PDF documents."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from ...core.codec import Document, encode
from ...core.envelope import ResultEnvelope
from ...core.exceptions import InvalidDescriptorError
from ...core.geometry import FIT, Orientation, fit_image, resolve_page_size
from ...core.imaging import append_image_page, decode_image
from ...core.raster import DEFAULT_JPEG_QUALITY, Rasterizer, encode_bitmap, resolve_raster_format
from ...core.storage import remove_outputs
from ...core.utils import get_logger
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("pdfdesk.tools.convert")

DEFAULT_OUTPUT_NAME = "images.pdf"
DEFAULT_PREFIX = "page"

RESOLUTIONS: dict[str, float] = {
    "low": 1.0,
    "medium": 1.5,
    "high": 2.0,
}
DEFAULT_RESOLUTION = "high"


@dataclass(frozen=True, slots=True)
class RenderedImage:
    page_number: int
    extension: str
    data: bytes

    def file_name(self, prefix: str) -> str:
        return f"{prefix}_page{self.page_number}.{self.extension}"


def images_to_document(
    images: Iterable[tuple[bytes, str | None]],
    page_size: str | None = FIT,
    orientation: Orientation | str | None = Orientation.PORTRAIT,
) -> Document:
    """Build a document with one page per ``(data, mime_type)`` image.

    Each image is scaled uniformly to fit its page and centred. With the
    ``"fit"`` page size the page takes the image's pixel size in points.
    """

    document = Document.create()
    for position, (data, mime_type) in enumerate(images, start=1):
        image = decode_image(data, mime_type)
        page_width, page_height = resolve_page_size(page_size, orientation, image.width, image.height)
        placement = fit_image(image.width, image.height, page_width, page_height)
        append_image_page(document, image, page_width, page_height, placement)
        LOGGER.debug(
            "Image #%d (%dx%d %s) placed on %.2fx%.2f page",
            position,
            image.width,
            image.height,
            image.format,
            page_width,
            page_height,
        )
    return document


def resolve_scale(resolution: str | None) -> float:
    key = (resolution or DEFAULT_RESOLUTION).lower()
    try:
        return RESOLUTIONS[key]
    except KeyError as exc:
        raise InvalidDescriptorError(f"Unknown resolution {resolution!r}") from exc


def _coerce_quality(quality: object) -> int:
    if quality is None or quality == "":
        return DEFAULT_JPEG_QUALITY
    try:
        value = int(quality)
    except (TypeError, ValueError) as exc:
        raise InvalidDescriptorError(f"Quality must be an integer, got {quality!r}") from exc
    if not 1 <= value <= 100:
        raise InvalidDescriptorError(f"Quality must be between 1 and 100, got {value}")
    return value


def render_document_images(
    source: Document,
    fmt: str = "png",
    resolution: str | None = DEFAULT_RESOLUTION,
    quality: int | None = None,
) -> Iterator[RenderedImage]:
    """Yield one encoded bitmap per page of *source*, in page order."""

    _, extension = resolve_raster_format(fmt)
    scale = resolve_scale(resolution)
    jpeg_quality = _coerce_quality(quality)
    with Rasterizer(source) as rasterizer:
        for index in range(source.page_count):
            bitmap = rasterizer.render(index, scale)
            data = encode_bitmap(bitmap, fmt, quality=jpeg_quality)
            yield RenderedImage(page_number=index + 1, extension=extension, data=data)


@register_tool("images_to_pdf", aliases=("images-to-pdf",))
class ImagesToPdfTool(BaseTool):
    name = "images_to_pdf"

    def run(self) -> ResultEnvelope:
        context = self.context
        config = context.config
        payloads = context.payloads()
        if not payloads:
            raise InvalidDescriptorError("No images provided")
        mime_types: Sequence[str | None] = config.get("mime_types") or ()
        images = [
            (data, mime_types[position] if position < len(mime_types) else None)
            for position, data in enumerate(payloads)
        ]

        document = images_to_document(
            images,
            page_size=config.get("page_size", FIT),
            orientation=config.get("orientation", Orientation.PORTRAIT),
        )
        data = encode(document)
        path = context.write(config.get("output_file_name"), data, default=DEFAULT_OUTPUT_NAME)
        result = ResultEnvelope.ok(path=path, size=len(data), page_count=document.page_count)
        context.resources["result"] = result
        return result


@register_tool("pdf_to_images", aliases=("pdf-to-images",))
class PdfToImagesTool(BaseTool):
    name = "pdf_to_images"

    def run(self) -> ResultEnvelope:
        context = self.context
        config = context.config
        source = context.load_document(password=config.get("password"))
        prefix = config.get("output_prefix") or DEFAULT_PREFIX

        written: list[Path] = []
        try:
            for image in render_document_images(
                source,
                fmt=config.get("format") or "png",
                resolution=config.get("resolution"),
                quality=config.get("quality"),
            ):
                name = image.file_name(prefix)
                written.append(context.write(name, image.data, default=name))
        except Exception:
            remove_outputs(written)
            raise

        LOGGER.debug("Exported %d page image(s) with prefix %s", len(written), prefix)
        result = ResultEnvelope.ok(paths=written, count=len(written))
        context.resources["result"] = result
        return result
