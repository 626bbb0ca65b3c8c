"""Raster based recompression of PDF documents."""

from __future__ import annotations

import dataclasses
import math
from typing import Literal

from ...config import get_settings
from ...core.codec import Document, decode, encode
from ...core.envelope import ResultEnvelope
from ...core.exceptions import InvalidDescriptorError
from ...core.geometry import Placement
from ...core.imaging import ImageData, append_image_page
from ...core.raster import Rasterizer, encode_bitmap
from ...core.transfer import rotate_page
from ...core.utils import get_logger
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("pdfdesk.tools.compress")

CompressionLevelName = Literal["low", "medium", "high", "extreme"]

DEFAULT_OUTPUT_NAME = "compressed.pdf"


@dataclasses.dataclass(frozen=True, slots=True)
class CompressionLevel:
    """Rendering scale, JPEG quality and encoder mode for one level."""

    name: CompressionLevelName
    scale: float
    jpeg_quality: int
    compact: bool


@dataclasses.dataclass(slots=True)
class CompressionResult:
    """Represents the outcome of a compression run."""

    data: bytes
    level: CompressionLevelName
    original_size: int
    compressed_size: int

    @property
    def bytes_saved(self) -> int:
        return max(self.original_size - self.compressed_size, 0)

    @property
    def percentage(self) -> int:
        if self.original_size <= 0:
            return 0
        # Half-up rounding of the saved share.
        return math.floor(self.bytes_saved / self.original_size * 100 + 0.5)


LEVELS: dict[str, CompressionLevel] = {
    "low": CompressionLevel("low", scale=2.0, jpeg_quality=85, compact=False),
    "medium": CompressionLevel("medium", scale=1.5, jpeg_quality=70, compact=True),
    "high": CompressionLevel("high", scale=1.0, jpeg_quality=55, compact=True),
    "extreme": CompressionLevel("extreme", scale=0.75, jpeg_quality=40, compact=True),
}


def get_compression_level(name: str | None) -> CompressionLevel:
    key = (name or get_settings().compression_level).lower()
    try:
        return LEVELS[key]
    except KeyError as exc:
        choices = ", ".join(LEVELS)
        raise InvalidDescriptorError(f"Unknown compression level {name!r}; expected one of {choices}") from exc


def compress_document(source: Document, level: CompressionLevel | str | None = None) -> Document:
    """Return a copy of *source* whose pages are JPEG renderings of the originals.

    Every page keeps its width, height and rotation; its content becomes one
    image stretched over the full page.
    """

    profile = level if isinstance(level, CompressionLevel) else get_compression_level(level)
    compressed = Document.create(metadata=source.metadata.copy())
    with Rasterizer(source) as rasterizer:
        for index in range(source.page_count):
            info = source.page_info(index)
            bitmap = rasterizer.render(index, profile.scale, upright=True)
            data = encode_bitmap(bitmap, "jpeg", quality=profile.jpeg_quality)
            image = ImageData(data=data, format="jpeg", width=bitmap.width, height=bitmap.height)
            full_page = Placement(info.width, info.height, 0.0, 0.0)
            page = append_image_page(compressed, image, info.width, info.height, full_page)
            if info.rotation:
                rotate_page(page, info.rotation)
            LOGGER.debug("Compressed page %d into %d byte image", index + 1, len(data))
    return compressed


def compress_pdf(data: bytes, level: str | None = None, *, password: str | None = None) -> CompressionResult:
    profile = get_compression_level(level)
    source = decode(data, password=password)
    output = encode(compress_document(source, profile), compact=profile.compact)
    return CompressionResult(
        data=output,
        level=profile.name,
        original_size=len(data),
        compressed_size=len(output),
    )


@register_tool("compress", aliases=("compress-pdf",))
class CompressTool(BaseTool):
    name = "compress"

    def run(self) -> ResultEnvelope:
        context = self.context
        config = context.config
        level = config.get("level") or config.get("compression_level")
        LOGGER.debug("Compressing input with level %s", level or "<default>")
        result = compress_pdf(context.payload(), level, password=config.get("password"))

        path = context.write(config.get("output_file_name"), result.data, default=DEFAULT_OUTPUT_NAME)
        envelope = ResultEnvelope.ok(
            path=path,
            original_size=result.original_size,
            new_size=result.compressed_size,
            savings=result.bytes_saved,
            percentage=result.percentage,
        )
        context.resources["result"] = envelope
        return envelope
