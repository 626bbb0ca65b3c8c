"""Core document engine: codec, page transfer, geometry and rasterization."""

from __future__ import annotations

from .codec import Document, decode, describe_page, encode
from .envelope import ResultEnvelope
from .exceptions import (
    CorruptInputError,
    InvalidDescriptorError,
    PdfDeskError,
    UnsupportedFormatError,
    WriteFailureError,
)
from .geometry import FIT, PAGE_SIZES, Orientation, Placement, fit_image, resolve_page_size
from .imaging import ImageData, append_image_page, decode_image
from .model import DocumentMetadata, PageEdit, PageInfo
from .payload import decode_payload, encode_payload
from .raster import Rasterizer, encode_bitmap
from .transfer import copy_all_pages, copy_pages, rotate_page

__all__ = [
    "Document",
    "DocumentMetadata",
    "PageEdit",
    "PageInfo",
    "decode",
    "encode",
    "describe_page",
    "copy_pages",
    "copy_all_pages",
    "rotate_page",
    "fit_image",
    "resolve_page_size",
    "Placement",
    "Orientation",
    "PAGE_SIZES",
    "FIT",
    "Rasterizer",
    "encode_bitmap",
    "ImageData",
    "decode_image",
    "append_image_page",
    "ResultEnvelope",
    "decode_payload",
    "encode_payload",
    "PdfDeskError",
    "CorruptInputError",
    "UnsupportedFormatError",
    "WriteFailureError",
    "InvalidDescriptorError",
]
