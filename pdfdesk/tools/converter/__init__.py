"""Image conversion tools."""

from __future__ import annotations

from .images import (
    RESOLUTIONS,
    ImagesToPdfTool,
    PdfToImagesTool,
    RenderedImage,
    images_to_document,
    render_document_images,
)

__all__ = [
    "RESOLUTIONS",
    "ImagesToPdfTool",
    "PdfToImagesTool",
    "RenderedImage",
    "images_to_document",
    "render_document_images",
]
