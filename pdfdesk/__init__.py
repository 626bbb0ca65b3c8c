"""PDF document toolkit: merge, split, organize, compress, convert and mark PDFs."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Sequence

from .config import Settings, get_settings
from .core import (
    CorruptInputError,
    Document,
    InvalidDescriptorError,
    PdfDeskError,
    ResultEnvelope,
    UnsupportedFormatError,
    WriteFailureError,
    decode,
    encode,
)
from .service import handle, handle_async, output_directory
from .tools import load_builtin_plugins
from .tools.common.interfaces import ConversionContext
from .tools.common.pipeline import ToolRegistry, register_tool, registry
from .tools.compressor import CompressionLevel, CompressionResult, compress_document, compress_pdf
from .tools.converter import images_to_document, render_document_images
from .tools.inspector import get_pdf_info
from .tools.merger import merge_documents
from .tools.organizer import organize_document
from .tools.protection import protect_document, unlock_document
from .tools.splitter import split_document

load_builtin_plugins()

__version__ = "0.1.0"

__all__ = [
    "Document",
    "decode",
    "encode",
    "ResultEnvelope",
    "Settings",
    "get_settings",
    "handle",
    "handle_async",
    "output_directory",
    "ConversionContext",
    "ToolRegistry",
    "registry",
    "register_tool",
    "merge_documents",
    "split_document",
    "organize_document",
    "compress_document",
    "compress_pdf",
    "CompressionLevel",
    "CompressionResult",
    "images_to_document",
    "render_document_images",
    "protect_document",
    "unlock_document",
    "get_pdf_info",
    "merge_pdfs",
    "split_pdf",
    "organize_pdf",
    "compress_file",
    "images_to_pdf",
    "pdf_to_images",
    "protect_pdf",
    "unlock_pdf",
    "PdfDeskError",
    "CorruptInputError",
    "UnsupportedFormatError",
    "WriteFailureError",
    "InvalidDescriptorError",
]


def _run(tool_name: str, context: ConversionContext) -> ResultEnvelope:
    tool = registry.create(tool_name, context)
    return tool.run()


def merge_pdfs(
    inputs: Iterable[str | Path],
    output_file_name: str,
    *,
    output_dir: str | Path | None = None,
) -> ResultEnvelope:
    """Convenience wrapper around the merge plugin."""

    context = ConversionContext.from_paths(
        inputs, output_dir=output_dir, config={"output_file_name": output_file_name}
    )
    return _run("merge", context)


def split_pdf(
    input: str | Path,
    pages: Sequence[int | str],
    *,
    mode: str = "range",
    output_file_names: Sequence[str] | None = None,
    output_dir: str | Path | None = None,
) -> ResultEnvelope:
    """Convenience wrapper around the split plugin."""

    context = ConversionContext.from_paths(
        [input],
        output_dir=output_dir,
        config={
            "pages": list(pages),
            "mode": mode,
            "output_file_names": list(output_file_names or ()),
            "base_name": Path(input).stem,
        },
    )
    return _run("split", context)


def organize_pdf(
    input: str | Path,
    operations: Sequence[Any],
    output_file_name: str,
    *,
    output_dir: str | Path | None = None,
) -> ResultEnvelope:
    """Convenience wrapper around the organize plugin."""

    context = ConversionContext.from_paths(
        [input],
        output_dir=output_dir,
        config={"operations": list(operations), "output_file_name": output_file_name},
    )
    return _run("organize", context)


def compress_file(
    input: str | Path,
    output_file_name: str,
    *,
    level: str | None = None,
    output_dir: str | Path | None = None,
) -> ResultEnvelope:
    """Convenience wrapper around the compression plugin."""

    context = ConversionContext.from_paths(
        [input],
        output_dir=output_dir,
        config={"level": level, "output_file_name": output_file_name},
    )
    return _run("compress", context)


def images_to_pdf(
    images: Iterable[str | Path],
    output_file_name: str,
    *,
    page_size: str = "fit",
    orientation: str = "portrait",
    output_dir: str | Path | None = None,
) -> ResultEnvelope:
    """Convenience wrapper around the images-to-PDF plugin.

    Image types are taken from the file extensions.
    """

    paths = [Path(image) for image in images]
    context = ConversionContext.from_paths(
        paths,
        output_dir=output_dir,
        config={
            "mime_types": [path.suffix.lstrip(".") or None for path in paths],
            "page_size": page_size,
            "orientation": orientation,
            "output_file_name": output_file_name,
        },
    )
    return _run("images_to_pdf", context)


def pdf_to_images(
    input: str | Path,
    *,
    format: str = "png",
    resolution: str = "high",
    quality: int | None = None,
    output_prefix: str | None = None,
    output_dir: str | Path | None = None,
) -> ResultEnvelope:
    """Convenience wrapper around the PDF-to-images plugin."""

    context = ConversionContext.from_paths(
        [input],
        output_dir=output_dir,
        config={
            "format": format,
            "resolution": resolution,
            "quality": quality,
            "output_prefix": output_prefix or Path(input).stem,
        },
    )
    return _run("pdf_to_images", context)


def protect_pdf(
    input: str | Path,
    output_file_name: str,
    *,
    user_password: str | None = None,
    owner_password: str | None = None,
    output_dir: str | Path | None = None,
) -> ResultEnvelope:
    """Convenience wrapper around the protect plugin. Nothing is encrypted."""

    context = ConversionContext.from_paths(
        [input],
        output_dir=output_dir,
        config={
            "user_password": user_password,
            "owner_password": owner_password,
            "output_file_name": output_file_name,
        },
    )
    return _run("protect", context)


def unlock_pdf(
    input: str | Path,
    output_file_name: str,
    *,
    password: str | None = None,
    output_dir: str | Path | None = None,
) -> ResultEnvelope:
    """Convenience wrapper around the unlock plugin."""

    context = ConversionContext.from_paths(
        [input],
        output_dir=output_dir,
        config={"password": password, "output_file_name": output_file_name},
    )
    return _run("unlock", context)
