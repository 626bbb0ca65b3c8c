"""CLI helpers for image conversion commands."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction
from pathlib import Path

from ...core.geometry import PAGE_SIZES
from ...tools.common.interfaces import ConversionContext
from ...tools.converter import RESOLUTIONS
from . import add_output_arguments

MODES = {
    "images-to-pdf": "images_to_pdf",
    "pdf-to-images": "pdf_to_images",
}


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("convert", help="Convert images to a PDF or PDF pages to images")
    parser.add_argument("inputs", nargs="+", help="Input images, or a single PDF for pdf-to-images")
    parser.add_argument("--mode", choices=sorted(MODES), default="images-to-pdf")
    parser.add_argument(
        "--page-size",
        choices=[*PAGE_SIZES, "fit"],
        default="fit",
        help="Page size for images-to-pdf",
    )
    parser.add_argument("--orientation", choices=["portrait", "landscape"], default="portrait")
    parser.add_argument("--format", choices=["png", "jpeg"], default="png", help="Image format for pdf-to-images")
    parser.add_argument("--resolution", choices=list(RESOLUTIONS), default="high")
    parser.add_argument("--quality", type=int, default=None, help="JPEG quality (1-100)")
    parser.add_argument("--prefix", dest="output_prefix", default=None, help="File name prefix for page images")
    add_output_arguments(parser)
    parser.set_defaults(build_context=_build_context, tool_name_resolver=_select_tool)


def _select_tool(mode: str) -> str:
    return MODES[mode]


def _build_context(args) -> ConversionContext:
    tool_name = _select_tool(args.mode)
    if tool_name == "pdf_to_images":
        config = {
            "format": args.format,
            "resolution": args.resolution,
            "quality": args.quality,
            "output_prefix": args.output_prefix or Path(args.inputs[0]).stem,
        }
        inputs = args.inputs[:1]
    else:
        config = {
            "mime_types": [Path(path).suffix.lstrip(".") or None for path in args.inputs],
            "page_size": args.page_size,
            "orientation": args.orientation,
            "output_file_name": args.output_file_name or "images.pdf",
        }
        inputs = args.inputs
    context = ConversionContext.from_paths(inputs, output_dir=args.output_dir, config=config)
    context.resources["tool_name"] = tool_name
    return context
