"""CLI helpers for compressing PDFs."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...tools.common.interfaces import ConversionContext
from ...tools.compressor import LEVELS
from . import add_output_arguments


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("compress", help="Compress a PDF by rasterizing its pages")
    parser.add_argument("input", help="Input PDF file")
    parser.add_argument(
        "--level",
        choices=list(LEVELS),
        default=None,
        help="Compression level (defaults to PDFDESK_COMPRESSION_LEVEL or medium)",
    )
    add_output_arguments(parser, default_name="compressed.pdf")
    parser.set_defaults(tool_name="compress", build_context=_build_context)


def _build_context(args) -> ConversionContext:
    return ConversionContext.from_paths(
        [args.input],
        output_dir=args.output_dir,
        config={"level": args.level, "output_file_name": args.output_file_name},
    )
