"""CLI helpers for the split command."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction
from pathlib import Path

from ...tools.common.interfaces import ConversionContext
from . import add_output_arguments


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("split", help="Extract pages into one or several PDFs")
    parser.add_argument("input", help="Input PDF file")
    parser.add_argument("pages", nargs="+", type=int, help="1-based page numbers, in output order")
    parser.add_argument(
        "--mode",
        choices=["range", "pages"],
        default="range",
        help="'range' writes one PDF, 'pages' writes one PDF per page",
    )
    parser.add_argument(
        "--name",
        dest="output_file_names",
        action="append",
        default=None,
        help="Output file name; repeat once per page with --mode pages",
    )
    add_output_arguments(parser)
    parser.set_defaults(tool_name="split", build_context=_build_context)


def _build_context(args) -> ConversionContext:
    names = list(args.output_file_names or ())
    if args.output_file_name:
        names.insert(0, args.output_file_name)
    return ConversionContext.from_paths(
        [args.input],
        output_dir=args.output_dir,
        config={
            "mode": args.mode,
            "pages": args.pages,
            "output_file_names": names,
            "base_name": Path(args.input).stem,
        },
    )
