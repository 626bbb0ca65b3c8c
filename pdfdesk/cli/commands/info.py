"""CLI helpers for inspecting PDFs."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...tools.common.interfaces import ConversionContext


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("info", help="Show page count and metadata of a PDF")
    parser.add_argument("input", help="Input PDF path")
    parser.add_argument("--password", help="Password used to open encrypted PDFs")
    parser.set_defaults(tool_name="info", build_context=_build_context)


def _build_context(args) -> ConversionContext:
    return ConversionContext.from_paths([args.input], config={"password": args.password})
