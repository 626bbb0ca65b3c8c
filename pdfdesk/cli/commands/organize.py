"""CLI helpers for reordering, rotating and deleting pages."""

from __future__ import annotations

from argparse import ArgumentParser, ArgumentTypeError, _SubParsersAction

from ...core.model import PageEdit
from ...tools.common.interfaces import ConversionContext
from . import add_output_arguments


def parse_page_edit(token: str) -> PageEdit:
    """Parse ``INDEX`` or ``INDEX:ROTATION`` (0-based index)."""

    index, _, rotation = token.partition(":")
    try:
        return PageEdit(int(index), int(rotation or 0))
    except ValueError as exc:
        raise ArgumentTypeError(f"Invalid page entry {token!r}; expected INDEX or INDEX:ROTATION") from exc


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("organize", help="Reorder, rotate or delete pages")
    parser.add_argument("input", help="Input PDF file")
    parser.add_argument(
        "entries",
        nargs="+",
        type=parse_page_edit,
        help="Pages to keep as 0-based INDEX or INDEX:ROTATION, in output order",
    )
    add_output_arguments(parser, default_name="organized.pdf")
    parser.set_defaults(tool_name="organize", build_context=_build_context)


def _build_context(args) -> ConversionContext:
    return ConversionContext.from_paths(
        [args.input],
        output_dir=args.output_dir,
        config={"operations": args.entries, "output_file_name": args.output_file_name},
    )
