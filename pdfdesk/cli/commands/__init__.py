"""Subcommands of the pdfdesk CLI."""

from __future__ import annotations

from argparse import ArgumentParser


def add_output_arguments(parser: ArgumentParser, *, default_name: str | None = None) -> None:
    parser.add_argument(
        "-o",
        "--output",
        dest="output_file_name",
        default=default_name,
        help="Output file name (written inside the output directory)",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for outputs (defaults to PDFDESK_OUTPUT_DIR or ~/Downloads)",
    )
