"""Command line interface for the pdfdesk toolkit."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Sequence

from ..config import get_settings
from ..core.envelope import ResultEnvelope
from ..core.utils import configure_logging, get_logger
from ..tools import load_builtin_plugins
from ..tools.common.interfaces import ConversionContext
from ..tools.common.pipeline import registry
from .commands import compress, convert, info, merge, organize, protect, split

COMMAND_MODULES = [merge, split, organize, compress, convert, protect, info]

LOGGER = get_logger("pdfdesk.cli")


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pdfdesk", description="pdfdesk CLI")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (defaults to PDFDESK_LOG_LEVEL or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True
    for module in COMMAND_MODULES:
        module.configure_parser(subparsers)
    return parser


def _resolve_tool_name(args, context: ConversionContext) -> str:
    tool_name = getattr(args, "tool_name", None)
    if tool_name:
        return tool_name
    if "tool_name" in context.resources:
        return context.resources["tool_name"]
    resolver = getattr(args, "tool_name_resolver", None)
    mode = getattr(args, "mode", None)
    if resolver is not None and mode is not None:
        return resolver(mode)
    raise SystemExit("Unable to determine tool name from arguments")


def main(argv: Sequence[str] | None = None) -> int:
    load_builtin_plugins()
    parser = _create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level or get_settings().log_level)

    context: ConversionContext | None = None
    try:
        context = args.build_context(args)
        tool = registry.create(_resolve_tool_name(args, context), context)
        result = tool.run()
    except Exception as exc:
        LOGGER.error("%s failed: %s", args.command, exc)
        result = ResultEnvelope.failure(exc)

    output = result.to_dict()
    if context is not None and "info" in context.resources:
        output["info"] = context.resources["info"]
    print(json.dumps(output, indent=2))
    return 0 if result.success else 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
