"""CLI helpers for advisory protection and its removal."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...tools.common.interfaces import ConversionContext
from . import add_output_arguments

MODES = {
    "protect": "protect",
    "unlock": "unlock",
}


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("protect", help="Mark a PDF as protected or remove the marks")
    parser.add_argument("input", help="Input PDF path")
    parser.add_argument("--mode", choices=sorted(MODES), default="protect")
    parser.add_argument("--password", help="Advisory password (never used to encrypt)")
    parser.add_argument("--owner-password", help="Advisory owner password")
    add_output_arguments(parser)
    parser.set_defaults(build_context=_build_context, tool_name_resolver=_resolve_tool_name)


def _resolve_tool_name(mode: str) -> str:
    return MODES[mode]


def _build_context(args) -> ConversionContext:
    tool_name = _resolve_tool_name(args.mode)
    if tool_name == "protect":
        config = {"user_password": args.password, "owner_password": args.owner_password}
    else:
        config = {"password": args.password}
    config["output_file_name"] = args.output_file_name or f"{tool_name}ed.pdf"
    context = ConversionContext.from_paths([args.input], output_dir=args.output_dir, config=config)
    context.resources["tool_name"] = tool_name
    return context
