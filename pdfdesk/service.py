"""Request/envelope boundary in front of the tool registry.

Callers hand over plain mappings such as::

    {"operation": "merge-pdfs", "pdfDataArray": [...], "outputFileName": "out.pdf"}

and always get a :class:`~pdfdesk.core.envelope.ResultEnvelope` back. Every
failure, whatever its type, is reported through the envelope.
"""

from __future__ import annotations

import asyncio
import re
from pathlib import Path
from typing import Any, Mapping

from .config import get_settings
from .core.envelope import ResultEnvelope
from .core.exceptions import InvalidDescriptorError
from .core.utils import get_logger
from .tools import load_builtin_plugins
from .tools.common.interfaces import ConversionContext
from .tools.common.pipeline import registry

LOGGER = get_logger("pdfdesk.service")

OUTPUT_DIRECTORY_OPERATION = "get-downloads-path"

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

load_builtin_plugins()


def snake_case(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).replace("-", "_").lower()


def normalize_params(params: Mapping[str, Any]) -> dict[str, Any]:
    return {snake_case(str(key)): value for key, value in params.items()}


def _split_entries(entries: Any, key: str, label: str) -> tuple[list[Any], list[Any]]:
    """Split ``[{"data": ..., key: ...}]`` entries into payloads and labels."""

    if not isinstance(entries, (list, tuple)):
        raise InvalidDescriptorError(f"{label} must be a list")
    payloads: list[Any] = []
    values: list[Any] = []
    for entry in entries:
        if not isinstance(entry, Mapping):
            raise InvalidDescriptorError(f"Each entry of {label} must be a mapping")
        entry = normalize_params(entry)
        if "data" not in entry:
            raise InvalidDescriptorError(f"An entry of {label} has no data")
        payloads.append(entry["data"])
        values.append(entry.get(key))
    return payloads, values


def build_context(
    params: Mapping[str, Any],
    *,
    output_dir: str | Path | None = None,
) -> ConversionContext:
    """Move binary payloads out of *params* into a :class:`ConversionContext`."""

    config = normalize_params(params)
    inputs: list[Any] = []
    if "pdf_data" in config:
        inputs.append(config.pop("pdf_data"))
    if "pdf_data_array" in config:
        inputs.extend(config.pop("pdf_data_array") or ())
    if "images" in config:
        payloads, mime_types = _split_entries(config.pop("images"), "type", "images")
        inputs.extend(payloads)
        config["mime_types"] = mime_types
    if "files" in config:
        payloads, names = _split_entries(config.pop("files"), "file_name", "files")
        inputs.extend(payloads)
        config["file_names"] = names
    if "data" in config:
        inputs.append(config.pop("data"))
    return ConversionContext(inputs=inputs, output_dir=output_dir, config=config)


def output_directory() -> Path:
    """Return the directory every operation writes into."""

    return get_settings().output_dir


def execute(operation: str, context: ConversionContext) -> ResultEnvelope:
    """Run *operation* and return its envelope; errors propagate."""

    try:
        tool_name = registry.resolve(operation)
    except KeyError as exc:
        raise InvalidDescriptorError(f"Unknown operation: {operation!r}") from exc
    LOGGER.debug("Running %s with %d input(s)", tool_name, len(context.inputs))
    tool = registry.create(tool_name, context)
    return tool.run()


def _unpack(request: Mapping[str, Any]) -> tuple[str, Mapping[str, Any]]:
    if not isinstance(request, Mapping):
        raise InvalidDescriptorError("Request must be a mapping")
    operation = request.get("operation")
    if not operation:
        raise InvalidDescriptorError("Request has no operation")
    params = request.get("params")
    if params is None:
        params = {key: value for key, value in request.items() if key != "operation"}
    elif not isinstance(params, Mapping):
        raise InvalidDescriptorError("Request params must be a mapping")
    return str(operation), params


def handle(request: Mapping[str, Any], *, output_dir: str | Path | None = None) -> ResultEnvelope:
    """Run one request and report the outcome, never raising."""

    operation = request.get("operation") if isinstance(request, Mapping) else None
    try:
        operation, params = _unpack(request)
        if operation == OUTPUT_DIRECTORY_OPERATION:
            return ResultEnvelope.ok(path=output_directory())
        context = build_context(params, output_dir=output_dir)
        return execute(operation, context)
    except Exception as exc:
        LOGGER.error("Operation %s failed: %s", operation or "<unknown>", exc)
        LOGGER.debug("Failure details", exc_info=True)
        return ResultEnvelope.failure(exc)


async def handle_async(
    request: Mapping[str, Any],
    *,
    output_dir: str | Path | None = None,
) -> ResultEnvelope:
    """Run :func:`handle` in a worker thread."""

    return await asyncio.to_thread(handle, request, output_dir=output_dir)


__all__ = [
    "handle",
    "handle_async",
    "execute",
    "build_context",
    "normalize_params",
    "output_directory",
    "snake_case",
]
