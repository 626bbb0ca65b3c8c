"""Writing operation outputs into the configured output directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .exceptions import WriteFailureError
from .validator import safe_filename

_LOGGER = logging.getLogger("pdfdesk.storage")


def write_output(output_dir: Path, file_name: str | None, data: bytes, *, default: str = "output.pdf") -> Path:
    """Write *data* as *file_name* inside *output_dir* and return the path.

    Only the final component of *file_name* is used, so callers cannot escape
    the output directory.
    """

    destination = output_dir / safe_filename(file_name, default)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(data)
    except OSError as exc:
        _LOGGER.error("Failed to write %s: %s", destination, exc)
        raise WriteFailureError(f"Unable to write {destination}: {exc.strerror or exc}") from exc
    _LOGGER.debug("Wrote %d bytes to %s", len(data), destination)
    return destination


def remove_outputs(paths: Iterable[Path]) -> None:
    """Delete previously written outputs, ignoring files that are already gone."""

    for path in paths:
        try:
            path.unlink()
        except FileNotFoundError:
            continue
        except OSError as exc:
            _LOGGER.warning("Failed to remove partial output %s: %s", path, exc)


__all__ = ["write_output", "remove_outputs"]
