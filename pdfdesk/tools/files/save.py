"""Write raw payloads to the output directory."""

from __future__ import annotations

from typing import Sequence

from ...core.envelope import ResultEnvelope
from ...core.exceptions import InvalidDescriptorError
from ...core.utils import get_logger
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("pdfdesk.tools.save")

DEFAULT_FILE_NAME = "download"


@register_tool("save", aliases=("save-file",))
class SaveFileTool(BaseTool):
    name = "save"

    def run(self) -> ResultEnvelope:
        context = self.context
        path = context.write(context.config.get("file_name"), context.payload(), default=DEFAULT_FILE_NAME)
        LOGGER.debug("Saved payload to %s", path)
        result = ResultEnvelope.ok(path=path)
        context.resources["result"] = result
        return result


@register_tool("save_files", aliases=("save-files",))
class SaveFilesTool(BaseTool):
    name = "save_files"

    def run(self) -> ResultEnvelope:
        context = self.context
        names: Sequence[str] = context.config.get("file_names") or ()
        payloads = context.payloads()
        if len(names) != len(payloads):
            raise InvalidDescriptorError(
                f"Expected one file name per payload, got {len(names)} name(s) for {len(payloads)} payload(s)"
            )
        paths = [
            context.write(name, data, default=f"{DEFAULT_FILE_NAME}_{position}")
            for position, (name, data) in enumerate(zip(names, payloads), start=1)
        ]
        LOGGER.debug("Saved %d payload(s)", len(paths))
        result = ResultEnvelope.ok(paths=paths)
        context.resources["result"] = result
        return result
