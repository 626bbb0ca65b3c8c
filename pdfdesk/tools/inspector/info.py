"""Basic document information."""

from __future__ import annotations

import dataclasses
from typing import Any, Dict

from ...core.codec import Document, decode
from ...core.envelope import ResultEnvelope
from ...core.utils import get_logger
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("pdfdesk.tools.info")


def describe_document(document: Document) -> Dict[str, Any]:
    """Return page count, encryption flag, metadata and page geometry."""

    metadata = {
        key: value
        for key, value in dataclasses.asdict(document.metadata).items()
        if value and key != "extra"
    }
    metadata.update(document.metadata.extra)
    return {
        "pages": document.page_count,
        "is_encrypted": document.encrypted,
        "metadata": metadata,
        "page_sizes": [
            dataclasses.asdict(document.page_info(index)) for index in range(document.page_count)
        ],
    }


def get_pdf_info(data: bytes, *, password: str | None = None) -> Dict[str, Any]:
    return describe_document(decode(data, password=password))


@register_tool("info", aliases=("get-pdf-info",))
class InfoTool(BaseTool):
    name = "info"

    def run(self) -> ResultEnvelope:
        context = self.context
        info = get_pdf_info(context.payload(), password=context.config.get("password"))
        LOGGER.debug("Inspected document: %d page(s), encrypted=%s", info["pages"], info["is_encrypted"])
        context.resources["info"] = info
        result = ResultEnvelope.ok(page_count=info["pages"])
        context.resources["result"] = result
        return result
