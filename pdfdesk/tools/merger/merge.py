"""Plugin exposing PDF merge capabilities through the registry."""

from __future__ import annotations

from typing import Iterable

from ...core.codec import Document, decode, encode
from ...core.envelope import ResultEnvelope
from ...core.exceptions import InvalidDescriptorError
from ...core.transfer import copy_all_pages
from ...core.utils import get_logger
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("pdfdesk.tools.merge")

DEFAULT_OUTPUT_NAME = "merged.pdf"


def merge_documents(sources: Iterable[Document]) -> Document:
    """Return a new document holding every page of *sources*, in order."""

    merged = Document.create()
    for position, source in enumerate(sources, start=1):
        copy_all_pages(source, merged)
        LOGGER.debug("Appended input #%d (%d page(s))", position, source.page_count)
    return merged


@register_tool("merge", aliases=("merge-pdfs",))
class MergeTool(BaseTool):
    name = "merge"

    def run(self) -> ResultEnvelope:
        context = self.context
        payloads = context.payloads()
        if not payloads:
            raise InvalidDescriptorError("No input PDFs provided")

        password = context.config.get("password")
        sources = [decode(payload, password=password) for payload in payloads]
        LOGGER.debug("Merging %d input(s)", len(sources))
        merged = merge_documents(sources)

        data = encode(merged)
        path = context.write(context.config.get("output_file_name"), data, default=DEFAULT_OUTPUT_NAME)
        result = ResultEnvelope.ok(path=path, size=len(data), page_count=merged.page_count)
        context.resources["result"] = result
        return result
