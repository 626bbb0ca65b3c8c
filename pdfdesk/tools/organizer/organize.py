"""Reorder, rotate and delete pages."""

from __future__ import annotations

from typing import Any, Iterable

from ...core.codec import Document, encode
from ...core.envelope import ResultEnvelope
from ...core.exceptions import InvalidDescriptorError
from ...core.transfer import copy_pages
from ...core.utils import get_logger
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("pdfdesk.tools.organize")

DEFAULT_OUTPUT_NAME = "organized.pdf"


def organize_document(source: Document, entries: Iterable[Any]) -> Document:
    """Build a document whose pages follow *entries*.

    Each entry is a 0-based page index or a ``{"page_index", "rotation"}``
    mapping. Entries are applied in order; pages not listed are dropped.
    """

    organized = Document.create(metadata=source.metadata.copy())
    copy_pages(source, organized, entries)
    LOGGER.debug("Organized %d page(s) into %d", source.page_count, organized.page_count)
    return organized


@register_tool("organize", aliases=("organize-pdf",))
class OrganizeTool(BaseTool):
    name = "organize"

    def run(self) -> ResultEnvelope:
        context = self.context
        config = context.config
        entries = config.get("operations")
        if entries is None:
            raise InvalidDescriptorError("Organize requires a list of page operations")

        source = context.load_document(password=config.get("password"))
        organized = organize_document(source, entries)

        data = encode(organized)
        path = context.write(config.get("output_file_name"), data, default=DEFAULT_OUTPUT_NAME)
        message = None
        if organized.page_count == 0:
            message = "No valid pages were selected; the document is empty"
        result = ResultEnvelope.ok(path=path, size=len(data), page_count=organized.page_count, message=message)
        context.resources["result"] = result
        return result
