"""Split a PDF into a page range or into single-page documents."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Iterator

from ...core.codec import Document, encode
from ...core.envelope import ResultEnvelope
from ...core.exceptions import InvalidDescriptorError
from ...core.storage import remove_outputs
from ...core.transfer import copy_pages
from ...core.utils import get_logger
from ...core.validator import page_numbers_to_indices
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool
from .utils import build_output_filename, requested_name

LOGGER = get_logger("pdfdesk.tools.split")


class SplitMode(str, Enum):
    RANGE = "range"
    PAGES = "pages"

    @classmethod
    def parse(cls, value: "SplitMode | str | None") -> "SplitMode":
        if isinstance(value, cls):
            return value
        try:
            return cls((value or cls.RANGE.value).lower())
        except ValueError as exc:
            raise InvalidDescriptorError(f"Unsupported split mode: {value!r}") from exc


@dataclass(frozen=True, slots=True)
class SplitPart:
    """One split output.

    ``position`` is the index of the request entry that produced the part and
    selects its output name; ``page_number`` is ``None`` for range splits.
    """

    position: int
    page_number: int | None
    document: Document


def iter_split_parts(
    source: Document,
    pages: Iterable[Any],
    mode: SplitMode | str = SplitMode.RANGE,
) -> Iterator[SplitPart]:
    """Yield split outputs lazily, one document at a time.

    Page numbers are 1-based. In range mode the valid pages, reordered and
    duplicated as requested, form one document. In per-page mode every valid
    page becomes its own document and invalid page numbers yield nothing.
    """

    requested = list(pages)
    if SplitMode.parse(mode) is SplitMode.RANGE:
        document = Document.create()
        copy_pages(source, document, page_numbers_to_indices(requested, source.page_count))
        yield SplitPart(position=0, page_number=None, document=document)
        return

    for position, number in enumerate(requested):
        indices = page_numbers_to_indices([number], source.page_count)
        if not indices:
            continue
        document = Document.create()
        copy_pages(source, document, indices)
        yield SplitPart(position=position, page_number=indices[0] + 1, document=document)


def split_document(
    source: Document,
    pages: Iterable[Any],
    mode: SplitMode | str = SplitMode.RANGE,
) -> list[SplitPart]:
    return list(iter_split_parts(source, pages, mode))


@register_tool("split", aliases=("split-pdf",))
class SplitTool(BaseTool):
    """Write split outputs to the output directory.

    Per-page outputs are written as they are produced. When a later page
    fails, the files already written by this call are removed again and the
    error propagates, so a failed split never leaves partial output behind.
    """

    name = "split"

    def run(self) -> ResultEnvelope:
        context = self.context
        config = context.config
        source = context.load_document(password=config.get("password"))
        pages = config.get("pages")
        if pages is None:
            raise InvalidDescriptorError("Split requires a list of page numbers")
        mode = SplitMode.parse(config.get("mode"))
        names = config.get("output_file_names") or ()
        base_name = config.get("base_name")

        written: list[Path] = []
        occurrences: Counter[int | None] = Counter()
        try:
            for part in iter_split_parts(source, pages, mode):
                occurrences[part.page_number] += 1
                default = build_output_filename(base_name, part.page_number, occurrences[part.page_number])
                data = encode(part.document)
                path = context.write(requested_name(names, part.position), data, default=default)
                LOGGER.debug("Wrote split part %s to %s", part.page_number or "range", path)
                written.append(path)
        except Exception:
            if written:
                LOGGER.warning("Split failed; removing %d partial output(s)", len(written))
                remove_outputs(written)
            raise

        message = None
        if not written:
            message = "No valid pages were selected; nothing was written"
        result = ResultEnvelope.ok(paths=written, count=len(written), message=message)
        context.resources["result"] = result
        return result
