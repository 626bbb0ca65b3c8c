"""Document codec translating PDF byte buffers to page-addressable documents."""

from __future__ import annotations

import io
import logging
from typing import Sequence

from pypdf import PageObject, PasswordType, PdfReader, PdfWriter

from .exceptions import CorruptInputError, PdfDeskError
from .model import DocumentMetadata, PageInfo

_LOGGER = logging.getLogger("pdfdesk.codec")

DEFAULT_PRODUCER = "pdfdesk"


class Document:
    """In-memory PDF document addressed by 0-based page index.

    Decoded documents wrap a :class:`~pypdf.PdfReader` and are read-only.
    Documents built with :meth:`create` wrap a :class:`~pypdf.PdfWriter` and
    only ever grow by appending pages.
    """

    def __init__(
        self,
        *,
        reader: PdfReader | None = None,
        metadata: DocumentMetadata | None = None,
    ) -> None:
        self._reader = reader
        self._writer: PdfWriter | None = PdfWriter() if reader is None else None
        self.metadata = metadata if metadata is not None else DocumentMetadata()

    @classmethod
    def create(cls, metadata: DocumentMetadata | None = None) -> "Document":
        return cls(metadata=metadata)

    @property
    def read_only(self) -> bool:
        return self._reader is not None

    @property
    def encrypted(self) -> bool:
        """Whether the decoded byte stream was encrypted."""

        return self._reader is not None and bool(self._reader.is_encrypted)

    @property
    def pages(self) -> Sequence[PageObject]:
        if self._reader is not None:
            return self._reader.pages
        assert self._writer is not None
        return self._writer.pages

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def page_info(self, index: int) -> PageInfo:
        return describe_page(self.pages[index])

    def add_page(self, page: PageObject) -> PageObject:
        """Append a copy of *page* and return the copy owned by this document."""

        return self._require_writer().add_page(page)

    def add_blank_page(self, width: float, height: float) -> PageObject:
        return self._require_writer().add_blank_page(width=width, height=height)

    def to_writer(self) -> PdfWriter:
        """Return a writer holding this document's pages."""

        if self._writer is not None:
            return self._writer
        writer = PdfWriter()
        writer.clone_reader_document_root(self._reader)
        return writer

    def _require_writer(self) -> PdfWriter:
        if self._writer is None:
            raise TypeError("Decoded documents are read-only; build output with Document.create()")
        return self._writer

    def __len__(self) -> int:
        return self.page_count

    def __repr__(self) -> str:
        kind = "source" if self.read_only else "destination"
        return f"<Document {kind} pages={self.page_count}>"


def describe_page(page: PageObject) -> PageInfo:
    mediabox = page.mediabox
    return PageInfo(
        width=float(mediabox.width),
        height=float(mediabox.height),
        rotation=int(page.rotation or 0) % 360,
    )


def _open_encrypted(reader: PdfReader, password: str | None) -> None:
    # The password only helps open the file; it is never required to match.
    candidates = [password, ""] if password else [""]
    for candidate in candidates:
        try:
            status = reader.decrypt(candidate)
        except Exception as exc:
            raise CorruptInputError(f"Unsupported PDF encryption: {exc}") from exc
        if status != PasswordType.NOT_DECRYPTED:
            _LOGGER.debug("Opened encrypted PDF (%s)", status.name)
            return
    raise CorruptInputError("PDF is encrypted with a user password and cannot be opened")


def decode(data: bytes, *, password: str | None = None) -> Document:
    """Parse *data* into a read-only :class:`Document`.

    Raises:
        CorruptInputError: When the stream is not a parseable PDF, or is
            encrypted in a way that cannot be bypassed.
    """

    if not data:
        raise CorruptInputError("PDF payload is empty")
    try:
        reader = PdfReader(io.BytesIO(data), strict=False)
    except Exception as exc:
        raise CorruptInputError(f"Failed to parse PDF: {exc}") from exc

    if reader.is_encrypted:
        _open_encrypted(reader, password)

    try:
        page_count = len(reader.pages)
        metadata = DocumentMetadata.from_info(reader.metadata)
    except Exception as exc:
        raise CorruptInputError(f"Failed to read PDF structure: {exc}") from exc

    _LOGGER.debug("Decoded PDF with %d page(s) from %d bytes", page_count, len(data))
    return Document(reader=reader, metadata=metadata)


def encode(document: Document, *, compact: bool = False) -> bytes:
    """Serialise *document* to PDF bytes.

    ``compact`` compresses content streams and merges identical objects. It
    changes the size of the output, never its appearance.
    """

    writer = document.to_writer()
    if compact:
        for page in writer.pages:
            page.compress_content_streams()
        writer.compress_identical_objects()

    info = document.metadata.to_info()
    info.setdefault("/Producer", DEFAULT_PRODUCER)
    writer.add_metadata(info)

    buffer = io.BytesIO()
    try:
        writer.write(buffer)
    except Exception as exc:
        raise PdfDeskError(f"Failed to serialise PDF: {exc}") from exc
    data = buffer.getvalue()
    _LOGGER.debug("Encoded %d page(s) into %d bytes (compact=%s)", len(writer.pages), len(data), compact)
    return data


__all__ = ["Document", "decode", "encode", "describe_page", "DEFAULT_PRODUCER"]
