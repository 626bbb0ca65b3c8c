"""Advisory protection marking and its removal.

Nothing here encrypts a document. ``protect`` stamps a visible marker on
every page and records a notice in the metadata; ``unlock`` rebuilds the
document without the markers. Passwords are informational only.
"""

from __future__ import annotations

from ...core.codec import Document, encode
from ...core.envelope import ResultEnvelope
from ...core.model import DocumentMetadata
from ...core.transfer import copy_all_pages
from ...core.utils import get_logger
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool
from .markers import add_marker, strip_markers

LOGGER = get_logger("pdfdesk.tools.protect")

PROTECTED_KEYWORD = "protected"
NOTICE_KEY = "/ProtectionNotice"
NOTICE_TEXT = "Marked as protected; the content is not encrypted"
CARRIED_FIELDS = ("title", "author", "subject", "creator")


def _protected_metadata(metadata: DocumentMetadata) -> DocumentMetadata:
    updated = metadata.copy()
    keywords = [word.strip() for word in (metadata.keywords or "").split(",") if word.strip()]
    if PROTECTED_KEYWORD not in keywords:
        keywords.append(PROTECTED_KEYWORD)
    updated.keywords = ", ".join(keywords)
    updated.extra[NOTICE_KEY] = NOTICE_TEXT
    return updated


def protect_document(source: Document) -> Document:
    """Return a copy of *source* with a protection marker on every page."""

    protected = Document.create(metadata=_protected_metadata(source.metadata))
    for page in copy_all_pages(source, protected):
        add_marker(page)
    LOGGER.debug("Marked %d page(s) as protected", protected.page_count)
    return protected


def unlock_document(source: Document) -> Document:
    """Return a copy of *source* without protection markers.

    Only the title, author, subject and creator are carried over.
    """

    unlocked = Document.create(metadata=source.metadata.subset(*CARRIED_FIELDS))
    removed = 0
    for page in copy_all_pages(source, unlocked):
        removed += strip_markers(page)
    LOGGER.debug("Unlocked %d page(s), removed %d marker(s)", unlocked.page_count, removed)
    return unlocked


def protection_message(user_password: str | None, owner_password: str | None) -> str:
    supplied = [
        label
        for label, value in (("user", user_password), ("owner", owner_password))
        if value
    ]
    message = "PDF marked as protected. Note: the document is not encrypted."
    if supplied:
        message += f" The {' and '.join(supplied)} password was recorded as advisory only."
    return message


@register_tool("protect", aliases=("protect-pdf",))
class ProtectTool(BaseTool):
    name = "protect"

    def run(self) -> ResultEnvelope:
        context = self.context
        config = context.config
        source = context.load_document()
        protected = protect_document(source)

        data = encode(protected)
        path = context.write(config.get("output_file_name"), data, default="protected.pdf")
        message = protection_message(config.get("user_password"), config.get("owner_password"))
        result = ResultEnvelope.ok(path=path, message=message)
        context.resources["result"] = result
        return result


@register_tool("unlock", aliases=("unlock-pdf",))
class UnlockTool(BaseTool):
    name = "unlock"

    def run(self) -> ResultEnvelope:
        context = self.context
        config = context.config
        source = context.load_document(password=config.get("password"))
        unlocked = unlock_document(source)

        data = encode(unlocked)
        path = context.write(config.get("output_file_name"), data, default="unlocked.pdf")
        result = ResultEnvelope.ok(path=path, page_count=unlocked.page_count)
        context.resources["result"] = result
        return result
