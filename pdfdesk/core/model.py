"""Shared domain models used across pdfdesk tools."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping

_INFO_KEYS = {
    "title": "/Title",
    "author": "/Author",
    "subject": "/Subject",
    "keywords": "/Keywords",
    "producer": "/Producer",
    "creator": "/Creator",
}


@dataclass(slots=True)
class DocumentMetadata:
    title: str | None = None
    author: str | None = None
    subject: str | None = None
    keywords: str | None = None
    producer: str | None = None
    creator: str | None = None
    extra: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_info(cls, info: Mapping[str, Any] | None) -> "DocumentMetadata":
        """Build metadata from a PDF information dictionary."""

        metadata = cls()
        if not info:
            return metadata
        reverse = {value: key for key, value in _INFO_KEYS.items()}
        for key, value in info.items():
            if value is None or not isinstance(key, str):
                continue
            attribute = reverse.get(key)
            if attribute is not None:
                setattr(metadata, attribute, str(value))
            elif key not in ("/CreationDate", "/ModDate"):
                metadata.extra[key] = str(value)
        return metadata

    def to_info(self) -> dict[str, str]:
        info = {
            pdf_key: getattr(self, attribute)
            for attribute, pdf_key in _INFO_KEYS.items()
            if getattr(self, attribute)
        }
        info.update({key: value for key, value in self.extra.items() if value})
        return info

    def copy(self) -> "DocumentMetadata":
        return replace(self, extra=dict(self.extra))

    def subset(self, *fields: str) -> "DocumentMetadata":
        """Return a copy carrying only *fields*."""

        return DocumentMetadata(**{name: getattr(self, name) for name in fields})


@dataclass(frozen=True, slots=True)
class PageInfo:
    """Geometry of a single page, in points."""

    width: float
    height: float
    rotation: int = 0


@dataclass(frozen=True, slots=True)
class PageEdit:
    """One entry of a page selection: a 0-based index plus a rotation delta."""

    index: int
    rotation: int = 0


__all__ = ["DocumentMetadata", "PageInfo", "PageEdit"]
