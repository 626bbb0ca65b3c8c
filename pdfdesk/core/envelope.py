"""Uniform result envelope returned by every operation."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Iterable

_WIRE_NAMES = {
    "page_count": "pageCount",
    "original_size": "originalSize",
    "new_size": "newSize",
    "error_type": "errorType",
}


@dataclass(frozen=True, slots=True)
class ResultEnvelope:
    """Outcome of one operation call.

    A successful envelope carries whichever of the optional fields are relevant
    to the operation; a failed one carries ``error`` and ``error_type``.
    Instances are immutable once returned.
    """

    success: bool
    path: Path | None = None
    paths: tuple[Path, ...] = ()
    size: int | None = None
    page_count: int | None = None
    count: int | None = None
    original_size: int | None = None
    new_size: int | None = None
    savings: int | None = None
    percentage: int | None = None
    message: str | None = None
    error: str | None = None
    error_type: str | None = None

    @classmethod
    def ok(cls, *, paths: Iterable[Path] = (), **values: Any) -> "ResultEnvelope":
        return cls(success=True, paths=tuple(paths), **values)

    @classmethod
    def failure(cls, error: BaseException | str) -> "ResultEnvelope":
        if isinstance(error, BaseException):
            message = str(error) or type(error).__name__
            return cls(success=False, error=message, error_type=type(error).__name__)
        return cls(success=False, error=str(error))

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase wire representation, omitting unset fields."""

        payload: dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if item.name == "paths":
                if value or self.count is not None:
                    payload["paths"] = [str(path) for path in value]
                continue
            if value is None:
                continue
            if isinstance(value, Path):
                value = str(value)
            payload[_WIRE_NAMES.get(item.name, item.name)] = value
        return payload


__all__ = ["ResultEnvelope"]
