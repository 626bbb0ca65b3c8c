"""Advisory protection tools."""

from __future__ import annotations

from .markers import MARKER_TEXT, add_marker, strip_markers
from .protect import ProtectTool, UnlockTool, protect_document, unlock_document

__all__ = [
    "MARKER_TEXT",
    "add_marker",
    "strip_markers",
    "ProtectTool",
    "UnlockTool",
    "protect_document",
    "unlock_document",
]
