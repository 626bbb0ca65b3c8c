from __future__ import annotations

from .save import SaveFilesTool, SaveFileTool

__all__ = ["SaveFileTool", "SaveFilesTool"]
