"""Merge several PDF documents into one."""

from __future__ import annotations

from .merge import MergeTool, merge_documents

__all__ = ["MergeTool", "merge_documents"]
