from __future__ import annotations

from .organize import OrganizeTool, organize_document

__all__ = ["OrganizeTool", "organize_document"]
