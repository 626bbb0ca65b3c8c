from __future__ import annotations

from .info import InfoTool, describe_document, get_pdf_info

__all__ = ["InfoTool", "describe_document", "get_pdf_info"]
