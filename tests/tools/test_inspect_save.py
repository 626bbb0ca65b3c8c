from __future__ import annotations

from pathlib import Path

import pytest

from pdfdesk.core.exceptions import InvalidDescriptorError
from pdfdesk.tools import load_builtin_plugins
from pdfdesk.tools.common.interfaces import ConversionContext
from pdfdesk.tools.common.pipeline import registry
from pdfdesk.tools.inspector import get_pdf_info


def setup_module(module):
    load_builtin_plugins()


def test_info_reports_pages_and_metadata(sample_pdf_bytes: bytes, output_dir: Path) -> None:
    context = ConversionContext(inputs=[sample_pdf_bytes])

    result = registry.create("get-pdf-info", context).run()

    assert result.to_dict() == {"success": True, "pageCount": 5}
    info = context.resources["info"]
    assert info["is_encrypted"] is False
    assert info["metadata"]["title"] == "Sample"
    assert info["page_sizes"][2] == {"width": 300.0, "height": 300.0, "rotation": 0}


def test_get_pdf_info_counts_pages(pdf_factory) -> None:
    assert get_pdf_info(pdf_factory([(10, 10)] * 3))["pages"] == 3


def test_save_file_writes_payload(output_dir: Path) -> None:
    context = ConversionContext(inputs=[b"hello"], config={"file_name": "../notes.txt"})

    result = registry.create("save-file", context).run()

    assert result.path == output_dir / "notes.txt"
    assert result.path.read_bytes() == b"hello"


def test_save_files_writes_each_payload(output_dir: Path) -> None:
    context = ConversionContext(inputs=[b"one", "dHdv"], config={"file_names": ["1.txt", "2.txt"]})

    result = registry.create("save-files", context).run()

    assert [path.name for path in result.paths] == ["1.txt", "2.txt"]
    assert [path.read_bytes() for path in result.paths] == [b"one", b"two"]


def test_save_files_requires_matching_names(output_dir: Path) -> None:
    context = ConversionContext(inputs=[b"one", b"two"], config={"file_names": ["1.txt"]})
    with pytest.raises(InvalidDescriptorError):
        registry.create("save_files", context).run()
