from __future__ import annotations

import asyncio
import base64
from pathlib import Path

import pytest

from pdfdesk import service
from pdfdesk.service import handle, handle_async, normalize_params, output_directory


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def test_camel_case_merge_request(pdf_factory, page_widths, output_dir: Path) -> None:
    request = {
        "operation": "merge-pdfs",
        "pdfDataArray": [_b64(pdf_factory([(100, 100)])), pdf_factory([(200, 100)])],
        "outputFileName": "merged.pdf",
    }

    result = handle(request)

    assert result.success, result.error
    payload = result.to_dict()
    assert payload["path"] == str(output_dir / "merged.pdf")
    assert payload["pageCount"] == 2
    assert page_widths(result.path) == [100, 200]


def test_params_form_with_snake_case(sample_pdf_bytes: bytes, output_dir: Path) -> None:
    request = {
        "operation": "split",
        "params": {"pdf_data": sample_pdf_bytes, "pages": [1, 2], "mode": "pages", "output_file_names": ["a.pdf", "b.pdf"]},
    }

    result = handle(request)

    assert result.to_dict() == {
        "success": True,
        "paths": [str(output_dir / "a.pdf"), str(output_dir / "b.pdf")],
        "count": 2,
    }


def test_images_request(image_factory, output_dir: Path) -> None:
    request = {
        "operation": "images-to-pdf",
        "images": [{"data": _b64(image_factory(30, 20)), "type": "image/png"}],
        "pageSize": "letter",
        "orientation": "landscape",
        "outputFileName": "img.pdf",
    }

    result = handle(request)

    assert result.success, result.error
    assert result.page_count == 1


def test_save_files_request(output_dir: Path) -> None:
    request = {
        "operation": "save-files",
        "files": [{"fileName": "a.txt", "data": _b64(b"A")}, {"fileName": "b.txt", "data": b"B"}],
    }

    result = handle(request)

    assert [path.read_bytes() for path in result.paths] == [b"A", b"B"]


@pytest.mark.parametrize(
    ("request_", "error_type"),
    [
        ({"operation": "get-pdf-info", "pdfData": _b64(b"garbage")}, "CorruptInputError"),
        ({"operation": "get-pdf-info", "pdfData": "%%% not base64"}, "CorruptInputError"),
        ({"operation": "teleport"}, "InvalidDescriptorError"),
        ({"pdfData": "x"}, "InvalidDescriptorError"),
        ({"operation": "split-pdf", "pdfData": b"%PDF"}, "CorruptInputError"),
        ({"operation": "images-to-pdf", "images": [{"data": _b64(b"xx"), "type": "image/gif"}]}, "UnsupportedFormatError"),
    ],
)
def test_failures_become_envelopes(request_, error_type: str, output_dir: Path) -> None:
    result = handle(request_)

    assert not result.success
    assert result.error
    assert result.error_type == error_type


def test_non_mapping_request_is_reported() -> None:
    result = handle(["merge"])  # type: ignore[arg-type]

    assert not result.success
    assert result.error_type == "InvalidDescriptorError"


def test_unwritable_output_directory(sample_pdf_bytes: bytes, tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    result = handle({"operation": "organize-pdf", "pdfData": sample_pdf_bytes, "operations": [0]}, output_dir=blocker)

    assert not result.success
    assert result.error_type == "WriteFailureError"


def test_split_rollback_is_reported_as_failure(
    sample_pdf_bytes: bytes,
    output_dir: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Per-page split outputs are removed when a later page fails."""

    from pdfdesk.tools.splitter import split as split_module

    real_encode = split_module.encode
    calls = {"count": 0}

    def failing_second(document, **kwargs):
        calls["count"] += 1
        if calls["count"] == 2:
            raise OSError("device not ready")
        return real_encode(document, **kwargs)

    monkeypatch.setattr(split_module, "encode", failing_second)

    result = handle({"operation": "split-pdf", "pdfData": sample_pdf_bytes, "pages": [1, 2], "mode": "pages"})

    assert not result.success
    assert "device not ready" in result.error
    assert list(output_dir.iterdir()) == []


def test_output_directory_follows_environment(output_dir: Path) -> None:
    assert output_directory() == output_dir
    result = handle({"operation": service.OUTPUT_DIRECTORY_OPERATION})
    assert result.path == output_dir


def test_handle_async_runs_operations_concurrently(pdf_factory, output_dir: Path) -> None:
    async def run_all():
        return await asyncio.gather(
            *(
                handle_async({"operation": "get-pdf-info", "pdfData": pdf_factory([(10, 10)] * count)})
                for count in (1, 2, 3)
            )
        )

    results = asyncio.run(run_all())

    assert [result.page_count for result in results] == [1, 2, 3]


def test_normalize_params() -> None:
    assert normalize_params({"pdfDataArray": 1, "outputFileNames": 2, "page_size": 3}) == {
        "pdf_data_array": 1,
        "output_file_names": 2,
        "page_size": 3,
    }
