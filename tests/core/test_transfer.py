from __future__ import annotations

import pytest

from pdfdesk.core.codec import Document, decode, encode
from pdfdesk.core.exceptions import InvalidDescriptorError
from pdfdesk.core.model import PageEdit
from pdfdesk.core.transfer import copy_all_pages, copy_pages, rotate_page


def _widths(document: Document) -> list[int]:
    return [round(document.page_info(index).width) for index in range(document.page_count)]


def test_invalid_indices_are_filtered(sample_pdf_bytes: bytes) -> None:
    source = decode(sample_pdf_bytes)
    destination = Document.create()

    copied = copy_pages(source, destination, [4, 7, -1, 0, "x", None, 2])

    assert len(copied) == 3
    assert _widths(destination) == [500, 100, 300]


def test_all_invalid_selection_copies_nothing(sample_pdf_bytes: bytes) -> None:
    destination = Document.create()

    assert copy_pages(decode(sample_pdf_bytes), destination, [5, 99, -3]) == []
    assert destination.page_count == 0


def test_duplicates_are_independent(sample_pdf_bytes: bytes) -> None:
    source = decode(sample_pdf_bytes)
    destination = Document.create()

    copy_pages(source, destination, [PageEdit(1, 90), 1])

    assert _widths(destination) == [200, 200]
    assert destination.page_info(0).rotation == 90
    assert destination.page_info(1).rotation == 0


def test_source_is_never_mutated(sample_pdf_bytes: bytes) -> None:
    source = decode(sample_pdf_bytes)
    destination = Document.create()

    copy_pages(source, destination, [PageEdit(0, 180)])

    assert source.page_info(0).rotation == 0
    assert destination.page_info(0).rotation == 180


@pytest.mark.parametrize(
    ("initial", "delta", "expected"),
    [(0, 90, 90), (90, 270, 0), (270, 180, 90), (180, -90, 90), (0, -90, 270), (90, 720, 90)],
)
def test_rotation_composes_modulo_360(pdf_factory, initial: int, delta: int, expected: int) -> None:
    source = decode(pdf_factory([(100, 200)], rotations=[initial]))
    destination = Document.create()
    page = copy_all_pages(source, destination)[0]

    assert rotate_page(page, delta) == expected
    assert decode(encode(destination)).page_info(0).rotation == expected


def test_rotation_must_be_multiple_of_90(pdf_factory) -> None:
    destination = Document.create()
    with pytest.raises(InvalidDescriptorError):
        copy_pages(decode(pdf_factory([(100, 200)])), destination, [PageEdit(0, 45)])
