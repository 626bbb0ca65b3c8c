from __future__ import annotations

import io
import random
from pathlib import Path
from typing import Callable, Sequence
import sys

import pytest
from PIL import Image
from pypdf import PdfReader, PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pdfdesk.config import OUTPUT_DIR_ENV  # noqa: E402

# Page widths identify pages: page n of the sample is n * 100 points wide.
SAMPLE_HEIGHT = 300


def build_pdf(
    sizes: Sequence[tuple[float, float]],
    *,
    title: str | None = None,
    rotations: Sequence[int] | None = None,
) -> bytes:
    writer = PdfWriter()
    for width, height in sizes:
        writer.add_blank_page(width=width, height=height)
    for page, rotation in zip(writer.pages, rotations or ()):
        if rotation:
            page.rotate(rotation)
    if title is not None:
        writer.add_metadata({"/Title": title, "/Author": "pdfdesk-tests"})
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


@pytest.fixture()
def pdf_factory() -> Callable[..., bytes]:
    return build_pdf


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    return build_pdf([(100 * n, SAMPLE_HEIGHT) for n in range(1, 6)], title="Sample")


@pytest.fixture()
def sample_pdf(tmp_path: Path, sample_pdf_bytes: bytes) -> Path:
    path = tmp_path / "sample.pdf"
    path.write_bytes(sample_pdf_bytes)
    return path


@pytest.fixture()
def output_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    directory = tmp_path / "out"
    monkeypatch.setenv(OUTPUT_DIR_ENV, str(directory))
    return directory


@pytest.fixture()
def image_factory() -> Callable[..., bytes]:
    def _create(width: int, height: int, color: str = "red", fmt: str = "PNG") -> bytes:
        buffer = io.BytesIO()
        Image.new("RGB", (width, height), color).save(buffer, format=fmt)
        return buffer.getvalue()

    return _create


@pytest.fixture()
def noise_image() -> bytes:
    rng = random.Random(1234)
    size = (200, 200)
    pixels = bytes(rng.randrange(256) for _ in range(size[0] * size[1] * 3))
    buffer = io.BytesIO()
    Image.frombytes("RGB", size, pixels).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture()
def read_pdf() -> Callable[[bytes | Path], PdfReader]:
    def _read(source: bytes | Path) -> PdfReader:
        if isinstance(source, Path):
            source = source.read_bytes()
        return PdfReader(io.BytesIO(source))

    return _read


@pytest.fixture()
def page_widths(read_pdf: Callable[[bytes | Path], PdfReader]) -> Callable[[bytes | Path], list[int]]:
    def _widths(source: bytes | Path) -> list[int]:
        return [round(float(page.mediabox.width)) for page in read_pdf(source).pages]

    return _widths
