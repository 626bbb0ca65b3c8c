from __future__ import annotations

import pytest

from pdfdesk.core.codec import decode
from pdfdesk.core.exceptions import UnsupportedFormatError
from pdfdesk.core.raster import Rasterizer, encode_bitmap, resolve_raster_format


def test_render_scales_page_size(pdf_factory) -> None:
    document = decode(pdf_factory([(100, 200)]))

    with Rasterizer(document) as rasterizer:
        bitmap = rasterizer.render(0, 2.0)

    assert bitmap.mode == "RGB"
    assert bitmap.size == (200, 400)


def test_blank_page_renders_white(pdf_factory) -> None:
    document = decode(pdf_factory([(50, 50)]))

    with Rasterizer(document) as rasterizer:
        bitmap = rasterizer.render(0, 1.0)

    assert bitmap.getpixel((0, 0)) == (255, 255, 255)
    assert bitmap.getpixel((25, 25)) == (255, 255, 255)


def test_upright_render_ignores_rotation(pdf_factory) -> None:
    document = decode(pdf_factory([(100, 200)], rotations=[90]))

    with Rasterizer(document) as rasterizer:
        rotated = rasterizer.render(0, 1.0)
        upright = rasterizer.render(0, 1.0, upright=True)

    assert rotated.size == (200, 100)
    assert upright.size == (100, 200)
    assert document.page_info(0).rotation == 90


def test_render_requires_positive_scale(pdf_factory) -> None:
    with Rasterizer(decode(pdf_factory([(10, 10)]))) as rasterizer:
        with pytest.raises(ValueError):
            rasterizer.render(0, 0)


def test_rasterizer_must_be_open(pdf_factory) -> None:
    rasterizer = Rasterizer(decode(pdf_factory([(10, 10)])))
    with pytest.raises(RuntimeError):
        rasterizer.render(0, 1.0)


def test_encode_bitmap_formats(pdf_factory) -> None:
    with Rasterizer(decode(pdf_factory([(20, 20)]))) as rasterizer:
        bitmap = rasterizer.render(0, 1.0)

    assert encode_bitmap(bitmap, "png").startswith(b"\x89PNG")
    assert encode_bitmap(bitmap, "jpeg", quality=50).startswith(b"\xff\xd8")
    assert encode_bitmap(bitmap, "image/jpg").startswith(b"\xff\xd8")


def test_unknown_raster_format_is_rejected() -> None:
    assert resolve_raster_format("JPG") == ("JPEG", "jpg")
    with pytest.raises(UnsupportedFormatError):
        resolve_raster_format("gif")
