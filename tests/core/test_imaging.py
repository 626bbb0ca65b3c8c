from __future__ import annotations

import pytest

from pdfdesk.core.exceptions import UnsupportedFormatError
from pdfdesk.core.imaging import decode_image, format_from_mime


@pytest.mark.parametrize(
    ("declared", "expected"),
    [("image/png", "png"), ("image/jpeg", "jpeg"), ("IMAGE/JPG", "jpeg"), ("jpg", "jpeg"), ("", None), (None, None), ("image/webp", None)],
)
def test_format_from_mime(declared, expected) -> None:
    assert format_from_mime(declared) == expected


def test_declared_png_is_decoded(image_factory) -> None:
    image = decode_image(image_factory(30, 20), "image/png")

    assert (image.format, image.width, image.height) == ("png", 30, 20)


@pytest.mark.parametrize("fmt", ["PNG", "JPEG"])
def test_undeclared_type_is_inferred(image_factory, fmt: str) -> None:
    image = decode_image(image_factory(12, 34, fmt=fmt), "application/octet-stream")

    assert image.format == fmt.lower()
    assert (image.width, image.height) == (12, 34)


def test_declared_type_is_not_second_guessed(image_factory) -> None:
    with pytest.raises(UnsupportedFormatError):
        decode_image(image_factory(10, 10, fmt="JPEG"), "image/png")


def test_unreadable_image_is_rejected() -> None:
    with pytest.raises(UnsupportedFormatError):
        decode_image(b"GIF89a not really")
