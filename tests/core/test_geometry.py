from __future__ import annotations

import pytest

from pdfdesk.core.geometry import PAGE_SIZES, Orientation, Placement, fit_image, resolve_page_size


@pytest.mark.parametrize(
    ("image", "page"),
    [
        ((800, 600), (595.28, 841.89)),
        ((600, 800), (841.89, 595.28)),
        ((1000, 10), (612, 792)),
        ((10, 1000), (612, 792)),
        ((612, 792), (612, 792)),
    ],
)
def test_fit_stays_inside_page_and_keeps_aspect(image, page) -> None:
    placement = fit_image(*image, *page)

    assert placement.width <= page[0] + 1e-6
    assert placement.height <= page[1] + 1e-6
    assert placement.x >= 0 and placement.y >= 0
    assert placement.width / placement.height == pytest.approx(image[0] / image[1])
    # One dimension always spans the page.
    assert placement.width == pytest.approx(page[0]) or placement.height == pytest.approx(page[1])


def test_wide_image_is_centred_vertically() -> None:
    placement = fit_image(800, 600, 595.28, 841.89)

    assert placement.width == pytest.approx(595.28)
    assert placement.height == pytest.approx(446.46)
    assert placement.x == 0
    assert placement.y == pytest.approx((841.89 - 446.46) / 2)


def test_tall_image_is_centred_horizontally() -> None:
    placement = fit_image(100, 400, 400, 400)

    assert placement == Placement(width=100, height=400, x=150, y=0)


def test_exact_fit_has_no_offset() -> None:
    assert fit_image(800, 600, 800, 600) == Placement(800, 600, 0, 0)


@pytest.mark.parametrize("bad", [(0, 10, 10, 10), (10, -1, 10, 10), (10, 10, 0, 10)])
def test_fit_rejects_non_positive_dimensions(bad) -> None:
    with pytest.raises(ValueError):
        fit_image(*bad)


@pytest.mark.parametrize("size_class", sorted(PAGE_SIZES))
def test_named_sizes_follow_orientation(size_class: str) -> None:
    short, long = sorted(PAGE_SIZES[size_class])

    assert resolve_page_size(size_class, "portrait", 10, 10) == (short, long)
    assert resolve_page_size(size_class, Orientation.LANDSCAPE, 10, 10) == (long, short)
    assert resolve_page_size(size_class.upper(), "LANDSCAPE", 10, 10) == (long, short)


@pytest.mark.parametrize("size_class", ["fit", None, "tabloid"])
def test_fit_and_unknown_sizes_use_image_dimensions(size_class) -> None:
    assert resolve_page_size(size_class, "landscape", 800, 600) == (800.0, 600.0)
