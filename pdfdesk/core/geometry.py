"""Page size resolution and aspect-ratio preserving image placement."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Page sizes in points (72 points = 1 inch), portrait.
PAGE_SIZES: dict[str, tuple[float, float]] = {
    "a4": (595.28, 841.89),
    "letter": (612.0, 792.0),
    "legal": (612.0, 1008.0),
}
FIT = "fit"


class Orientation(str, Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


@dataclass(frozen=True, slots=True)
class Placement:
    """Where to draw an image on a page; ``x``/``y`` are from the bottom-left corner."""

    width: float
    height: float
    x: float
    y: float


def _require_positive(**dimensions: float) -> None:
    for name, value in dimensions.items():
        if not value or value <= 0:
            raise ValueError(f"{name} must be positive, got {value!r}")


def fit_image(
    image_width: float,
    image_height: float,
    page_width: float,
    page_height: float,
) -> Placement:
    """Scale an image uniformly to the largest size that fits the page, centred.

    Relatively wider images span the page width and are centred vertically;
    all others span the page height and are centred horizontally.
    """

    _require_positive(
        image_width=image_width,
        image_height=image_height,
        page_width=page_width,
        page_height=page_height,
    )
    image_aspect = image_width / image_height
    page_aspect = page_width / page_height

    if image_aspect > page_aspect:
        draw_width = page_width
        draw_height = page_width / image_aspect
        return Placement(draw_width, draw_height, 0.0, (page_height - draw_height) / 2)

    draw_height = page_height
    draw_width = page_height * image_aspect
    return Placement(draw_width, draw_height, (page_width - draw_width) / 2, 0.0)


def resolve_page_size(
    size_class: str | None,
    orientation: Orientation | str | None,
    image_width: float,
    image_height: float,
) -> tuple[float, float]:
    """Return ``(page_width, page_height)`` for one image.

    Named sizes put their larger side on the width in landscape and on the
    height otherwise. ``"fit"`` and unrecognised classes use the image size.
    """

    size = PAGE_SIZES.get((size_class or FIT).lower())
    if size is None:
        _require_positive(image_width=image_width, image_height=image_height)
        return float(image_width), float(image_height)

    short_side, long_side = min(size), max(size)
    value = getattr(orientation, "value", orientation) or ""
    if str(value).lower() == Orientation.LANDSCAPE.value:
        return long_side, short_side
    return short_side, long_side


__all__ = ["PAGE_SIZES", "FIT", "Orientation", "Placement", "fit_image", "resolve_page_size"]
