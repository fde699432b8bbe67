from typing import NamedTuple, Sequence, Tuple

from .subpath import Subpath, all_points


def flip_y(y):
    """Convert between path space (y down) and the baseline-up glyph frame."""
    return 1 - y


class BoundingBox(NamedTuple):
    """Extents of a glyph, with Y measured in the flipped (baseline-up) frame."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


def get_bounds(subpaths: Sequence[Subpath]) -> BoundingBox:
    """
    Computes the bounding box of all points, flipping Y so that larger
    values are higher on the page. No points gives an all-zero box.
    """
    points = all_points(subpaths)
    if not len(points):
        return BoundingBox(0.0, 0.0, 0.0, 0.0)

    ys = flip_y(points[:, 1])
    return BoundingBox(
        float(points[:, 0].min()),
        float(points[:, 0].max()),
        float(ys.min()),
        float(ys.max()),
    )


def deepest_point(subpaths: Sequence[Subpath]) -> float:
    """Largest path-space Y, i.e. the lowest point on the page (0 if empty)."""
    points = all_points(subpaths)
    if not len(points):
        return 0.0
    return float(points[:, 1].max())


def padded_extent(
    subpaths: Sequence[Subpath], stroke_width: float
) -> Tuple[float, float]:
    """Horizontal extent of the glyph's line segments including half the
    stroke width on either side. Lone points draw nothing and are ignored.
    """
    stroked = [s for s in subpaths if len(s) >= 2]
    points = all_points(stroked)
    if not len(points):
        return 0.0, 0.0
    radius = stroke_width / 2
    return (
        float(points[:, 0].min()) - radius,
        float(points[:, 0].max()) + radius,
    )


def padded_width(subpaths: Sequence[Subpath], stroke_width: float) -> float:
    min_x, max_x = padded_extent(subpaths, stroke_width)
    return max_x - min_x
