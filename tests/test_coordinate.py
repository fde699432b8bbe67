import pytest

from glyphnorm.coordinate import (
    BoundingBox,
    deepest_point,
    flip_y,
    get_bounds,
    padded_extent,
    padded_width,
)
from glyphnorm.pathdata import parse_path_data


def test_bounds_use_flipped_frame():
    subpaths = parse_path_data("M0.1 0.1L0.1 0.9 M0.7 0.5L0.7 0.5")
    bbox = get_bounds(subpaths)
    assert bbox.min_x == pytest.approx(0.1)
    assert bbox.max_x == pytest.approx(0.7)
    # y=0.9 (near the baseline) becomes the lowest point, y=0.1 the highest
    assert bbox.min_y == pytest.approx(0.1)
    assert bbox.max_y == pytest.approx(0.9)
    assert bbox.width == pytest.approx(0.6)
    assert bbox.height == pytest.approx(0.8)


def test_bounds_of_descender_go_below_zero():
    bbox = get_bounds(parse_path_data("M0 0.5L0 1.25"))
    assert bbox.min_y == pytest.approx(-0.25)
    assert bbox.max_y == pytest.approx(0.5)


def test_empty_bounds_are_degenerate():
    assert get_bounds([]) == BoundingBox(0.0, 0.0, 0.0, 0.0)


def test_flip_is_its_own_inverse():
    assert flip_y(flip_y(0.3)) == pytest.approx(0.3)


def test_deepest_point():
    assert deepest_point(parse_path_data("M0 0.2L1 1.3 M2 0.9")) == pytest.approx(1.3)
    assert deepest_point([]) == 0.0


def test_padded_width_adds_half_stroke_each_side():
    subpaths = parse_path_data("M0.2 0L0.6 1")
    assert padded_extent(subpaths, 0.1) == pytest.approx((0.15, 0.65))
    assert padded_width(subpaths, 0.1) == pytest.approx(0.5)


def test_padded_width_ignores_lone_points():
    subpaths = parse_path_data("M0.2 0L0.6 1 M5 5")
    assert padded_width(subpaths, 0.0) == pytest.approx(0.4)
    assert padded_width(parse_path_data("M5 5"), 0.09) == 0.0
