import numpy as np
import pytest

from glyphnorm.coordinate import BoundingBox, get_bounds
from glyphnorm.hyperparameters import HORIZONTAL_SCALE, VERTICAL_SCALE
from glyphnorm.pathdata import parse_path_data
from glyphnorm.reference import ReferenceMetrics
from glyphnorm.subpath import Subpath
from glyphnorm.transformers import (
    compute_base_scale,
    compute_glyph_shift,
    shift_subpaths,
    transform_subpaths,
)

H_PATH = "M0.1 0.1L0.1 0.9 M0.7 0.1L0.7 0.9 M0.1 0.5L0.7 0.5"


def metrics(width=480.0, height=720.0, y_max=720.0):
    return ReferenceMetrics(
        width=width,
        height=height,
        advance_width=600.0,
        left_side_bearing=60.0,
        right_side_bearing=60.0,
        y_min=y_max - height,
        y_max=y_max,
    )


def test_base_scale_maps_calibration_glyph_to_reference():
    scale_x, scale_y = compute_base_scale(parse_path_data(H_PATH), metrics())
    # The H is 0.6 x 0.8 in path units, i.e. 600 x 800 design units
    assert scale_x == pytest.approx(480 / 600 * HORIZONTAL_SCALE)
    assert scale_y == pytest.approx(720 / 800 * VERTICAL_SCALE)


def test_base_scale_falls_back_to_constants():
    assert compute_base_scale(parse_path_data(H_PATH), None) == (
        HORIZONTAL_SCALE,
        VERTICAL_SCALE,
    )
    assert compute_base_scale([], metrics()) == (HORIZONTAL_SCALE, VERTICAL_SCALE)
    # A flat calibration glyph only calibrates the axis it has
    flat = parse_path_data("M0 0.5L0.5 0.5")
    scale_x, scale_y = compute_base_scale(flat, metrics())
    assert scale_x == pytest.approx(480 / 500)
    assert scale_y == VERTICAL_SCALE


def test_narrow_glyph_is_centered_in_cell():
    bbox = BoundingBox(0.2, 0.6, 0.1, 0.9)
    x_shift, y_shift = compute_glyph_shift(bbox, (1.0, 1.0), None)
    # Scaled width 0.4 leaves 0.3 on either side of the unit cell
    assert 0.2 + x_shift == pytest.approx(0.3)
    assert 0.6 + x_shift == pytest.approx(0.7)
    assert y_shift == 0.0


def test_wide_glyph_is_left_aligned():
    bbox = BoundingBox(0.5, 2.0, 0.1, 0.9)
    x_shift, _ = compute_glyph_shift(bbox, (1.0, 1.0), None)
    assert 0.5 + x_shift == pytest.approx(0.0)


def test_top_edge_aligns_to_reference():
    bbox = BoundingBox(0.1, 0.7, 0.1, 0.9)
    _, y_shift = compute_glyph_shift(bbox, (1.0, 0.5), metrics(y_max=700.0))
    assert 0.9 * 0.5 + y_shift == pytest.approx(0.7)


def test_reference_spacing_can_be_disabled():
    bbox = BoundingBox(0.1, 0.7, 0.1, 0.9)
    _, y_shift = compute_glyph_shift(
        bbox, (1.0, 0.5), metrics(), use_reference_spacing=False
    )
    assert y_shift == 0.0


def test_transform_flips_scales_and_translates():
    subpaths = [Subpath([[1.0, 0.0], [2.0, 1.0]], closed=True)]
    (result,) = transform_subpaths(subpaths, 2.0, 0.5, 0.25, 0.1)
    assert result.closed
    # x: x * 2 + 0.25; y: 1 - ((1 - y) * 0.5 + 0.1)
    assert np.allclose(result.points, [[2.25, 0.4], [4.25, 0.9]])
    # The input is left untouched
    assert subpaths[0].points.tolist() == [[1.0, 0.0], [2.0, 1.0]]


def test_transformed_top_matches_reference_top():
    subpaths = parse_path_data(H_PATH)
    scale = compute_base_scale(subpaths, metrics())
    reference = metrics()
    shift = compute_glyph_shift(get_bounds(subpaths), scale, reference)
    transformed = transform_subpaths(subpaths, *scale, *shift)
    assert get_bounds(transformed).max_y == pytest.approx(reference.y_max / 1000)


def test_shift_subpaths():
    (shifted,) = shift_subpaths([Subpath([[0, 0], [1, 1]])], dx=0.5, dy=-1)
    assert shifted.points.tolist() == [[0.5, -1], [1.5, 0]]
