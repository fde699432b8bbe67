from typing import List, Optional, Sequence, Tuple

import numpy as np

from .coordinate import BoundingBox, flip_y, get_bounds
from .hyperparameters import (
    DESIGN_CELL_WIDTH,
    DESIGN_HEIGHT,
    HORIZONTAL_SCALE,
    STROKE_WIDTH,
    UNITS_PER_EM,
    VERTICAL_SCALE,
)
from .reference import ReferenceMetrics
from .subpath import Subpath

Scale = Tuple[float, float]


def compute_base_scale(
    reference_subpaths: Sequence[Subpath],
    reference_metrics: Optional[ReferenceMetrics],
) -> Scale:
    """Scale shared by the whole alphabet.

    It maps the calibration glyph's parsed size onto the reference glyph's
    size in design units. Without metrics, or for an empty calibration glyph,
    the bare scale constants are used.
    """
    bbox = get_bounds(reference_subpaths)
    width = bbox.width * UNITS_PER_EM
    height = bbox.height * DESIGN_HEIGHT

    scale_x = HORIZONTAL_SCALE
    scale_y = VERTICAL_SCALE
    if reference_metrics is not None and width > 0:
        scale_x = reference_metrics.width / width * HORIZONTAL_SCALE
    if reference_metrics is not None and height > 0:
        scale_y = reference_metrics.height / height * VERTICAL_SCALE
    return scale_x, scale_y


def compute_glyph_shift(
    bbox: BoundingBox,
    scale: Scale,
    reference_metrics: Optional[ReferenceMetrics] = None,
    use_reference_spacing: bool = True,
    stroke_width: float = STROKE_WIDTH,
) -> Tuple[float, float]:
    """Translation applied after scaling one glyph.

    Horizontally the glyph is centered in the unit cell when it fits and
    left-aligned at zero when it does not. Vertically its top edge is moved
    to the reference glyph's top, if reference spacing is on and the
    character has reference metrics.
    """
    scale_x, scale_y = scale
    pad = stroke_width / 2
    x_min_scaled = (bbox.min_x - pad) * scale_x
    x_max_scaled = (bbox.max_x + pad) * scale_x
    y_max_scaled = (bbox.max_y + pad) * scale_y

    scaled_width = x_max_scaled - x_min_scaled
    if scaled_width <= DESIGN_CELL_WIDTH:
        x_shift = (DESIGN_CELL_WIDTH - scaled_width) / 2 - x_min_scaled
    else:
        x_shift = -x_min_scaled

    y_shift = 0.0
    if use_reference_spacing and reference_metrics is not None:
        y_shift = reference_metrics.y_max / DESIGN_HEIGHT - y_max_scaled
    return x_shift, y_shift


def transform_subpaths(
    subpaths: Sequence[Subpath],
    scale_x: float,
    scale_y: float,
    x_shift: float,
    y_shift: float,
) -> List[Subpath]:
    """Flip into the baseline-up frame, scale about the origin, translate,
    and flip back into path space."""
    transformed = []
    for subpath in subpaths:
        points = subpath.points
        x = points[:, 0] * scale_x + x_shift
        y = flip_y(flip_y(points[:, 1]) * scale_y + y_shift)
        transformed.append(subpath.with_points(np.stack([x, y], axis=1)))
    return transformed


def shift_subpaths(
    subpaths: Sequence[Subpath], dx: float = 0.0, dy: float = 0.0
) -> List[Subpath]:
    return [subpath.translated(dx, dy) for subpath in subpaths]
