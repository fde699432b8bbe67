from typing import List, Optional, Sequence

from .hyperparameters import DOT_TARGET_WIDTH, DOTTED_CHARS
from .subpath import Subpath


def find_dot_subpath(subpaths: Sequence[Subpath]) -> Optional[int]:
    """Index of the topmost flat, non-empty-width subpath.

    The dot over ``i`` and ``j`` is authored as a flattened circle, which
    shows up as a horizontal run of points with no height.
    """
    dot_index = None
    dot_min_y = float("inf")
    for index, subpath in enumerate(subpaths):
        if len(subpath) == 0:
            continue
        if subpath.height == 0 and subpath.width > 0 and subpath.min_y < dot_min_y:
            dot_index = index
            dot_min_y = subpath.min_y
    return dot_index


def adjust_dot_subpath(
    subpaths: Sequence[Subpath],
    char: str,
    target_width: float = DOT_TARGET_WIDTH,
) -> List[Subpath]:
    """Narrow the dot of a dotted-stem glyph to at most ``target_width``.

    Uniform scaling leaves the dot too wide. Only the dot's horizontal extent
    changes, about its own center; other subpaths are returned as is.
    """
    subpaths = list(subpaths)
    if char not in DOTTED_CHARS:
        return subpaths

    dot_index = find_dot_subpath(subpaths)
    if dot_index is None:
        return subpaths

    dot = subpaths[dot_index]
    width = dot.width
    scale = min(width, target_width) / width
    center_x = (dot.min_x + dot.max_x) / 2
    points = dot.points.copy()
    points[:, 0] = center_x + (points[:, 0] - center_x) * scale
    subpaths[dot_index] = dot.with_points(points)
    return subpaths
