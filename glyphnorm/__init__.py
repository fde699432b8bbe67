"""
Normalization of hand-authored glyph paths into a monospaced alphabet.
"""

from .adjust import adjust_dot_subpath, find_dot_subpath
from .command_defs import PathCommand, format_number
from .coordinate import BoundingBox, deepest_point, get_bounds, padded_width
from .normalizer import (
    AlphabetMetrics,
    AlphabetNormalizer,
    NormalizedAlphabet,
    align_descenders,
    calibrate,
    compute_metrics,
    normalize_glyphs,
    unify_advances,
)
from .pathdata import parse_path_data, serialize_subpaths
from .reference import (
    ReferenceFont,
    ReferenceFontNotFoundError,
    ReferenceMetrics,
    ReferenceMetricsProvider,
    StaticReferenceMetrics,
    find_reference_font,
)
from .subpath import Point, Subpath
from .transformers import compute_base_scale, compute_glyph_shift, transform_subpaths

__all__ = [
    "adjust_dot_subpath",
    "find_dot_subpath",
    "PathCommand",
    "format_number",
    "BoundingBox",
    "deepest_point",
    "get_bounds",
    "padded_width",
    "AlphabetMetrics",
    "AlphabetNormalizer",
    "NormalizedAlphabet",
    "align_descenders",
    "calibrate",
    "compute_metrics",
    "normalize_glyphs",
    "unify_advances",
    "parse_path_data",
    "serialize_subpaths",
    "ReferenceFont",
    "ReferenceFontNotFoundError",
    "ReferenceMetrics",
    "ReferenceMetricsProvider",
    "StaticReferenceMetrics",
    "find_reference_font",
    "Point",
    "Subpath",
    "compute_base_scale",
    "compute_glyph_shift",
    "transform_subpaths",
]
