"""Alphabet-wide normalization.

Every pass is a pure function from one glyph table to a new glyph table.
Pass 1 transforms each glyph on its own using a scale shared by the whole
alphabet; passes 2 and 3 look across glyphs and so only run once pass 1 has
finished for all of them.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, NamedTuple, Optional

from tqdm import tqdm

from .adjust import adjust_dot_subpath
from .command_defs import format_number
from .coordinate import deepest_point, get_bounds, padded_extent, padded_width
from .hyperparameters import (
    DESCENDER_CHARS,
    LETTER_SPACING_RATIO,
    LINE_HEIGHT_RATIO,
    REFERENCE_CHAR,
    SHIFT_EPSILON,
    SPACE_CHAR,
    STROKE_WIDTH_RATIO,
    UNDERSCORE_CHAR,
    USE_REFERENCE_SPACING,
)
from .pathdata import parse_path_data, serialize_subpaths
from .reference import ReferenceMetrics, ReferenceMetricsProvider
from .transformers import (
    Scale,
    compute_base_scale,
    compute_glyph_shift,
    shift_subpaths,
    transform_subpaths,
)

logger = logging.getLogger(__name__)

GlyphTable = Dict[str, str]
MetricsLookup = Callable[[str], Optional[ReferenceMetrics]]


@dataclass
class AlphabetMetrics:
    glyph_width_ratio: float
    space_width_ratio: float
    line_height_ratio: float = LINE_HEIGHT_RATIO
    stroke_width_ratio: float = STROKE_WIDTH_RATIO
    letter_spacing_ratio: float = LETTER_SPACING_RATIO
    glyph_advance_ratio: Dict[str, float] = field(default_factory=dict)
    # Always empty for a monospaced alphabet; kept so consumers can rely on it.
    kerning_ratio: Dict[str, Dict[str, float]] = field(default_factory=dict)

    def text_metrics(self) -> Dict[str, float]:
        return {
            "glyphWidthRatio": self.glyph_width_ratio,
            "spaceWidthRatio": self.space_width_ratio,
            "lineHeightRatio": self.line_height_ratio,
            "strokeWidthRatio": self.stroke_width_ratio,
            "letterSpacingRatio": self.letter_spacing_ratio,
        }


class NormalizedAlphabet(NamedTuple):
    glyphs: GlyphTable
    metrics: AlphabetMetrics
    scale: Scale


def calibrate(
    alphabet: GlyphTable,
    lookup: MetricsLookup,
    reference_char: str = REFERENCE_CHAR,
) -> Scale:
    """Derive the shared scale from the calibration glyph."""
    path_data = alphabet.get(reference_char)
    subpaths = parse_path_data(path_data) if path_data else []
    metrics = lookup(reference_char)
    if metrics is None:
        logger.warning(
            "No reference metrics for calibration glyph %r; using default scale",
            reference_char,
        )
    scale = compute_base_scale(subpaths, metrics)
    logger.debug("Calibrated scale from %r: %s", reference_char, scale)
    return scale


def normalize_glyph(
    char: str,
    path_data: str,
    scale: Scale,
    lookup: MetricsLookup,
    use_reference_spacing: bool = USE_REFERENCE_SPACING,
) -> str:
    subpaths = parse_path_data(path_data)
    if not subpaths:
        logger.debug("Glyph %r has no geometry; passing through", char)
        return path_data

    bbox = get_bounds(subpaths)
    metrics = lookup(char)
    if metrics is None:
        logger.debug("No reference metrics for %r; no vertical alignment", char)
    x_shift, y_shift = compute_glyph_shift(
        bbox, scale, metrics, use_reference_spacing
    )
    transformed = transform_subpaths(subpaths, *scale, x_shift, y_shift)
    adjusted = adjust_dot_subpath(transformed, char)
    return serialize_subpaths(adjusted)


def normalize_glyphs(
    alphabet: GlyphTable,
    scale: Scale,
    lookup: MetricsLookup,
    use_reference_spacing: bool = USE_REFERENCE_SPACING,
    progress: bool = False,
) -> GlyphTable:
    """Pass 1: put every glyph into the shared design cell."""
    normalized: GlyphTable = {}
    items = tqdm(alphabet.items(), desc="Normalizing glyphs", disable=not progress)
    for char, path_data in items:
        normalized[char] = normalize_glyph(
            char, path_data, scale, lookup, use_reference_spacing
        )
    return normalized


def align_descenders(
    alphabet: GlyphTable,
    descender_chars=DESCENDER_CHARS,
    underscore_char: str = UNDERSCORE_CHAR,
) -> GlyphTable:
    """Pass 2: drop the underscore to the depth of the deepest descender."""
    target_y = 0.0
    for char in descender_chars:
        path_data = alphabet.get(char)
        if not path_data:
            continue
        target_y = max(target_y, deepest_point(parse_path_data(path_data)))

    aligned = dict(alphabet)
    underscore_path = aligned.get(underscore_char)
    if not underscore_path or target_y <= 0:
        return aligned

    subpaths = parse_path_data(underscore_path)
    if not subpaths:
        return aligned
    delta_y = target_y - deepest_point(subpaths)
    if abs(delta_y) > SHIFT_EPSILON:
        aligned[underscore_char] = serialize_subpaths(
            shift_subpaths(subpaths, dy=delta_y)
        )
    return aligned


def glyph_width_ratio(
    alphabet: GlyphTable, stroke_width: float = STROKE_WIDTH_RATIO
) -> float:
    """Widest stroked glyph in the alphabet; the common advance."""
    return max(
        (padded_width(parse_path_data(p), stroke_width) for p in alphabet.values()),
        default=0.0,
    )


def unify_advances(
    alphabet: GlyphTable, stroke_width: float = STROKE_WIDTH_RATIO
) -> GlyphTable:
    """Pass 3: center every glyph within the common advance.

    A glyph whose left edge sits at the cell origin moves right by half of
    its slack; the target is absolute so glyphs centered by pass 1 land in
    the same place.
    """
    advance = glyph_width_ratio(alphabet, stroke_width)
    radius = stroke_width / 2
    unified: GlyphTable = {}
    for char, path_data in alphabet.items():
        subpaths = parse_path_data(path_data)
        min_x, max_x = padded_extent(subpaths, stroke_width)
        width = max_x - min_x
        if width <= 0:
            unified[char] = path_data
            continue
        delta_x = (advance - width) / 2 - radius - min_x
        if abs(delta_x) <= SHIFT_EPSILON:
            unified[char] = path_data
            continue
        unified[char] = serialize_subpaths(shift_subpaths(subpaths, dx=delta_x))
    return unified


def compute_metrics(
    alphabet: GlyphTable, stroke_width: float = STROKE_WIDTH_RATIO
) -> AlphabetMetrics:
    width = glyph_width_ratio(alphabet, stroke_width)
    space_width = width
    advance = float(format_number(width))
    glyph_advance_ratio = {char: advance for char in alphabet}
    glyph_advance_ratio[SPACE_CHAR] = float(format_number(space_width))
    return AlphabetMetrics(
        glyph_width_ratio=width,
        space_width_ratio=space_width,
        stroke_width_ratio=stroke_width,
        glyph_advance_ratio=glyph_advance_ratio,
    )


class AlphabetNormalizer:
    """Runs calibration and the three passes over a glyph table."""

    def __init__(
        self,
        reference: ReferenceMetricsProvider,
        use_reference_spacing: bool = USE_REFERENCE_SPACING,
        stroke_width: float = STROKE_WIDTH_RATIO,
        reference_char: str = REFERENCE_CHAR,
        progress: bool = False,
    ):
        self.reference = reference
        self.use_reference_spacing = use_reference_spacing
        self.stroke_width = stroke_width
        self.reference_char = reference_char
        self.progress = progress

    def normalize(self, alphabet: GlyphTable) -> NormalizedAlphabet:
        lookup = self.reference.lookup
        scale = calibrate(alphabet, lookup, self.reference_char)
        glyphs = normalize_glyphs(
            alphabet, scale, lookup, self.use_reference_spacing, self.progress
        )
        glyphs = align_descenders(glyphs)
        glyphs = unify_advances(glyphs, self.stroke_width)
        metrics = compute_metrics(glyphs, self.stroke_width)
        logger.info(
            "Normalized %d glyphs; advance %s",
            len(glyphs),
            format_number(metrics.glyph_width_ratio),
        )
        return NormalizedAlphabet(glyphs, metrics, scale)
