import logging
import struct
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Dict, Iterable, NamedTuple, Optional, Union

from fontTools.pens.boundsPen import BoundsPen
from fontTools.ttLib import TTFont, TTLibError

from .hyperparameters import REFERENCE_FONT_PATHS, UNITS_PER_EM

logger = logging.getLogger(__name__)


class ReferenceFontNotFoundError(FileNotFoundError):
    pass


class ReferenceMetrics(NamedTuple):
    """Calibration metrics of one reference glyph, in 1000-unit design space."""

    width: float
    height: float
    advance_width: float
    left_side_bearing: float
    right_side_bearing: float
    y_min: float
    y_max: float

    @classmethod
    def from_bounds(
        cls, bounds, advance_width: float, scale: float = 1.0
    ) -> Optional["ReferenceMetrics"]:
        """Build metrics from an ``(xMin, yMin, xMax, yMax)`` box in font
        units, or None when the glyph has no usable size."""
        if bounds is None:
            return None
        x_min, y_min, x_max, y_max = bounds
        width = (x_max - x_min) * scale
        height = (y_max - y_min) * scale
        advance = advance_width * scale
        if not (width > 0) or not (height > 0) or not (advance > 0):
            return None
        return cls(
            width=width,
            height=height,
            advance_width=advance,
            left_side_bearing=x_min * scale,
            right_side_bearing=advance - x_max * scale,
            y_min=y_min * scale,
            y_max=y_max * scale,
        )


class ReferenceMetricsProvider(ABC):
    """Source of per-character calibration metrics."""

    @abstractmethod
    def lookup(self, char: str) -> Optional[ReferenceMetrics]: ...


class StaticReferenceMetrics(ReferenceMetricsProvider):
    """Metrics supplied up front, e.g. precomputed or for calibration tests."""

    def __init__(self, metrics: Dict[str, ReferenceMetrics]):
        self.metrics = dict(metrics)

    def lookup(self, char: str) -> Optional[ReferenceMetrics]:
        return self.metrics.get(char)


class ReferenceFont(ReferenceMetricsProvider):
    """A reference typeface read with fontTools.

    Works for both TrueType and CFF outlines, since bounds come from drawing
    the glyph through a BoundsPen rather than from the ``glyf`` table.
    """

    font_path: Path

    def __init__(self, font_path: Union[str, Path]):
        self.font_path = Path(font_path)
        self.ttfont = TTFont(self.font_path, lazy=True)
        self.units_per_em = self.ttfont["head"].unitsPerEm
        self.scale = UNITS_PER_EM / self.units_per_em
        self._cmap = self.ttfont.getBestCmap() or {}
        self._glyph_set = self.ttfont.getGlyphSet()
        self._cache: Dict[str, Optional[ReferenceMetrics]] = {}

    def lookup(self, char: str) -> Optional[ReferenceMetrics]:
        if char not in self._cache:
            self._cache[char] = self._lookup(char)
        return self._cache[char]

    def _lookup(self, char: str) -> Optional[ReferenceMetrics]:
        if len(char) != 1:
            return None
        glyph_name = self._cmap.get(ord(char))
        if glyph_name is None or glyph_name not in self._glyph_set:
            logger.debug("No reference glyph for %r", char)
            return None
        pen = BoundsPen(self._glyph_set)
        self._glyph_set[glyph_name].draw(pen)
        advance_width, _ = self.ttfont["hmtx"][glyph_name]
        metrics = ReferenceMetrics.from_bounds(pen.bounds, advance_width, self.scale)
        if metrics is None:
            logger.debug("Reference glyph %r for %r has no usable size", glyph_name, char)
        return metrics

    def close(self):
        self.ttfont.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


def is_usable_font_file(path: Path) -> bool:
    """A non-empty file whose sfnt header and ``head`` table fontTools can read."""
    try:
        if not path.is_file() or path.stat().st_size == 0:
            return False
        with TTFont(path, lazy=True) as font:
            font["head"]
    except (OSError, TTLibError, struct.error) as e:
        logger.warning("Skipping unreadable font %s: %s", path, e)
        return False
    return True


def find_reference_font(
    candidates: Iterable[Union[str, Path]] = REFERENCE_FONT_PATHS,
    probe: Callable[[Path], bool] = is_usable_font_file,
) -> Path:
    """Return the first candidate the probe accepts.

    Raises ReferenceFontNotFoundError when none does: nothing can be
    calibrated without a reference typeface.
    """
    tried = []
    for candidate in candidates:
        path = Path(candidate)
        tried.append(str(path))
        if probe(path):
            logger.info("Using reference font %s", path)
            return path
    raise ReferenceFontNotFoundError(
        "Reference font not found; tried: " + ", ".join(tried)
    )
