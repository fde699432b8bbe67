from pathlib import Path

# Design space
UNITS_PER_EM = 1000
DESIGN_HEIGHT = UNITS_PER_EM
DESIGN_CELL_WIDTH = 1.0

# Calibration
REFERENCE_CHAR = "H"
HORIZONTAL_SCALE = 1.0
VERTICAL_SCALE = 0.93  # Leaves room above the cap height for accents
USE_REFERENCE_SPACING = True

# Stroke padding applied to bounding boxes before scaling. The outlines are
# centerlines, so the pad is zero here; advances use STROKE_WIDTH_RATIO.
STROKE_WIDTH = 0.0
STROKE_WIDTH_RATIO = 0.09

# Glyph-specific corrections
DOTTED_CHARS = ("i", "j")
DOT_TARGET_WIDTH = 0.08
DESCENDER_CHARS = ("g", "j", "p", "q", "y")
UNDERSCORE_CHAR = "_"
SPACE_CHAR = " "

# Text metrics
LINE_HEIGHT_RATIO = 0.94 + 0.212
LETTER_SPACING_RATIO = 0.0

# Float noise guard for the alphabet-wide passes
SHIFT_EPSILON = 1e-6

# Serialization
COORDINATE_PLACES = 6
GLYPH_TABLE_NAME = "svgAlphabet"

USER_FONT_DIR = Path.home() / "Library" / "Fonts"

REFERENCE_FONT_PATHS = [
    USER_FONT_DIR / "DejaVuSansMono.ttf",
    USER_FONT_DIR / "DejaVuSansMono-Bold.ttf",
    USER_FONT_DIR / "DejaVuSansMono-Oblique.ttf",
    Path("/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf"),
    Path("/usr/share/fonts/truetype/dejavu/DejaVuSansMono-Bold.ttf"),
    Path("/usr/share/fonts/truetype/dejavu/DejaVuSansMono-Oblique.ttf"),
    Path("/Library/Fonts/DejaVuSansMono.ttf"),
    Path("C:\\Windows\\Fonts\\DejaVuSansMono.ttf"),
]
