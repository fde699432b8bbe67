from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

FIXTURE_UPM = 2048
FIXTURE_ADVANCE = 1233

# Rectangles (xMin, yMin, xMax, yMax) in font units, baseline at y=0
FIXTURE_BOXES = {
    "H": (100, 0, 1100, 1500),
    "a": (200, 0, 1000, 1120),
    "i": (500, 0, 700, 1556),
    "j": (500, -426, 700, 1556),
    "g": (200, -426, 1000, 1120),
    "p": (200, -426, 1000, 1120),
    "q": (200, -426, 1000, 1120),
    "y": (150, -426, 1080, 1120),
    "_": (0, -483, 1233, -300),
}

# Hand-authored centerlines in path space: y grows downward, baseline near 0.9
ALPHABET = {
    "H": "M0.1 0.1L0.1 0.9 M0.7 0.1L0.7 0.9 M0.1 0.5L0.7 0.5",
    "a": "M0.2 0.4L0.6 0.4L0.6 0.9L0.2 0.9L0.2 0.65L0.6 0.65",
    "i": "M0.4 0.35L0.4 0.9 M0.3 0.2L0.4 0.2L0.5 0.2Z",
    "j": "M0.45 0.35L0.45 1.1L0.3 1.2 M0.35 0.2L0.45 0.2L0.55 0.2Z",
    "g": "M0.6 0.35L0.6 1.15L0.2 1.2 M0.6 0.4L0.2 0.4L0.2 0.8L0.6 0.8",
    "p": "M0.2 0.35L0.2 1.2 M0.2 0.35L0.6 0.35L0.6 0.8L0.2 0.8",
    "q": "M0.6 0.35L0.6 1.2 M0.6 0.35L0.2 0.35L0.2 0.8L0.6 0.8",
    "y": "M0.2 0.35L0.4 0.9 M0.6 0.35L0.3 1.25",
    "_": "M0 0.9L0.7 0.9",
    "M": "M0 0.1L0 0.9 M0 0.1L0.75 0.6L1.5 0.1L1.5 0.9",
    "?": "M0.2 0.2L0.5 0.2L0.5 0.5L0.35 0.6L0.35 0.75 M0.35 0.9L0.35 0.9",
    " ": "",
}


def _rectangle(box):
    x_min, y_min, x_max, y_max = box
    pen = TTGlyphPen(None)
    pen.moveTo((x_min, y_min))
    pen.lineTo((x_min, y_max))
    pen.lineTo((x_max, y_max))
    pen.lineTo((x_max, y_min))
    pen.closePath()
    return pen.glyph()


def build_reference_font(path: Path, upm: int = FIXTURE_UPM) -> Path:
    names = {char: f"uni{ord(char):04X}" for char in FIXTURE_BOXES}
    glyph_order = [".notdef", "space"] + list(names.values())

    glyphs = {
        ".notdef": _rectangle((50, 0, 450, 700)),
        "space": TTGlyphPen(None).glyph(),
    }
    metrics = {".notdef": (500, 50), "space": (FIXTURE_ADVANCE, 0)}
    for char, box in FIXTURE_BOXES.items():
        glyphs[names[char]] = _rectangle(box)
        metrics[names[char]] = (FIXTURE_ADVANCE, box[0])

    cmap = {ord(char): name for char, name in names.items()}
    cmap[ord(" ")] = "space"

    fb = FontBuilder(upm, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=1901, descent=-483)
    fb.setupNameTable({"familyName": "Fixture Mono", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=1556, sTypoDescender=-492, usWinAscent=1901, usWinDescent=483)
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture
def reference_font_path(tmp_path):
    return build_reference_font(tmp_path / "FixtureMono.ttf")


@pytest.fixture
def alphabet():
    return dict(ALPHABET)
