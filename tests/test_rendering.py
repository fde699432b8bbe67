import numpy as np

from glyphnorm.normalizer import compute_metrics
from glyphnorm.rendering import render_alphabet_grid


def test_grid_dimensions_and_ink():
    glyphs = {
        "l": "M0.3 0.1L0.3 0.9",
        "o": "M0.1 0.4L0.5 0.4L0.5 0.9L0.1 0.9Z",
        ".": "M0.3 0.9",
        " ": "",
    }
    metrics = compute_metrics(glyphs)
    img = render_alphabet_grid(glyphs, metrics, cell_size=50, columns=2, padding=10)

    cell_w = round(metrics.glyph_width_ratio * 50)
    cell_h = round(metrics.line_height_ratio * 50)
    assert img.mode == "L"
    assert img.size == (20 + 2 * cell_w, 20 + 2 * cell_h)
    pixels = np.asarray(img)
    assert (pixels == 0).any()


def test_empty_alphabet_renders_blank_grid():
    metrics = compute_metrics({})
    img = render_alphabet_grid({}, metrics, cell_size=20, columns=4)
    assert not (np.asarray(img) == 0).any()
