from typing import Optional

from PIL import Image, ImageDraw

from .normalizer import AlphabetMetrics, GlyphTable
from .pathdata import parse_path_data

BACKGROUND = 255
CELL_SHADE = 242
GRID_LINE = 208
INK = 0


def render_alphabet_grid(
    glyphs: GlyphTable,
    metrics: AlphabetMetrics,
    cell_size: int = 64,
    columns: int = 16,
    padding: Optional[int] = None,
) -> Image.Image:
    """Draw every glyph in a checkered monospace grid for visual inspection.

    Each cell is one advance wide and one line high at ``cell_size`` pixels
    per em. Glyphs are drawn as stroked polylines, baseline at the bottom of
    the unit em box inside the cell.
    """
    chars = sorted(glyphs, key=ord)
    rows = max(1, -(-len(chars) // columns))
    if padding is None:
        padding = cell_size // 2

    advance = max(metrics.glyph_width_ratio, 1e-3)
    cell_w = max(1, round(advance * cell_size))
    cell_h = max(1, round(metrics.line_height_ratio * cell_size))
    stroke = max(1, round(metrics.stroke_width_ratio * cell_size))
    # The path-space em box (y in [0, 1]) sits centered vertically in the cell
    em_top = (cell_h - cell_size) / 2

    img = Image.new(
        "L",
        (padding * 2 + columns * cell_w, padding * 2 + rows * cell_h),
        BACKGROUND,
    )
    draw = ImageDraw.Draw(img)

    for index in range(rows * columns):
        row, col = divmod(index, columns)
        x0 = padding + col * cell_w
        y0 = padding + row * cell_h
        fill = CELL_SHADE if (row + col) % 2 == 0 else BACKGROUND
        draw.rectangle(
            [x0, y0, x0 + cell_w, y0 + cell_h], fill=fill, outline=GRID_LINE
        )
        if index >= len(chars):
            continue

        for subpath in parse_path_data(glyphs[chars[index]]):
            points = [
                (x0 + x * cell_size, y0 + em_top + y * cell_size) for x, y in subpath
            ]
            if len(points) > 1:
                if subpath.closed:
                    if len(points) > 2:
                        draw.polygon(points, fill=INK)
                    points.append(points[0])
                draw.line(points, fill=INK, width=stroke, joint="curve")
            else:
                x, y = points[0]
                r = stroke / 2
                draw.ellipse([x - r, y - r, x + r, y + r], fill=INK)
    return img
