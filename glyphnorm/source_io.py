"""Reading and rewriting the TypeScript module that holds the glyph table.

The module declares ``export const svgAlphabet = { ... }`` followed by the
derived metrics. Only the named declarations are touched; everything else
in the file is left as it was.
"""

import json
import re
from pathlib import Path
from typing import Dict, Union

from .command_defs import format_number
from .hyperparameters import GLYPH_TABLE_NAME
from .normalizer import AlphabetMetrics, GlyphTable, NormalizedAlphabet


class GlyphTableError(ValueError):
    pass


class GlyphTableNotFoundError(GlyphTableError):
    pass


class GlyphTableSyntaxError(GlyphTableError):
    pass


def _table_pattern(name: str) -> "re.Pattern[str]":
    return re.compile(
        r"export const " + re.escape(name) + r"\s*=\s*(\{[\s\S]*?\})\n"
    )


def read_glyph_table(text: str, name: str = GLYPH_TABLE_NAME) -> GlyphTable:
    match = _table_pattern(name).search(text)
    if match is None:
        raise GlyphTableNotFoundError(f"No `export const {name}` block found")
    try:
        table = json.loads(match.group(1))
    except json.JSONDecodeError as e:
        raise GlyphTableSyntaxError(
            f"`{name}` is not a JSON object literal: {e}"
        ) from e
    return {str(char): str(path) for char, path in table.items()}


def replace_glyph_table(
    text: str, table: GlyphTable, name: str = GLYPH_TABLE_NAME
) -> str:
    pattern = _table_pattern(name)
    if pattern.search(text) is None:
        raise GlyphTableNotFoundError(f"No `export const {name}` block found")
    serialized = json.dumps(table, indent=2, ensure_ascii=False)
    return pattern.sub(
        lambda _: f"export const {name} = {serialized}\n", text, count=1
    )


def upsert_declaration(text: str, name: str, value: str) -> str:
    """Replace ``export const name = ...`` in place, or append it.

    A declaration runs up to the next ``export`` statement or to the trailing
    whitespace at the end of the file, whichever comes first.
    """
    declaration = f"export const {name} = {value}"
    pattern = re.compile(
        r"export const "
        + re.escape(name)
        + r"\s*=\s*[\s\S]*?(?=\n+export |\s*\Z)"
    )
    if pattern.search(text):
        return pattern.sub(lambda _: declaration, text, count=1)
    return f"{text.rstrip()}\n\n{declaration}\n"


def metric_declarations(metrics: AlphabetMetrics) -> Dict[str, str]:
    advances = {
        char: float(format_number(advance))
        for char, advance in metrics.glyph_advance_ratio.items()
    }
    return {
        "strokeWidthRatio": format_number(metrics.stroke_width_ratio),
        "glyphWidthRatio": format_number(metrics.glyph_width_ratio),
        "spaceWidthRatio": format_number(metrics.space_width_ratio),
        "lineHeightRatio": format_number(metrics.line_height_ratio),
        "letterSpacingRatio": format_number(metrics.letter_spacing_ratio),
        "glyphLineAlphabet": "lineAlphabet",
        "glyphAdvanceRatio": json.dumps(
            advances, separators=(",", ":"), ensure_ascii=False
        )
        + " as Record<string, number>",
        "kerningRatio": json.dumps(metrics.kerning_ratio)
        + " as Record<string, Record<string, number>>",
        "textMetrics": "{ " + ", ".join(metrics.text_metrics()) + " }",
    }


def write_metrics(text: str, metrics: AlphabetMetrics) -> str:
    for name, value in metric_declarations(metrics).items():
        text = upsert_declaration(text, name, value)
    return text


def regenerate_source(
    text: str, result: NormalizedAlphabet, name: str = GLYPH_TABLE_NAME
) -> str:
    text = replace_glyph_table(text, result.glyphs, name)
    return write_metrics(text, result.metrics)


def load_source(path: Union[str, Path]) -> str:
    return Path(path).read_text(encoding="utf-8")


def save_source(path: Union[str, Path], text: str) -> None:
    Path(path).write_text(text, encoding="utf-8")
