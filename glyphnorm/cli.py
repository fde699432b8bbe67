import argparse
import logging
import sys
from pathlib import Path

from fontTools.ttLib import TTLibError

from .hyperparameters import GLYPH_TABLE_NAME, REFERENCE_FONT_PATHS
from .normalizer import AlphabetNormalizer
from .reference import ReferenceFont, ReferenceFontNotFoundError, find_reference_font
from .rendering import render_alphabet_grid
from .source_io import (
    GlyphTableError,
    load_source,
    read_glyph_table,
    regenerate_source,
    save_source,
)

logger = logging.getLogger("glyphnorm")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Normalize a glyph path table into a monospaced alphabet."
    )
    parser.add_argument(
        "source",
        type=Path,
        help="TypeScript module holding the glyph table; rewritten in place.",
    )
    parser.add_argument(
        "--name",
        type=str,
        default=GLYPH_TABLE_NAME,
        help="Name of the exported glyph table.",
    )
    parser.add_argument(
        "--reference-font",
        type=Path,
        action="append",
        default=[],
        help="Reference font to try before the default locations. May be repeated.",
    )
    parser.add_argument(
        "--no-reference-spacing",
        action="store_true",
        help="Do not align glyph tops to the reference font.",
    )
    parser.add_argument(
        "--preview",
        type=Path,
        default=None,
        help="Also write a PNG grid of the normalized glyphs.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Normalize but do not rewrite the source file.",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while normalizing glyphs.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log per-glyph decisions.",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        font_path = find_reference_font(
            list(args.reference_font) + list(REFERENCE_FONT_PATHS)
        )
        text = load_source(args.source)
        alphabet = read_glyph_table(text, args.name)
        reference = ReferenceFont(font_path)
    except (ReferenceFontNotFoundError, GlyphTableError, TTLibError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    with reference:
        normalizer = AlphabetNormalizer(
            reference,
            use_reference_spacing=not args.no_reference_spacing,
            progress=args.progress,
        )
        result = normalizer.normalize(alphabet)

    if args.preview is not None:
        render_alphabet_grid(result.glyphs, result.metrics).save(args.preview)
        logger.info("Preview written to %s", args.preview)

    if args.dry_run:
        print(f"✓ normalized {len(result.glyphs)} glyphs (dry run, nothing written)")
        return 0

    save_source(args.source, regenerate_source(text, result, args.name))
    print(f"✓ generated glyph paths written to {args.source}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
