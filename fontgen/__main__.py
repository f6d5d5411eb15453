"""
Command-line entry point for fontgen.

Usage:
    python -m fontgen -i font.ttf -o font.bmfa --slot-glyph-size 64 --padding 4
"""

import argparse
import sys

from fontgen import log
from fontgen.atlas.spec import DEFAULT_PADDING, DEFAULT_SLOT_GLYPH_SIZE
from fontgen.errors import FontGenError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fontgen",
        description="A shell utility for converting TrueType or OpenType fonts into bitmapped fonts.",
    )
    parser.add_argument(
        "--input", "-i",
        dest="input_path",
        type=str,
        required=True,
        help="Path to the input font file",
    )
    parser.add_argument(
        "--output", "-o",
        dest="output_path",
        type=str,
        required=True,
        help="Path to the output atlas (extension is replaced with .bmfa)",
    )
    parser.add_argument(
        "--slot-glyph-size",
        type=int,
        default=DEFAULT_SLOT_GLYPH_SIZE,
        help=f"Size of a glyph slot in pixels, padding included (default: {DEFAULT_SLOT_GLYPH_SIZE})",
    )
    parser.add_argument(
        "--padding", "-p",
        type=int,
        default=DEFAULT_PADDING,
        help=f"Padding inside each glyph slot in pixels (default: {DEFAULT_PADDING})",
    )
    parser.add_argument(
        "--origin",
        type=str,
        default="bottom-left",
        help="Origin of the atlas image coordinates: bottom-left or top-left (default: bottom-left)",
    )
    parser.add_argument(
        "--text-metadata",
        action="store_true",
        help="Also write glyph metadata as a plain-text .txt file next to the atlas",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print debug output",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    log.configure(verbose=args.verbose)

    from fontgen.atlas.spec import Origin
    from fontgen.generate import generate_atlas

    try:
        origin = Origin.parse(args.origin)
        generate_atlas(
            input_path=args.input_path,
            output_path=args.output_path,
            slot_glyph_size=args.slot_glyph_size,
            padding=args.padding,
            origin=origin,
            text_metadata=args.text_metadata,
        )
    except FontGenError as e:
        if e.__cause__ is not None:
            log.debug(e.__cause__, "Caused by")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
