# fontgen/formats/text_metadata.py
"""
Plain-text glyph metadata.

One header comment line, then one line per glyph ordered by code point:

    code_point x_min width y_min height y_offset
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, TextIO

from fontgen.atlas.metadata import GlyphMetadata

HEADER = "# ascii_code prop_xMin prop_width prop_yMin prop_height prop_y_offset"


def dump_text_metadata(metadata: Mapping[int, GlyphMetadata], stream: TextIO) -> None:
    stream.write(HEADER + "\n")
    for code_point in sorted(metadata):
        glyph = metadata[code_point]
        stream.write(
            f"{code_point} {glyph.x_min:.6f} {glyph.width:.6f} "
            f"{glyph.y_min:.6f} {glyph.height:.6f} {glyph.y_offset:.6f}\n"
        )


def load_text_metadata(stream: TextIO, columns: int = 16) -> dict[int, GlyphMetadata]:
    """
    Parse the text format back into GlyphMetadata.

    The text format carries no grid position; row and column are recovered
    from the code point and the grid width.
    """
    metadata = {}
    for line_number, line in enumerate(stream, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        fields = line.split()
        if len(fields) != 6:
            raise ValueError(f"Line {line_number}: expected 6 fields, got {len(fields)}")

        code_point = int(fields[0])
        x_min, width, y_min, height, y_offset = (float(f) for f in fields[1:])
        order = max(code_point - 32, 0)
        metadata[code_point] = GlyphMetadata(
            code_point=code_point,
            row=order // columns,
            column=order % columns,
            width=width,
            height=height,
            x_min=x_min,
            y_min=y_min,
            y_offset=y_offset,
        )
    return metadata


def save_text_metadata(path: str | Path, metadata: Mapping[int, GlyphMetadata]) -> None:
    with open(path, "x", encoding="utf-8") as f:
        dump_text_metadata(metadata, f)
