# fontgen/atlas/metadata.py
"""Per-glyph UV metadata for addressing the atlas texture."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from fontgen.atlas.sampler import SPACE_CODE_POINT, GlyphTable
from fontgen.atlas.spec import AtlasSpec


@dataclass(frozen=True)
class GlyphMetadata:
    """
    Location of one glyph in the atlas.

    Sizes and offsets are normalized: x_min, y_min against the atlas size,
    width, height, y_offset against the slot size.
    """

    code_point: int
    row: int
    column: int
    width: float
    height: float
    x_min: float
    y_min: float
    y_offset: float

    def serialize(self) -> dict:
        return asdict(self)

    @classmethod
    def deserialize(cls, data: dict) -> "GlyphMetadata":
        return cls(
            code_point=int(data["code_point"]),
            row=int(data["row"]),
            column=int(data["column"]),
            width=float(data["width"]),
            height=float(data["height"]),
            x_min=float(data["x_min"]),
            y_min=float(data["y_min"]),
            y_offset=float(data["y_offset"]),
        )


# Space has no bitmap; half a slot of advance, full slot height.
SPACE_METADATA = GlyphMetadata(
    code_point=SPACE_CODE_POINT,
    row=0,
    column=0,
    width=0.5,
    height=1.0,
    x_min=0.0,
    y_min=0.0,
    y_offset=0.0,
)


def slot_position(code_point: int, spec: AtlasSpec) -> tuple[int, int]:
    """Grid (row, column) of the slot holding code_point."""
    order = code_point - SPACE_CODE_POINT
    return order // spec.columns, order % spec.columns


def create_bitmap_metadata(glyph_table: GlyphTable, spec: AtlasSpec) -> dict[int, GlyphMetadata]:
    """Compute the metadata table, keyed by code point."""
    slot = spec.slot_glyph_size
    metadata = {SPACE_CODE_POINT: SPACE_METADATA}

    for code_point in sorted(glyph_table):
        glyph = glyph_table[code_point]
        row, column = slot_position(code_point, spec)

        metadata[code_point] = GlyphMetadata(
            code_point=code_point,
            row=row,
            column=column,
            width=(glyph.width + spec.padding) / slot,
            height=(glyph.rows + spec.padding) / slot,
            x_min=(column * slot) / spec.width,
            y_min=(row * slot) / spec.height,
            y_offset=-(spec.padding - glyph.y_min) / slot,
        )

    return metadata
