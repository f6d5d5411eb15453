# fontgen/atlas/spec.py
"""Atlas geometry: grid dimensions derived from slot size and padding."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fontgen.errors import (
    InvalidOrigin,
    PaddingLargerThanSlotGlyphSize,
    SlotGlyphSizeCannotBeZero,
)

# 16 x 16 slots cover one byte worth of code points.
ATLAS_COLUMNS = 16
ATLAS_ROWS = 16

DEFAULT_SLOT_GLYPH_SIZE = 64
DEFAULT_PADDING = 0


class Origin(Enum):
    """Origin of the coordinate chart used to index into the atlas image."""

    TOP_LEFT = "TopLeft"
    BOTTOM_LEFT = "BottomLeft"

    @classmethod
    def parse(cls, token: str) -> "Origin":
        """Parse a command-line token ("top-left" or "bottom-left")."""
        if token == "bottom-left":
            return cls.BOTTOM_LEFT
        if token == "top-left":
            return cls.TOP_LEFT
        raise InvalidOrigin(token)


DEFAULT_ORIGIN = Origin.BOTTOM_LEFT


@dataclass(frozen=True)
class AtlasSpec:
    """
    Dimensions of the atlas and of each glyph slot in it.

    Built with build_atlas_spec(), which checks the invariants:
    width == columns * slot_glyph_size, height == rows * slot_glyph_size,
    glyph_size == slot_glyph_size - padding.
    """

    # Origin and coordinate chart of the atlas image
    origin: Origin
    # Atlas size in pixels
    width: int
    height: int
    # Number of glyph slots per column
    rows: int
    # Number of glyph slots per row
    columns: int
    # Pixels reserved inside each slot for outlines
    padding: int
    # Size of one grid cell in pixels, padding included
    slot_glyph_size: int
    # Raster size of a glyph inside the slot
    glyph_size: int


def build_atlas_spec(
    slot_glyph_size: int = DEFAULT_SLOT_GLYPH_SIZE,
    padding: int = DEFAULT_PADDING,
    origin: Origin = DEFAULT_ORIGIN,
    columns: int = ATLAS_COLUMNS,
    rows: int = ATLAS_ROWS,
) -> AtlasSpec:
    """Derive the atlas geometry. Raises ConfigurationError on bad input."""
    if slot_glyph_size <= 0:
        raise SlotGlyphSizeCannotBeZero(slot_glyph_size)
    if padding < 0 or padding > slot_glyph_size:
        raise PaddingLargerThanSlotGlyphSize(padding, slot_glyph_size)

    return AtlasSpec(
        origin=origin,
        width=columns * slot_glyph_size,
        height=rows * slot_glyph_size,
        rows=rows,
        columns=columns,
        padding=padding,
        slot_glyph_size=slot_glyph_size,
        glyph_size=slot_glyph_size - padding,
    )
