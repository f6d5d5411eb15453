"""Glyph sampling, grid packing and metadata derivation."""

from fontgen.atlas.spec import AtlasSpec, Origin, build_atlas_spec
from fontgen.atlas.sampler import (
    BoundingBox,
    CoverageBitmap,
    FreeTypeRasterizer,
    GlyphRecord,
    GlyphTable,
    Rasterizer,
    sample_typeface,
)
from fontgen.atlas.metadata import GlyphMetadata, create_bitmap_metadata
from fontgen.atlas.compositor import AtlasImage, create_bitmap_image, flip_vertical
from fontgen.atlas.pipeline import AtlasMetadata, BitmapFontAtlas, create_bitmap_atlas

__all__ = [
    "AtlasSpec",
    "Origin",
    "build_atlas_spec",
    "BoundingBox",
    "CoverageBitmap",
    "FreeTypeRasterizer",
    "GlyphRecord",
    "GlyphTable",
    "Rasterizer",
    "sample_typeface",
    "GlyphMetadata",
    "create_bitmap_metadata",
    "AtlasImage",
    "create_bitmap_image",
    "flip_vertical",
    "AtlasMetadata",
    "BitmapFontAtlas",
    "create_bitmap_atlas",
]
