"""fontgen - convert TrueType/OpenType fonts into bitmap font atlases."""

from fontgen.atlas import (
    AtlasImage,
    AtlasMetadata,
    AtlasSpec,
    BitmapFontAtlas,
    GlyphMetadata,
    Origin,
    build_atlas_spec,
    create_bitmap_atlas,
)

__version__ = "0.1.0"

__all__ = [
    "AtlasImage",
    "AtlasMetadata",
    "AtlasSpec",
    "BitmapFontAtlas",
    "GlyphMetadata",
    "Origin",
    "build_atlas_spec",
    "create_bitmap_atlas",
]
