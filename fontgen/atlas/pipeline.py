# fontgen/atlas/pipeline.py
"""Font to atlas: spec -> sample -> (metadata, image) -> BitmapFontAtlas."""

from __future__ import annotations

from dataclasses import dataclass, field

from fontgen import log
from fontgen.atlas.compositor import AtlasImage, create_bitmap_image
from fontgen.atlas.metadata import GlyphMetadata, create_bitmap_metadata
from fontgen.atlas.sampler import Rasterizer, sample_typeface
from fontgen.atlas.spec import AtlasSpec, Origin


@dataclass
class AtlasMetadata:
    """Packing parameters plus per-glyph metadata, as stored in the container."""

    origin: Origin
    width: int
    height: int
    rows: int
    columns: int
    padding: int
    slot_glyph_size: int
    glyph_size: int
    glyph_metadata: dict[int, GlyphMetadata] = field(default_factory=dict)

    @classmethod
    def from_spec(cls, spec: AtlasSpec, glyph_metadata: dict[int, GlyphMetadata]) -> "AtlasMetadata":
        return cls(
            origin=spec.origin,
            width=spec.width,
            height=spec.height,
            rows=spec.rows,
            columns=spec.columns,
            padding=spec.padding,
            slot_glyph_size=spec.slot_glyph_size,
            glyph_size=spec.glyph_size,
            glyph_metadata=glyph_metadata,
        )

    def serialize(self) -> dict:
        return {
            "origin": self.origin.value,
            "width": self.width,
            "height": self.height,
            "rows": self.rows,
            "columns": self.columns,
            "padding": self.padding,
            "slot_glyph_size": self.slot_glyph_size,
            "glyph_size": self.glyph_size,
            "glyph_metadata": {
                str(code_point): self.glyph_metadata[code_point].serialize()
                for code_point in sorted(self.glyph_metadata)
            },
        }

    @classmethod
    def deserialize(cls, data: dict) -> "AtlasMetadata":
        glyphs = {
            int(key): GlyphMetadata.deserialize(value)
            for key, value in data.get("glyph_metadata", {}).items()
        }
        return cls(
            origin=Origin(data["origin"]),
            width=int(data["width"]),
            height=int(data["height"]),
            rows=int(data["rows"]),
            columns=int(data["columns"]),
            padding=int(data["padding"]),
            slot_glyph_size=int(data["slot_glyph_size"]),
            glyph_size=int(data["glyph_size"]),
            glyph_metadata=glyphs,
        )


@dataclass
class BitmapFontAtlas:
    metadata: AtlasMetadata
    image: AtlasImage


def create_bitmap_atlas(rasterizer: Rasterizer, spec: AtlasSpec) -> BitmapFontAtlas:
    """Build the atlas. Errors from any stage propagate; nothing partial is returned."""
    glyph_table = sample_typeface(rasterizer, spec)
    glyph_metadata = create_bitmap_metadata(glyph_table, spec)
    image = create_bitmap_image(glyph_table, spec)

    log.info(
        f"[Atlas] {spec.width}x{spec.height} atlas, {len(glyph_metadata)} glyphs, "
        f"slot {spec.slot_glyph_size} px, padding {spec.padding} px"
    )
    return BitmapFontAtlas(AtlasMetadata.from_spec(spec, glyph_metadata), image)
