# fontgen/generate.py
"""File-level driver: open a font, build the atlas, write the container."""

from __future__ import annotations

from pathlib import Path

from fontgen import log
from fontgen.atlas.pipeline import BitmapFontAtlas, create_bitmap_atlas
from fontgen.atlas.sampler import FreeTypeRasterizer
from fontgen.atlas.spec import (
    DEFAULT_ORIGIN,
    DEFAULT_PADDING,
    DEFAULT_SLOT_GLYPH_SIZE,
    Origin,
    build_atlas_spec,
)
from fontgen.errors import (
    AtlasWriteError,
    InputFileDoesNotExist,
    InputFileIsNotAFile,
    OutputFileExists,
)
from fontgen.formats import bmfa
from fontgen.formats.text_metadata import save_text_metadata


def text_metadata_path_for(atlas_path: str | Path) -> Path:
    return Path(atlas_path).with_suffix(".txt")


def verify_paths(input_path: str | Path, output_path: str | Path) -> None:
    """Pre-flight checks on the input font and the output location."""
    input_path = Path(input_path)
    output_path = Path(output_path)
    if not input_path.exists():
        raise InputFileDoesNotExist(input_path)
    if not input_path.is_file():
        raise InputFileIsNotAFile(input_path)
    if output_path.exists():
        raise OutputFileExists(output_path)


def generate_atlas(
    input_path: str | Path,
    output_path: str | Path,
    slot_glyph_size: int = DEFAULT_SLOT_GLYPH_SIZE,
    padding: int = DEFAULT_PADDING,
    origin: Origin = DEFAULT_ORIGIN,
    text_metadata: bool = False,
) -> BitmapFontAtlas:
    """
    Convert a TrueType/OpenType font into a .bmfa atlas file.

    The spec is validated before the font is touched. Files are written only
    after the whole atlas has been built.

    Returns:
        The atlas that was written.
    """
    spec = build_atlas_spec(slot_glyph_size, padding, origin)
    verify_paths(input_path, output_path)

    atlas_path = bmfa.atlas_path_for(output_path)
    if atlas_path.exists():
        raise OutputFileExists(atlas_path)
    text_path = text_metadata_path_for(atlas_path) if text_metadata else None
    if text_path is not None and text_path.exists():
        raise OutputFileExists(text_path)

    log.debug(f"[Generate] opening {input_path}")
    rasterizer = FreeTypeRasterizer.open(input_path)
    atlas = create_bitmap_atlas(rasterizer, spec)

    bmfa.write_to_file(atlas_path, atlas)
    if text_path is not None:
        try:
            save_text_metadata(text_path, atlas.metadata.glyph_metadata)
        except OSError as e:
            # The atlas and its sidecar are written together or not at all.
            atlas_path.unlink(missing_ok=True)
            raise AtlasWriteError(text_path) from e
        log.info(f"[Generate] wrote {text_path}")

    return atlas
