# fontgen/formats/bmfa.py
"""
Bitmap font atlas container (.bmfa).

A zip archive holding two members:
    metadata.json - packing parameters and per-glyph metadata
    atlas.png     - RGBA atlas image

The image is stored exactly as composed; the origin recorded in the metadata
tells readers how rows are addressed.
"""

from __future__ import annotations

import io
import json
import zipfile
from pathlib import Path

import numpy as np
from PIL import Image

from fontgen import log
from fontgen.atlas.compositor import AtlasImage
from fontgen.atlas.pipeline import AtlasMetadata, BitmapFontAtlas
from fontgen.errors import AtlasReadError, AtlasWriteError

EXTENSION = ".bmfa"
METADATA_MEMBER = "metadata.json"
IMAGE_MEMBER = "atlas.png"


def atlas_path_for(output_path: str | Path) -> Path:
    """Output path with its extension replaced by .bmfa."""
    return Path(output_path).with_suffix(EXTENSION)


def write_rgba_image(path: str | Path, width: int, height: int, data: bytes) -> None:
    """Encode a raw RGBA buffer as a PNG file."""
    image = Image.frombytes("RGBA", (width, height), bytes(data))
    image.save(str(path), format="PNG")


def _encode_png(image: AtlasImage) -> bytes:
    stream = io.BytesIO()
    Image.fromarray(image.data).save(stream, format="PNG")
    return stream.getvalue()


def write_to_file(path: str | Path, atlas: BitmapFontAtlas) -> None:
    """
    Write the atlas container. Raises AtlasWriteError on failure.

    Both members are encoded before the file is created; a failed write
    removes the file it created.
    """
    path = Path(path)
    created = False
    try:
        metadata_json = json.dumps(atlas.metadata.serialize(), indent=2)
        png = _encode_png(atlas.image)
        with zipfile.ZipFile(path, "x", compression=zipfile.ZIP_DEFLATED) as archive:
            created = True
            archive.writestr(METADATA_MEMBER, metadata_json)
            archive.writestr(IMAGE_MEMBER, png)
    except OSError as e:
        if created:
            path.unlink(missing_ok=True)
        raise AtlasWriteError(path) from e
    log.info(f"[bmfa] wrote {path}")


def load_from_file(path: str | Path) -> BitmapFontAtlas:
    """Read an atlas container written by write_to_file(). Raises AtlasReadError."""
    path = Path(path)
    try:
        with zipfile.ZipFile(path, "r") as archive:
            metadata_data = json.loads(archive.read(METADATA_MEMBER).decode("utf-8"))
            png = archive.read(IMAGE_MEMBER)
        metadata = AtlasMetadata.deserialize(metadata_data)
        # UnidentifiedImageError is an OSError.
        with Image.open(io.BytesIO(png)) as img:
            pixels = np.array(img.convert("RGBA"), dtype=np.uint8)
    except (OSError, KeyError, TypeError, ValueError, zipfile.BadZipFile) as e:
        raise AtlasReadError(path, str(e)) from e

    if pixels.shape[:2] != (metadata.height, metadata.width):
        raise AtlasReadError(
            path,
            f"Image is {pixels.shape[1]}x{pixels.shape[0]}, "
            f"metadata says {metadata.width}x{metadata.height}.",
        )
    return BitmapFontAtlas(metadata, AtlasImage(pixels, metadata.origin))
