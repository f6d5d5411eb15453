"""FreeType-backed tests. Skipped when no system font is available."""

import pytest

from fontgen.atlas.pipeline import create_bitmap_atlas
from fontgen.atlas.sampler import FreeTypeRasterizer, sample_typeface
from fontgen.atlas.spec import Origin, build_atlas_spec
from fontgen.errors import FontFileError
from fontgen.formats import bmfa
from fontgen.generate import generate_atlas


def test_open_invalid_font(tmp_path):
    pytest.importorskip("freetype")
    path = tmp_path / "broken.ttf"
    path.write_bytes(b"this is not a font")
    with pytest.raises(FontFileError) as info:
        FreeTypeRasterizer.open(path)
    assert info.value.path == path


def test_sample_real_font(system_font):
    rasterizer = FreeTypeRasterizer.open(system_font)
    spec = build_atlas_spec(32, 4)
    table = sample_typeface(rasterizer, spec)

    assert sorted(table) == list(range(33, 256))
    letter_a = table[ord("A")]
    assert letter_a.rows > 0
    assert letter_a.width > 0
    assert letter_a.pitch >= letter_a.width
    assert len(letter_a.data) == letter_a.rows * letter_a.pitch
    assert any(letter_a.data)
    # 'g' descends below the baseline
    assert table[ord("g")].y_min < 0


def test_real_font_atlas(system_font):
    rasterizer = FreeTypeRasterizer.open(system_font)
    atlas = create_bitmap_atlas(rasterizer, build_atlas_spec(16, 2, Origin.TOP_LEFT))
    assert atlas.image.width == 256
    assert atlas.image.data.any()
    # RGB equals alpha everywhere.
    data = atlas.image.data
    assert (data[:, :, 0] == data[:, :, 3]).all()


def test_generate_from_real_font(tmp_path, system_font):
    generate_atlas(system_font, tmp_path / "font.bmfa", slot_glyph_size=16)
    loaded = bmfa.load_from_file(tmp_path / "font.bmfa")
    assert loaded.metadata.origin == Origin.BOTTOM_LEFT
    assert len(loaded.metadata.glyph_metadata) == 224
