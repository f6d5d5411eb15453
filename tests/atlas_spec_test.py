"""Tests for atlas geometry."""

import dataclasses

import pytest

from fontgen.atlas.spec import (
    ATLAS_COLUMNS,
    ATLAS_ROWS,
    AtlasSpec,
    Origin,
    build_atlas_spec,
)
from fontgen.errors import (
    ConfigurationError,
    InvalidOrigin,
    PaddingLargerThanSlotGlyphSize,
    SlotGlyphSizeCannotBeZero,
)


def test_default_spec_is_1024_square():
    spec = build_atlas_spec(64, 0)
    assert spec.width == 1024
    assert spec.height == 1024
    assert spec.rows == ATLAS_ROWS == 16
    assert spec.columns == ATLAS_COLUMNS == 16
    assert spec.glyph_size == 64
    assert spec.origin == Origin.BOTTOM_LEFT


@pytest.mark.parametrize("slot,padding", [(1, 0), (1, 1), (7, 3), (32, 32), (64, 5), (100, 99)])
def test_geometry_invariants(slot, padding):
    spec = build_atlas_spec(slot, padding, Origin.TOP_LEFT)
    assert spec.columns * spec.slot_glyph_size == spec.width
    assert spec.rows * spec.slot_glyph_size == spec.height
    assert spec.glyph_size == spec.slot_glyph_size - spec.padding
    assert spec.padding <= spec.slot_glyph_size
    assert spec.origin == Origin.TOP_LEFT


def test_zero_slot_size_rejected():
    with pytest.raises(SlotGlyphSizeCannotBeZero):
        build_atlas_spec(0, 0)


def test_padding_larger_than_slot_rejected():
    with pytest.raises(PaddingLargerThanSlotGlyphSize) as info:
        build_atlas_spec(16, 17)
    assert info.value.padding == 17
    assert info.value.slot_glyph_size == 16
    assert "17 pixels" in str(info.value)


def test_padding_equal_to_slot_is_allowed():
    spec = build_atlas_spec(16, 16)
    assert spec.glyph_size == 0


def test_negative_values_are_configuration_errors():
    with pytest.raises(ConfigurationError):
        build_atlas_spec(-4, 0)
    with pytest.raises(ConfigurationError):
        build_atlas_spec(16, -1)


def test_spec_is_immutable():
    spec = build_atlas_spec(32, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        spec.padding = 4


def test_origin_parse():
    assert Origin.parse("bottom-left") == Origin.BOTTOM_LEFT
    assert Origin.parse("top-left") == Origin.TOP_LEFT


@pytest.mark.parametrize("token", ["", "Top-Left", "bottom_left", "center"])
def test_origin_parse_rejects_unknown_tokens(token):
    with pytest.raises(InvalidOrigin) as info:
        Origin.parse(token)
    assert info.value.token == token


def test_spec_equality():
    assert build_atlas_spec(32, 2) == AtlasSpec(
        origin=Origin.BOTTOM_LEFT,
        width=512,
        height=512,
        rows=16,
        columns=16,
        padding=2,
        slot_glyph_size=32,
        glyph_size=30,
    )
