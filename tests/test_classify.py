# Copyright (c) 2026 Huescheme
# SPDX-License-Identifier: MIT

"""Tests for hue classification and the reference palette table."""

import numpy as np
import pytest

from huescheme.schema import HueFamily, SHADE_COUNT
from huescheme.scheme.classify import (
    classify_hue,
    group_by_family,
    is_chromatic,
    nearest_family_for_hue,
    nearest_reference_entry,
    nearest_reference_shade,
)
from huescheme.scheme.colorspace import INVALID_DISTANCE, hex_to_hsl, hsl_to_hex
from huescheme.scheme.reference import (
    CHROMATIC_FAMILIES,
    REFERENCE_FAMILIES,
    SPECTRAL_ORDER,
    UNKNOWN_SPECTRAL_INDEX,
    reference_palette,
    spectral_index,
)


class TestReferenceTable:

    def test_thirteen_families(self):
        assert len(REFERENCE_FAMILIES) == 13
        assert set(REFERENCE_FAMILIES) == set(HueFamily)

    def test_table_order_matches_enum(self):
        assert list(REFERENCE_FAMILIES) == list(HueFamily)

    def test_twelve_chromatic(self):
        assert len(CHROMATIC_FAMILIES) == 12
        assert all(not ref.family.is_neutral for ref in CHROMATIC_FAMILIES)

    def test_shades_light_to_dark(self):
        for ref in REFERENCE_FAMILIES.values():
            lightness = [hex_to_hsl(s)[2] for s in ref.shades]
            assert lightness[0] > lightness[-1]
            assert len(ref.shades) == SHADE_COUNT

    def test_representative_is_shade_five(self):
        assert REFERENCE_FAMILIES[HueFamily.BLUE].color == "#339af0"

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            REFERENCE_FAMILIES[HueFamily.RED] = None

    def test_reference_palette_is_fresh_copy(self):
        palette = reference_palette()
        palette[HueFamily.RED] = ()
        assert reference_palette()[HueFamily.RED] == REFERENCE_FAMILIES[HueFamily.RED].shades


class TestSpectralOrder:

    def test_gray_last(self):
        assert SPECTRAL_ORDER[-1] is HueFamily.GRAY
        assert spectral_index(HueFamily.GRAY) == 12

    def test_red_first(self):
        assert spectral_index(HueFamily.RED) == 0

    def test_covers_every_family(self):
        assert set(SPECTRAL_ORDER) == set(HueFamily)

    def test_unknown_sorts_last(self):
        assert spectral_index("not-a-family") == UNKNOWN_SPECTRAL_INDEX


class TestClassifyHue:

    def test_gray_is_neutral(self):
        assert classify_hue("#888888") is HueFamily.GRAY

    @pytest.mark.parametrize("hue", [0.0, 120.0, 200.0, 300.0])
    def test_low_saturation_always_neutral(self, hue):
        assert classify_hue(hsl_to_hex(hue, 10.0, 50.0)) is HueFamily.GRAY

    def test_saturation_threshold(self):
        assert not is_chromatic(14.9)
        assert is_chromatic(15.0)

    @pytest.mark.parametrize("hex_value, family", [
        ("#ff0000", HueFamily.RED),
        ("#339af0", HueFamily.BLUE),
        ("#ff922b", HueFamily.ORANGE),
        ("#51cf66", HueFamily.GREEN),
        ("#845ef7", HueFamily.VIOLET),
        ("#f06595", HueFamily.PINK),
    ])
    def test_chromatic_families(self, hex_value, family):
        assert classify_hue(hex_value) is family

    def test_wraparound_red(self):
        """A hue of 350° is 10° from red, 22° from pink."""
        assert nearest_family_for_hue(350.0) is HueFamily.RED

    def test_tie_goes_to_table_order(self):
        # 141° is 21° from both teal (162°) and green (120°); teal comes first
        assert nearest_family_for_hue(141.0) is HueFamily.TEAL
        # 12.5° is equidistant from red and orange; red comes first
        assert nearest_family_for_hue(12.5) is HueFamily.RED

    def test_never_returns_gray_for_hue(self):
        for hue in np.arange(0.0, 360.0, 7.5):
            assert nearest_family_for_hue(float(hue)) is not HueFamily.GRAY

    def test_invalid_is_neutral(self):
        assert classify_hue("not-a-color") is HueFamily.GRAY


class TestGroupByFamily:

    def test_every_family_present(self):
        grouped = group_by_family([])
        assert list(grouped) == list(HueFamily)
        assert all(members == [] for members in grouped.values())

    def test_partition(self):
        colors = ["#ff0000", "#339af0", "#888888", "#ff0000", "bogus", "#51cf66"]
        grouped = group_by_family(colors)
        flattened = [c for members in grouped.values() for c in members]
        assert sorted(flattened) == sorted(colors)
        assert grouped[HueFamily.RED] == ["#ff0000", "#ff0000"]
        assert grouped[HueFamily.GRAY] == ["#888888", "bogus"]


class TestNearestReferenceEntry:

    def test_shade_bounds(self):
        assert nearest_reference_shade(100.0) == 0
        assert nearest_reference_shade(0.0) == 9
        assert nearest_reference_shade(150.0) == 0
        assert nearest_reference_shade(-10.0) == 9

    def test_shade_rounds_half_up(self):
        assert nearest_reference_shade(50.0) == 5

    def test_blue(self):
        # L ≈ 57.1 → round(0.429 * 9) = 4 → #4dabf7
        entry = nearest_reference_entry("#339af0")
        assert entry.family is HueFamily.BLUE
        assert entry.shade == 4
        assert entry.distance == pytest.approx(np.sqrt(1014))

    def test_white(self):
        entry = nearest_reference_entry("#ffffff")
        assert entry.family is HueFamily.GRAY
        assert entry.shade == 0
        assert entry.distance == pytest.approx(np.sqrt(110))

    def test_lightness_decides_shade_not_reference_position(self):
        # #c92a2a is red-9 in the table, but L ≈ 47.6 maps to shade 5 (#ff6b6b)
        entry = nearest_reference_entry("#c92a2a")
        assert entry.family is HueFamily.RED
        assert entry.shade == 5
        assert entry.distance == pytest.approx(np.sqrt(54**2 + 65**2 + 65**2))

    def test_invalid(self):
        entry = nearest_reference_entry("bogus")
        assert entry.family is HueFamily.GRAY
        assert entry.shade == 9
        assert entry.distance == INVALID_DISTANCE
