# Copyright (c) 2026 Huescheme
# SPDX-License-Identifier: MIT

"""Tests for nearest-shade queries against generated schemes."""

import math

import pytest

from huescheme import (
    analyze_colors,
    find_closest_color_in_family,
    find_closest_scheme_color,
    find_closest_scheme_colors,
)
from huescheme.schema import ColorOccurrence, ColorSample, HueFamily
from huescheme.scheme.colorspace import INVALID_DISTANCE, rgb_distance
from huescheme.scheme.matcher import DEFAULT_MATCH


@pytest.fixture
def result():
    colors = {
        "primary": ColorSample("#339af0", occurrences=(ColorOccurrence("a.css"),)),
        "danger": ColorSample("#fa5252", occurrences=(ColorOccurrence("b.css"),)),
        "muted": ColorSample("#868e96", occurrences=(ColorOccurrence("c.css"),)),
    }
    return analyze_colors(colors)


class TestClosestSchemeColor:

    def test_every_shade_matches_itself(self, result):
        for scheme in result.schemes:
            for shade in scheme.shades:
                match = find_closest_scheme_color(shade, result)
                assert match.color == shade
                assert match.distance == 0.0

    def test_match_fields(self, result):
        blue = result.get_scheme(HueFamily.BLUE)
        match = find_closest_scheme_color(blue.shades[3], result)
        assert match.family is HueFamily.BLUE
        assert match.shade == 3
        assert match.scheme_name == "Blue"
        assert match.color_name == "blue-3"

    def test_distance_is_rgb(self, result):
        match = find_closest_scheme_color("#123456", result)
        assert match.distance == pytest.approx(rgb_distance("#123456", match.color))

    def test_no_shade_closer(self, result):
        match = find_closest_scheme_color("#7a3cc8", result)
        for scheme in result.schemes:
            for shade in scheme.shades:
                assert rgb_distance("#7a3cc8", shade) >= match.distance

    def test_no_schemes(self):
        assert find_closest_scheme_color("#339af0", analyze_colors({})) == DEFAULT_MATCH
        assert find_closest_scheme_color("#339af0", []) == DEFAULT_MATCH

    def test_default_match(self):
        assert DEFAULT_MATCH.color == "#000000"
        assert DEFAULT_MATCH.family is HueFamily.GRAY
        assert DEFAULT_MATCH.shade == 9
        assert math.isinf(DEFAULT_MATCH.distance)

    def test_invalid_query(self, result):
        match = find_closest_scheme_color("bogus", result)
        assert match.distance == INVALID_DISTANCE
        # every candidate ties, the first shade wins
        assert match.color == result.schemes[0].shades[0]

    def test_accepts_scheme_iterable(self, result):
        blue = result.get_scheme(HueFamily.BLUE)
        match = find_closest_scheme_color(blue.shades[7], iter(result.schemes))
        assert match.color == blue.shades[7]


class TestClosestSchemeColors:

    def test_ranked(self, result):
        matches = find_closest_scheme_colors("#4dabf7", result, count=8)
        assert len(matches) == 8
        distances = [m.distance for m in matches]
        assert distances == sorted(distances)

    def test_first_is_closest(self, result):
        matches = find_closest_scheme_colors("#4dabf7", result, count=3)
        assert matches[0] == find_closest_scheme_color("#4dabf7", result)

    def test_count_capped_by_candidates(self, result):
        total = sum(len(s.shades) for s in result.schemes)
        assert len(find_closest_scheme_colors("#000000", result, count=1000)) == total

    def test_default_count(self, result):
        assert len(find_closest_scheme_colors("#000000", result)) == 5

    def test_empty(self, result):
        assert find_closest_scheme_colors("#000000", [], count=3) == ()
        assert find_closest_scheme_colors("#000000", result, count=0) == ()

    def test_ties_keep_iteration_order(self, result):
        matches = find_closest_scheme_colors("bogus", result, count=3)
        first = result.schemes[0]
        assert [m.color for m in matches] == list(first.shades[:3])


class TestClosestColorInFamily:

    def test_scoped_to_family(self, result):
        red = result.get_scheme(HueFamily.RED)
        match = find_closest_color_in_family("#339af0", HueFamily.RED, result)
        assert match.family is HueFamily.RED
        assert match.color in red.shades

    def test_family_without_scheme(self, result):
        assert find_closest_color_in_family("#339af0", HueFamily.LIME, result) is None

    def test_exact_shade(self, result):
        gray = result.get_scheme(HueFamily.GRAY)
        match = find_closest_color_in_family(gray.shades[6], HueFamily.GRAY, result)
        assert match.shade == 6
        assert match.distance == 0.0
