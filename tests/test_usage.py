# Copyright (c) 2026 Huescheme
# SPDX-License-Identifier: MIT

"""Tests for usage statistics."""

import pytest

from huescheme.schema import ColorAliases, ColorOccurrence, ColorSample
from huescheme.scheme.usage import (
    INLINE_CATEGORY,
    MAX_RECOMMENDED_TOKENS,
    analyze_file_stats,
    calculate_analysis_metrics,
    hue_histogram,
)


def _occ(*files):
    return tuple(ColorOccurrence(file=f) for f in files)


class TestFileStats:

    def test_per_file(self):
        colors = {
            "red": ColorSample("#ff0000", occurrences=_occ("a.css", "a.css", "b.css")),
            "green": ColorSample("#00ff00", occurrences=_occ("b.css")),
        }
        stats = analyze_file_stats(colors)

        assert list(stats) == ["a.css", "b.css"]
        assert stats["a.css"].unique_colors == 1
        assert stats["a.css"].total_occurrences == 2
        assert stats["a.css"].most_used_color == "#ff0000"
        assert stats["b.css"].unique_colors == 2
        assert stats["b.css"].colors == ("#ff0000", "#00ff00")

    def test_most_used_tie_is_first_seen(self):
        colors = {
            "green": ColorSample("#00ff00", occurrences=_occ("a.css")),
            "red": ColorSample("#ff0000", occurrences=_occ("a.css")),
        }
        assert analyze_file_stats(colors)["a.css"].most_used_color == "#00ff00"

    def test_most_used(self):
        colors = {
            "green": ColorSample("#00ff00", occurrences=_occ("a.css")),
            "red": ColorSample("#ff0000", occurrences=_occ("a.css", "a.css")),
        }
        assert analyze_file_stats(colors)["a.css"].most_used_color == "#ff0000"

    def test_no_occurrences(self):
        assert analyze_file_stats({"x": ColorSample("#000000")}) == {}


class TestAnalysisMetrics:

    def test_coverage(self):
        colors = {
            "token": ColorSample("#000001", aliases=ColorAliases(design_tokens=("color.a",))),
            "tw": ColorSample("#000002", aliases=ColorAliases(tailwind_classes=("bg-red-500",))),
            "global": ColorSample("#000003", usage_pattern="global-design-system"),
            "inline": ColorSample("#000004", primary_category=INLINE_CATEGORY,
                                  occurrences=_occ("a.tsx", "b.tsx")),
            "plain": ColorSample("#000005", occurrences=_occ("c.css")),
        }
        metrics = calculate_analysis_metrics(colors)

        assert metrics.total_colors == 5
        assert metrics.total_occurrences == 3
        assert metrics.design_token_colors == 3
        assert metrics.inline_colors == 1
        assert metrics.coverage_percentage == 60
        assert metrics.orphaned_colors == 1
        assert metrics.recommended_tokens == 1

    def test_scss_alias_alone_is_not_a_token(self):
        colors = {"s": ColorSample("#000000", aliases=ColorAliases(scss_variables=("$red",)))}
        assert calculate_analysis_metrics(colors).design_token_colors == 0

    def test_coverage_rounds_half_up(self):
        colors = {f"c{i}": ColorSample(f"#00000{i}") for i in range(8)}
        colors["c0"] = ColorSample("#000000", aliases=ColorAliases(design_tokens=("x",)))
        # 1 / 8 = 12.5%
        assert calculate_analysis_metrics(colors).coverage_percentage == 13

    def test_recommended_tokens_capped(self):
        colors = {
            f"c{i}": ColorSample(f"#0000{i:02x}", primary_category=INLINE_CATEGORY)
            for i in range(MAX_RECOMMENDED_TOKENS + 5)
        }
        metrics = calculate_analysis_metrics(colors)
        assert metrics.inline_colors == MAX_RECOMMENDED_TOKENS + 5
        assert metrics.recommended_tokens == MAX_RECOMMENDED_TOKENS

    def test_empty(self):
        metrics = calculate_analysis_metrics({})
        assert metrics.total_colors == 0
        assert metrics.coverage_percentage == 0


class TestHueHistogram:

    def test_buckets(self):
        samples = [ColorSample("#000000", hue=h) for h in (0.0, 5.0, 10.0, 359.9, 360.0)]
        counts = hue_histogram(samples)

        assert len(counts) == 36
        assert counts[0] == 2
        assert counts[1] == 1
        assert counts[35] == 2
        assert sum(counts) == 5

    def test_custom_bucket_count(self):
        samples = [ColorSample("#000000", hue=h) for h in (90.0, 270.0)]
        assert hue_histogram(samples, buckets=4) == (0, 1, 0, 1)

    def test_empty(self):
        assert hue_histogram([]) == (0,) * 36

    def test_invalid_buckets(self):
        with pytest.raises(ValueError, match="buckets"):
            hue_histogram([], buckets=0)
