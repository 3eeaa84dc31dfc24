# Copyright (c) 2026 Huescheme
# SPDX-License-Identifier: MIT

"""
Usage statistics over an extracted color collection.

Counts where colors are used and how much of the collection is already
covered by design tokens.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Mapping

import numpy as np

from huescheme.schema import AnalysisMetrics, ColorSample, FileStats


# Category assigned by the extractor to colors written inline
INLINE_CATEGORY = "inline-style"

# Usage pattern for colors defined in the global design system
DESIGN_SYSTEM_PATTERN = "global-design-system"

# Cap on how many new tokens to recommend
MAX_RECOMMENDED_TOKENS = 20


def _most_used(colors: list[str]) -> str:
    """Most frequent color; ties go to the first seen."""
    if not colors:
        return ""
    return Counter(colors).most_common(1)[0][0]


def analyze_file_stats(colors: Mapping[str, ColorSample]) -> dict[str, FileStats]:
    """
    Per-file color usage.

    Returns:
        {file path: FileStats}, files in first-seen order. FileStats.colors
        has one entry per occurrence.
    """
    per_file: dict[str, list[str]] = {}

    for sample in colors.values():
        for occurrence in sample.occurrences:
            per_file.setdefault(occurrence.file, []).append(sample.hex_value)

    return {
        path: FileStats(
            unique_colors=len(set(hexes)),
            total_occurrences=len(hexes),
            most_used_color=_most_used(hexes),
            colors=tuple(hexes),
        )
        for path, hexes in per_file.items()
    }


def _is_design_token(sample: ColorSample) -> bool:
    return (
        len(sample.aliases.design_tokens) > 0
        or len(sample.aliases.tailwind_classes) > 0
        or sample.usage_pattern == DESIGN_SYSTEM_PATTERN
    )


def calculate_analysis_metrics(colors: Mapping[str, ColorSample]) -> AnalysisMetrics:
    """
    Design-system adoption metrics.

    coverage_percentage is the rounded share of colors backed by a design
    token, Tailwind class or the global design system; 0 for no colors.
    """
    samples = list(colors.values())
    total = len(samples)

    design_token_colors = sum(1 for s in samples if _is_design_token(s))
    inline_colors = sum(1 for s in samples if s.primary_category == INLINE_CATEGORY)
    coverage = int(np.floor(design_token_colors / total * 100 + 0.5)) if total else 0

    return AnalysisMetrics(
        total_colors=total,
        total_occurrences=sum(s.occurrence_count for s in samples),
        design_token_colors=design_token_colors,
        inline_colors=inline_colors,
        coverage_percentage=coverage,
        orphaned_colors=inline_colors,
        recommended_tokens=min(inline_colors, MAX_RECOMMENDED_TOKENS),
    )


def hue_histogram(samples: Iterable[ColorSample], buckets: int = 36) -> tuple[int, ...]:
    """
    Count colors per hue bucket for color-wheel display.

    Uses each sample's reported hue. Bucket i covers
    [i * 360/buckets, (i+1) * 360/buckets); hue 360 lands in the last bucket.
    """
    if buckets <= 0:
        raise ValueError(f"buckets must be positive, got {buckets}")

    hues = np.array([s.hue for s in samples], dtype=np.float64)
    counts = np.zeros(buckets, dtype=np.int64)
    if hues.size == 0:
        return tuple(int(c) for c in counts)

    index = np.floor(hues / (360.0 / buckets)).astype(np.int64)
    index = np.clip(index, 0, buckets - 1)
    np.add.at(counts, index, 1)

    return tuple(int(c) for c in counts)
