# Copyright (c) 2026 Huescheme
# SPDX-License-Identifier: MIT

"""
Near-duplicate detection.

Groups extracted colors that sit within an RGB distance threshold of each
other, a sign that a codebase uses several almost-identical values where
one token would do.
"""

from __future__ import annotations

from itertools import combinations
from typing import Iterable

from huescheme.schema import ColorSample, SimilarColorGroup
from huescheme.scheme.colorspace import color_distance


def find_similar_colors(
    samples: Iterable[ColorSample],
    threshold: float = 20.0,
) -> tuple[SimilarColorGroup, ...]:
    """
    Group colors closer than threshold in RGB space.

    Greedy, in input order: each ungrouped sample seeds a group and pulls
    in every later ungrouped sample within threshold of the seed. A hex
    value already grouped is never grouped again. Only groups with more
    than one member are returned.

    Args:
        samples: Colors to compare
        threshold: Maximum RGB distance to the group seed (exclusive)

    Returns:
        Tuple of SimilarColorGroup in seed order
    """
    samples = list(samples)
    used: set[str] = set()
    groups: list[SimilarColorGroup] = []

    for seed in samples:
        if seed.hex_value in used:
            continue

        group = [seed]
        used.add(seed.hex_value)

        for other in samples:
            if other.hex_value in used:
                continue
            if color_distance(seed.hex_value, other.hex_value) < threshold:
                group.append(other)
                used.add(other.hex_value)

        if len(group) > 1:
            pairs = list(combinations(group, 2))
            average = sum(
                color_distance(a.hex_value, b.hex_value) for a, b in pairs
            ) / len(pairs)
            groups.append(SimilarColorGroup(colors=tuple(group), average_distance=average))

    return tuple(groups)
